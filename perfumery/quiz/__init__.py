"""
Personality quiz responses.

Responsibilities:
- Keep submitted quiz responses in process.
- Report which scent families, lifestyles and seasons respondents pick.
"""
