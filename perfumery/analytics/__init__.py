"""
Request analytics.

Responsibilities:
- Keep an in-process log of recommendation requests.
- Summarise the log into usage statistics.
"""
