"""
Perfume reviews.

Responsibilities:
- Validate and store reviews in process.
- Filter, sort and page a perfume's reviews.
- Track helpful votes and abuse reports.
- Summarise reviews per perfume.
"""
