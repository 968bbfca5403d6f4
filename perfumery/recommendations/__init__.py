"""
Quiz-driven recommendation engine.

Responsibilities:
- Derive a personality archetype from quiz answers.
- Drop excluded perfumes from the catalog snapshot.
- Score candidates on profile, season, occasion, performance and uniqueness.
- Rank, pick alternatives and package the response with tips.
- Offer a simple aroma-tag overlap recommender.
"""
