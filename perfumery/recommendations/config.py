"""
Scoring configuration for the multi-factor recommender.

Every weight and bonus magnitude the scorer uses lives in ``ScoringConfig``
so that a change to the algorithm shows up as a change to exactly one value.

Overall score::

    0.4 x profile + 0.2 x season + 0.2 x occasion
      + 0.1 x performance + 0.1 x uniqueness
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_weights() -> dict[str, float]:
    return {
        "profile": 0.4,
        "season": 0.2,
        "occasion": 0.2,
        "performance": 0.1,
        "uniqueness": 0.1,
    }


@dataclass(frozen=True)
class ScoringConfig:
    weights: dict[str, float] = field(default_factory=_default_weights)

    # Profile match
    profile_base: float = 0.5
    profile_family_bonus: float = 0.2

    # Season match
    season_base: float = 0.6
    season_keyword_bonus: float = 0.3

    # Occasion match
    occasion_base: float = 0.6
    occasion_bonus: float = 0.3
    occasion_professional_bonus: float = 0.1
    casual_price_ceiling: float = 150.0
    special_price_floor: float = 100.0

    # Performance match
    performance_base: float = 0.5
    longevity_bonus: float = 0.3
    sillage_bonus: float = 0.2

    # Uniqueness (replaces, never adds)
    uniqueness_default: float = 0.5
    uniqueness_premium: float = 0.8
    uniqueness_standard: float = 0.6
    safe_bet_value: float = 0.7
    premium_price_floor: float = 200.0
    safe_bet_price_ceiling: float = 100.0

    confidence_margin: float = 0.1
    reason_threshold: float = 0.7
    value_price_ceiling: float = 100.0

    default_max_results: int = 6
    max_alternatives: int = 3

    # Simple aroma-tag recommender
    aroma_base: float = 0.5
    aroma_match_bonus: float = 0.3
    aroma_max_results: int = 6


DEFAULT_SCORING_CONFIG = ScoringConfig()
