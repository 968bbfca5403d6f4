from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReviewConfig:
    default_limit: int = 50
    max_limit: int = 100
    recent_window_days: int = 30
    popular_usage_limit: int = 5


DEFAULT_REVIEW_CONFIG = ReviewConfig()
