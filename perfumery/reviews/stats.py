from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pandas as pd

from .config import DEFAULT_REVIEW_CONFIG, ReviewConfig
from .models import LONGEVITY_RATINGS, SILLAGE_RATINGS, PopularUsage, Review, ReviewStats


def _popular(column: pd.Series, limit: int) -> list[PopularUsage]:
    counts = column.explode().dropna().value_counts()
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return [PopularUsage(occasion=str(name), count=int(count)) for name, count in ranked[:limit]]


def _distribution(column: pd.Series, scale: list[str]) -> pd.Series:
    return column.value_counts().reindex(scale, fill_value=0)


def compute_review_stats(
    reviews: list[Review],
    perfume_id: int,
    now: datetime | None = None,
    config: ReviewConfig = DEFAULT_REVIEW_CONFIG,
) -> ReviewStats:
    """Aggregate every review of *perfume_id*.

    ``now`` must be timezone-aware; it defaults to the current UTC time.
    """
    rows = [r.model_dump() for r in reviews if r.perfume_id == perfume_id]
    if not rows:
        return ReviewStats(
            perfume_id=perfume_id,
            rating_distribution={i: 0 for i in range(1, 6)},
            longevity_distribution={k: 0 for k in LONGEVITY_RATINGS},
            sillage_distribution={k: 0 for k in SILLAGE_RATINGS},
        )

    df = pd.DataFrame(rows)
    total = len(df)

    ratings = df["overall_rating"].value_counts().reindex(range(1, 6), fill_value=0)
    longevity = _distribution(df["longevity_rating"], LONGEVITY_RATINGS)
    sillage = _distribution(df["sillage_rating"], SILLAGE_RATINGS)

    avg_overall = float(df["overall_rating"].mean())
    helpful_per_review = float(df["helpful_count"].sum()) / total
    avg_comment_length = float(df["comment"].str.len().mean())

    now = now or datetime.now(timezone.utc)
    cutoff = pd.Timestamp(now - timedelta(days=config.recent_window_days))
    created = pd.to_datetime(df["created_at"], utc=True)

    return ReviewStats(
        perfume_id=perfume_id,
        total_reviews=total,
        average_overall_rating=round(avg_overall, 2),
        average_longevity_rating=str(longevity.idxmax()) if longevity.max() > 0 else "",
        average_sillage_rating=str(sillage.idxmax()) if sillage.max() > 0 else "",
        average_value_rating=round(float(df["value_rating"].mean()), 2),
        rating_distribution={int(k): int(v) for k, v in ratings.items()},
        longevity_distribution={str(k): int(v) for k, v in longevity.items()},
        sillage_distribution={str(k): int(v) for k, v in sillage.items()},
        popular_occasions=_popular(df["occasions"], config.popular_usage_limit),
        popular_seasons=_popular(df["seasons"], config.popular_usage_limit),
        would_repurchase_percentage=round(float(df["would_repurchase"].mean()) * 100, 2),
        verified_purchase_percentage=round(float(df["is_verified_purchase"].mean()) * 100, 2),
        helpful_votes_per_review=round(helpful_per_review, 2),
        recent_reviews_count=int((created >= cutoff).sum()),
        engagement_score=round((avg_overall + helpful_per_review + avg_comment_length / 100) / 3, 2),
    )
