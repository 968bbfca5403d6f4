from __future__ import annotations

from ..catalog.models import Perfume
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .models import AdvancedRecommendationResult


def filter_candidates(perfumes: list[Perfume], exclude_ids: list[int] | set[int]) -> list[Perfume]:
    """Drop excluded perfumes, keeping catalog order for the rest."""
    excluded = set(exclude_ids)
    if not excluded:
        return list(perfumes)
    return [p for p in perfumes if p.id not in excluded]


def normalize_max_results(max_results: int, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> int:
    return max_results if max_results > 0 else config.default_max_results


def rank(
    results: list[AdvancedRecommendationResult],
    max_results: int,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> tuple[list[AdvancedRecommendationResult], list[AdvancedRecommendationResult]]:
    """Sort by overall score and split into (selected, remainder).

    ``sorted`` is stable, so equal scores keep their catalog order.
    Selected results carry their 1-based position in ``rank``.
    """
    ordered = sorted(results, key=lambda r: r.overall_score, reverse=True)
    limit = normalize_max_results(max_results, config)
    selected = [
        r.model_copy(update={"rank": position})
        for position, r in enumerate(ordered[:limit], start=1)
    ]
    return selected, ordered[limit:]


def select_alternatives(
    candidates: list[Perfume],
    selected: list[AdvancedRecommendationResult],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[Perfume]:
    """First few candidates, in catalog order, that did not make the cut."""
    chosen = {r.perfume.id for r in selected}
    return [p for p in candidates if p.id not in chosen][: config.max_alternatives]
