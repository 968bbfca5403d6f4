from __future__ import annotations

import logging
import time

from ..analytics.store import (
    ADVANCED_RECOMMENDATION,
    AROMA_RECOMMENDATION,
    RECOMMENDATION_FAILED,
    record_event,
)
from ..catalog.data_store import CatalogSource, FileCatalog
from ..catalog.models import Perfume
from .assembler import assemble
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .errors import RecommendationError
from .models import (
    AdvancedRecommendationRequest,
    AdvancedRecommendationResponse,
    AromaRecommendationItem,
    AromaRecommendationRequest,
    AromaRecommendationResponse,
)
from .personality import analyze
from .ranking import filter_candidates, rank, select_alternatives
from .scoring import score_perfumes

logger = logging.getLogger(__name__)

AROMA_EXPLANATION = "Based on your aroma preferences, we found these matching fragrances."


def _fetch_catalog(catalog: CatalogSource | None) -> list[Perfume]:
    source = catalog if catalog is not None else FileCatalog()
    try:
        return source.get_all_with_relations()
    except Exception as exc:
        logger.warning("Catalog fetch failed, no recommendations produced", exc_info=True)
        record_event(RECOMMENDATION_FAILED, {"error": type(exc).__name__})
        raise RecommendationError() from exc


def get_advanced_recommendations(
    request: AdvancedRecommendationRequest,
    catalog: CatalogSource | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> AdvancedRecommendationResponse:
    start_time = time.time()

    personality = analyze(request.quiz_preferences)

    perfumes = _fetch_catalog(catalog)
    candidates = filter_candidates(perfumes, request.exclude_ids)

    scored = score_perfumes(candidates, request, personality, config)
    selected, _ = rank(scored, request.max_results, config)
    alternatives = select_alternatives(candidates, selected, config)

    response = assemble(
        selected, personality, request.quiz_preferences, alternatives, config,
    )

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event(ADVANCED_RECOMMENDATION, {
        "personality": personality.scent_personality,
        "situation": request.current_situation,
        "season": request.season,
        "excluded": len(request.exclude_ids),
        "total_candidates": len(candidates),
        "results_returned": len(selected),
        "response_time_ms": elapsed_ms,
    })

    return response


def recommend_by_aromas(
    request: AromaRecommendationRequest,
    catalog: CatalogSource | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> AromaRecommendationResponse:
    """Rank perfumes by how many of the requested aroma tags they carry."""
    start_time = time.time()

    perfumes = _fetch_catalog(catalog)

    items = [
        AromaRecommendationItem(
            perfume=perfume,
            score=config.aroma_base
            + config.aroma_match_bonus * sum(1 for slug in request.aromas if slug in perfume.aroma_slugs),
        )
        for perfume in perfumes
    ]
    items = sorted(items, key=lambda item: item.score, reverse=True)[: config.aroma_max_results]

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event(AROMA_RECOMMENDATION, {
        "aromas": list(request.aromas),
        "total_candidates": len(perfumes),
        "results_returned": len(items),
        "response_time_ms": elapsed_ms,
    })

    return AromaRecommendationResponse(results=items, explanation=AROMA_EXPLANATION)
