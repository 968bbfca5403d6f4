from __future__ import annotations

from ..catalog.models import Perfume
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .models import (
    AdvancedRecommendationResponse,
    AdvancedRecommendationResult,
    PersonalityAnalysis,
    QuizPreferences,
    RecommendationLogic,
)

ALGORITHM_NAME = "Multi-Factor Advanced Recommendation v2.0"

FACTORS_CONSIDERED = [
    "Profile Match",
    "Season Suitability",
    "Occasion Appropriateness",
    "Performance Match",
    "Uniqueness Bonus",
]

PROCESS_DESCRIPTION = (
    "Our algorithm analyzes your personality traits, scent preferences, and "
    "usage patterns to find perfect matches from our perfume catalog."
)


def recommendation_logic(config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> RecommendationLogic:
    return RecommendationLogic(
        algorithm=ALGORITHM_NAME,
        factors_considered=list(FACTORS_CONSIDERED),
        weighting=dict(config.weights),
        process_description=PROCESS_DESCRIPTION,
    )


def generate_tips(preferences: QuizPreferences) -> list[str]:
    tips = ["Apply fragrance to pulse points for better longevity"]
    if preferences.work:
        tips.append("Choose subtle scents for professional environments")
    if preferences.dates:
        tips.append("Apply 30 minutes before your date for optimal effect")
    if preferences.unique:
        tips.append("Layer with unscented lotion to make unique fragrances last longer")
    tips.append("Store fragrances in a cool, dark place to preserve quality")
    return tips


def assemble(
    selected: list[AdvancedRecommendationResult],
    personality: PersonalityAnalysis,
    preferences: QuizPreferences,
    alternatives: list[Perfume],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> AdvancedRecommendationResponse:
    return AdvancedRecommendationResponse(
        results=selected,
        personality_analysis=personality,
        recommendation_logic=recommendation_logic(config),
        tips=generate_tips(preferences),
        alternatives=alternatives,
    )
