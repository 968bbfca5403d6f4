from __future__ import annotations

from enum import Enum
from typing import Callable

from ..catalog.models import Longevity, Perfume, Sillage
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .models import (
    AdvancedRecommendationRequest,
    AdvancedRecommendationResult,
    PersonalityAnalysis,
    QuizPreferences,
)


class Season(str, Enum):
    spring = "spring"
    summer = "summer"
    fall = "fall"
    winter = "winter"


class Situation(str, Enum):
    work = "work"
    date = "date"
    casual = "casual"
    special = "special"


def _parse(enum_cls, value: str):
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        return None


# Quiz scent family -> aroma tag names (lowercase) that satisfy it
FAMILY_AROMAS: dict[str, frozenset[str]] = {
    "light_fresh": frozenset({"citrus", "fresh", "aquatic"}),
    "warm_spicy": frozenset({"spicy", "warm", "oriental"}),
    "sweet_gourmand": frozenset({"sweet", "vanilla", "gourmand"}),
    "woody_earthy": frozenset({"woody", "earthy", "cedar"}),
    "floral_romantic": frozenset({"floral", "rose", "jasmine"}),
    "citrus_energizing": frozenset({"citrus", "bergamot", "lemon"}),
}

SEASON_KEYWORDS: dict[Season, tuple[str, ...]] = {
    Season.spring: ("fresh", "floral"),
    Season.summer: ("light", "citrus", "aquatic"),
    Season.fall: ("warm", "spicy", "woody"),
    Season.winter: ("rich", "deep", "oriental"),
}

# Quiz performance answer -> perfume categories that satisfy it
LONGEVITY_PREFERENCES: dict[str, frozenset[Longevity]] = {
    "light": frozenset({Longevity.light}),
    "medium": frozenset({Longevity.medium}),
    "long": frozenset({Longevity.long, Longevity.very_long}),
}

SILLAGE_PREFERENCES: dict[str, frozenset[Sillage]] = {
    "subtle": frozenset({Sillage.light}),
    "moderate": frozenset({Sillage.medium}),
    "heavy": frozenset({Sillage.heavy, Sillage.very_heavy}),
}

_LONG_LASTING = frozenset({Longevity.long, Longevity.very_long})

Rule = Callable[[Perfume], bool]


def _description_has(*keywords: str) -> Rule:
    return lambda p: any(k in p.description.lower() for k in keywords)


def _reduce(base: float, bonuses: list[tuple[float, bool]]) -> float:
    return min(base + sum(bonus for bonus, hit in bonuses if hit), 1.0)


def _occasion_rules(situation: Situation | None, config: ScoringConfig) -> list[tuple[float, Rule]]:
    bonus = config.occasion_bonus
    if situation is Situation.work:
        return [
            (bonus, lambda p: p.sillage_category in (Sillage.light, Sillage.medium)),
            (
                config.occasion_professional_bonus,
                lambda p: "professional" in p.brand.lower() or "clean" in p.description.lower(),
            ),
        ]
    if situation is Situation.date:
        return [(bonus, _description_has("romantic", "seductive"))]
    if situation is Situation.casual:
        return [
            (
                bonus,
                lambda p: p.price < config.casual_price_ceiling and p.sillage_category is Sillage.light,
            )
        ]
    if situation is Situation.special:
        return [
            (
                bonus,
                lambda p: p.price > config.special_price_floor or p.sillage_category is Sillage.heavy,
            )
        ]
    return []


def profile_match(
    perfume: Perfume, prefs: QuizPreferences, config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    aromas = perfume.aroma_names
    return _reduce(
        config.profile_base,
        [
            (config.profile_family_bonus, getattr(prefs, family) and bool(aromas & tags))
            for family, tags in FAMILY_AROMAS.items()
        ],
    )


def season_match(
    perfume: Perfume, season: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    keywords = SEASON_KEYWORDS.get(_parse(Season, season), ())
    return _reduce(
        config.season_base,
        [(config.season_keyword_bonus, _description_has(*keywords)(perfume))],
    )


def occasion_match(
    perfume: Perfume, situation: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    rules = _occasion_rules(_parse(Situation, situation), config)
    return _reduce(config.occasion_base, [(bonus, rule(perfume)) for bonus, rule in rules])


def performance_match(
    perfume: Perfume, prefs: QuizPreferences, config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    wanted_longevity = LONGEVITY_PREFERENCES.get(prefs.longevity.strip().lower(), frozenset())
    wanted_sillage = SILLAGE_PREFERENCES.get(prefs.sillage.strip().lower(), frozenset())
    return _reduce(
        config.performance_base,
        [
            (config.longevity_bonus, perfume.longevity_category in wanted_longevity),
            (config.sillage_bonus, perfume.sillage_category in wanted_sillage),
        ],
    )


def uniqueness_bonus(
    perfume: Perfume, prefs: QuizPreferences, config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    if prefs.unique:
        if perfume.price > config.premium_price_floor:
            return config.uniqueness_premium
        return config.uniqueness_standard
    if prefs.safe_bet and perfume.price < config.safe_bet_price_ceiling:
        return config.safe_bet_value
    return config.uniqueness_default


def overall_score(components: dict[str, float], config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> float:
    w = config.weights
    total = (
        w["profile"] * components["profile"]
        + w["season"] * components["season"]
        + w["occasion"] * components["occasion"]
        + w["performance"] * components["performance"]
        + w["uniqueness"] * components["uniqueness"]
    )
    return min(max(total, 0.0), 1.0)


def _match_reasons(
    perfume: Perfume,
    profile: float,
    season: float,
    occasion: float,
    season_label: str,
    config: ScoringConfig,
) -> list[str]:
    """Human-readable reasons, in fixed order, for the checks a perfume passes.

    The season reason names the requested season ("Ideal for winter
    weather") and only says "current season" when the request gives none.
    """
    threshold = config.reason_threshold
    checks = [
        (profile > threshold, "Perfect match for your scent preferences"),
        (season > threshold, f"Ideal for {season_label or 'current season'} weather"),
        (occasion > threshold, "Perfect for your intended occasion"),
        (perfume.price < config.value_price_ceiling, "Great value for your budget"),
        (perfume.longevity_category in _LONG_LASTING, "Long-lasting fragrance"),
    ]
    reasons = [text for hit, text in checks if hit]
    return reasons or ["Interesting option worth exploring"]


def _best_for(prefs: QuizPreferences) -> list[str]:
    checks = [
        (prefs.work, "Office Wear"),
        (prefs.dates, "Date Nights"),
        (prefs.special_events, "Special Events"),
        (prefs.daily_wear, "Daily Wear"),
    ]
    return [text for hit, text in checks if hit] or ["Versatile Wear"]


def _wear_timing(perfume: Perfume, prefs: QuizPreferences) -> list[str]:
    longevity = prefs.longevity.strip().lower()
    checks = [
        (longevity == "light", "Reapply during the day"),
        (longevity == "long", "Lasts all day"),
        (perfume.sillage_category is Sillage.heavy, "Apply sparingly"),
    ]
    return [text for hit, text in checks if hit] or ["Apply to pulse points"]


def score_perfume(
    perfume: Perfume,
    request: AdvancedRecommendationRequest,
    personality: PersonalityAnalysis | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> AdvancedRecommendationResult:
    """Score one perfume against the quiz answers and situational context.

    ``personality`` is part of the scoring contract; no current factor
    reads it.
    """
    prefs = request.quiz_preferences
    components = {
        "profile": profile_match(perfume, prefs, config),
        "season": season_match(perfume, request.season, config),
        "occasion": occasion_match(perfume, request.current_situation, config),
        "performance": performance_match(perfume, prefs, config),
        "uniqueness": uniqueness_bonus(perfume, prefs, config),
    }
    overall = overall_score(components, config)

    return AdvancedRecommendationResult(
        perfume=perfume,
        overall_score=overall,
        profile_match=components["profile"],
        season_match=components["season"],
        occasion_match=components["occasion"],
        performance_match=components["performance"],
        uniqueness_bonus=components["uniqueness"],
        match_reasons=_match_reasons(
            perfume,
            components["profile"],
            components["season"],
            components["occasion"],
            request.season.strip().lower(),
            config,
        ),
        best_for=_best_for(prefs),
        wear_timing=_wear_timing(perfume, prefs),
        longevity=perfume.longevity,
        projection=perfume.sillage,
        confidence=min(overall + config.confidence_margin, 1.0),
    )


def score_perfumes(
    perfumes: list[Perfume],
    request: AdvancedRecommendationRequest,
    personality: PersonalityAnalysis | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[AdvancedRecommendationResult]:
    return [score_perfume(p, request, personality, config) for p in perfumes]
