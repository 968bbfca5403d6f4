from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..catalog.models import Perfume


class QuizPreferences(BaseModel):
    # Occasion preferences
    daily_wear: bool = False
    special_events: bool = False
    night_out: bool = False
    work: bool = False
    dates: bool = False

    # Seasonal preferences
    spring: bool = False
    summer: bool = False
    fall: bool = False
    winter: bool = False
    year_round: bool = False

    # Scent families
    light_fresh: bool = False
    warm_spicy: bool = False
    sweet_gourmand: bool = False
    woody_earthy: bool = False
    floral_romantic: bool = False
    citrus_energizing: bool = False

    # Performance: light/medium/long, subtle/moderate/heavy, close/moderate/far
    longevity: str = ""
    sillage: str = ""
    projection: str = ""

    # Style preferences
    classic: bool = False
    modern: bool = False
    unique: bool = False
    safe_bet: bool = False

    price_range: str = Field(default="", description="budget, mid, luxury or designer")


class AdvancedRecommendationRequest(BaseModel):
    quiz_preferences: QuizPreferences = Field(default_factory=QuizPreferences)
    current_situation: str = Field(default="", description="work, date, casual or special")
    season: str = Field(default="", description="spring, summer, fall or winter")
    time_of_day: str = ""
    desired_impression: str = ""
    max_results: int = Field(default=6, description="Zero or negative means the default of 6")
    exclude_ids: list[int] = Field(default_factory=list)


class PersonalityAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    scent_personality: str
    key_traits: list[str]
    style_description: str
    recommendation_style: str


class AdvancedRecommendationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    perfume: Perfume
    overall_score: float = Field(..., ge=0.0, le=1.0)

    profile_match: float = Field(..., ge=0.0, le=1.0)
    season_match: float = Field(..., ge=0.0, le=1.0)
    occasion_match: float = Field(..., ge=0.0, le=1.0)
    performance_match: float = Field(..., ge=0.0, le=1.0)
    uniqueness_bonus: float = Field(..., ge=0.0, le=1.0)

    match_reasons: list[str]
    best_for: list[str]
    wear_timing: list[str]
    longevity: str
    projection: str

    confidence: float = Field(..., ge=0.0, le=1.0)
    rank: int = 0


class RecommendationLogic(BaseModel):
    algorithm: str
    factors_considered: list[str]
    weighting: dict[str, float]
    process_description: str


class AdvancedRecommendationResponse(BaseModel):
    results: list[AdvancedRecommendationResult]
    personality_analysis: PersonalityAnalysis
    recommendation_logic: RecommendationLogic
    tips: list[str]
    alternatives: list[Perfume]


class AromaRecommendationRequest(BaseModel):
    aromas: list[str] = Field(..., min_length=1, description="Aroma tag slugs")


class AromaRecommendationItem(BaseModel):
    perfume: Perfume
    score: float


class AromaRecommendationResponse(BaseModel):
    results: list[AromaRecommendationItem]
    explanation: str
