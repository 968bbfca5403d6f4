from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

LongevityRating = Literal["very-poor", "poor", "average", "good", "excellent"]
SillageRating = Literal["very-light", "light", "moderate", "heavy", "very-heavy"]
ReviewOccasion = Literal["daily", "work", "casual", "date-night", "formal", "party", "special-occasion"]
ReviewSeason = Literal["spring", "summer", "fall", "winter", "all-season"]

LONGEVITY_RATINGS: list[str] = ["very-poor", "poor", "average", "good", "excellent"]
SILLAGE_RATINGS: list[str] = ["very-light", "light", "moderate", "heavy", "very-heavy"]

REPORT_REASONS: frozenset[str] = frozenset({
    "inappropriate-content",
    "spam",
    "fake-review",
    "off-topic",
    "harmful-content",
    "other",
})


class ReviewSort(str, Enum):
    most_recent = "most-recent"
    most_helpful = "most-helpful"
    highest_rating = "highest-rating"
    lowest_rating = "lowest-rating"


class CreateReviewRequest(BaseModel):
    perfume_id: int
    user_name: str = Field(..., min_length=2, max_length=100)
    overall_rating: int = Field(..., ge=1, le=5)
    longevity_rating: LongevityRating
    sillage_rating: SillageRating
    value_rating: int = Field(..., ge=1, le=5)
    title: str = Field(..., min_length=3, max_length=200)
    comment: str = Field(..., min_length=10, max_length=1000)
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    occasions: list[ReviewOccasion] = Field(default_factory=list)
    seasons: list[ReviewSeason] = Field(default_factory=list)
    would_repurchase: bool = False


class Review(BaseModel):
    id: int
    perfume_id: int
    user_name: str
    overall_rating: int
    longevity_rating: str
    sillage_rating: str
    value_rating: int
    title: str
    comment: str
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    occasions: list[str] = Field(default_factory=list)
    seasons: list[str] = Field(default_factory=list)
    would_repurchase: bool = False
    is_verified_purchase: bool = False
    helpful_count: int = 0
    created_at: datetime
    updated_at: datetime


class ReviewFilterOptions(BaseModel):
    perfume_id: int
    rating: int | None = Field(default=None, ge=1, le=5)
    longevity: str = ""
    sillage: str = ""
    would_repurchase: bool | None = None
    verified_purchase: bool | None = None
    search_term: str = ""
    sort_by: ReviewSort = ReviewSort.most_recent
    limit: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)


class ReviewReport(BaseModel):
    review_id: int
    reason: str
    description: str = ""
    user_identifier: str
    created_at: datetime


class PopularUsage(BaseModel):
    occasion: str
    count: int


class ReviewStats(BaseModel):
    perfume_id: int
    total_reviews: int = 0
    average_overall_rating: float = 0.0
    average_longevity_rating: str = ""
    average_sillage_rating: str = ""
    average_value_rating: float = 0.0
    rating_distribution: dict[int, int] = Field(default_factory=dict)
    longevity_distribution: dict[str, int] = Field(default_factory=dict)
    sillage_distribution: dict[str, int] = Field(default_factory=dict)
    popular_occasions: list[PopularUsage] = Field(default_factory=list)
    popular_seasons: list[PopularUsage] = Field(default_factory=list)
    would_repurchase_percentage: float = 0.0
    verified_purchase_percentage: float = 0.0
    helpful_votes_per_review: float = 0.0
    recent_reviews_count: int = 0
    engagement_score: float = 0.0
