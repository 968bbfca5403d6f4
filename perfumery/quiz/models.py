from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..recommendations.models import QuizPreferences


class PersonalityQuiz(BaseModel):
    id: int | None = None
    name: str = Field(..., min_length=1)
    email: str = ""
    age: int | None = Field(default=None, ge=0, le=130)
    gender: str = ""
    lifestyle: str = Field(default="", description="active, relaxed, professional or creative")
    preferences: QuizPreferences = Field(default_factory=QuizPreferences)
    created_at: datetime | None = None


class CountItem(BaseModel):
    name: str
    count: int


class QuizStatistics(BaseModel):
    total_responses: int
    scent_preferences: list[CountItem]
    lifestyle_distribution: list[CountItem]
    seasonal_preferences: list[CountItem]
