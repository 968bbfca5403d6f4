from __future__ import annotations

import pandas as pd

from .models import CountItem, PersonalityQuiz, QuizStatistics

SCENT_FAMILIES = [
    "light_fresh",
    "warm_spicy",
    "sweet_gourmand",
    "woody_earthy",
    "floral_romantic",
    "citrus_energizing",
]

SEASONS = ["spring", "summer", "fall", "winter", "year_round"]


def _to_frame(quizzes: list[PersonalityQuiz]) -> pd.DataFrame:
    rows = [
        {"lifestyle": q.lifestyle or "unspecified", **q.preferences.model_dump()}
        for q in quizzes
    ]
    return pd.DataFrame(rows, columns=["lifestyle", *SCENT_FAMILIES, *SEASONS])


def _flag_counts(df: pd.DataFrame, columns: list[str]) -> list[CountItem]:
    return [CountItem(name=col, count=int(df[col].astype(bool).sum())) for col in columns]


def compute_quiz_statistics(quizzes: list[PersonalityQuiz]) -> QuizStatistics:
    """Summarise stored quiz answers: scent families, lifestyles and seasons."""
    df = _to_frame(quizzes)

    lifestyles = df["lifestyle"].value_counts()
    lifestyle_items = sorted(
        (CountItem(name=str(name), count=int(count)) for name, count in lifestyles.items()),
        key=lambda item: (-item.count, item.name),
    )

    return QuizStatistics(
        total_responses=len(df),
        scent_preferences=_flag_counts(df, SCENT_FAMILIES),
        lifestyle_distribution=lifestyle_items,
        seasonal_preferences=_flag_counts(df, SEASONS),
    )
