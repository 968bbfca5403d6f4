from __future__ import annotations

import itertools
from datetime import datetime, timezone

from .models import PersonalityQuiz

_responses: list[PersonalityQuiz] = []
_ids = itertools.count(1)


def record_quiz_response(quiz: PersonalityQuiz) -> PersonalityQuiz:
    """Store a submitted quiz, stamping it with an id and creation time."""
    saved = quiz.model_copy(update={
        "id": next(_ids),
        "created_at": datetime.now(timezone.utc),
    })
    _responses.append(saved)
    return saved


def get_quiz_responses() -> list[PersonalityQuiz]:
    return list(_responses)


def clear_quiz_responses() -> None:
    global _ids
    _responses.clear()
    _ids = itertools.count(1)
