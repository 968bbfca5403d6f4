from __future__ import annotations

from perfumery.quiz.models import PersonalityQuiz
from perfumery.quiz.statistics import compute_quiz_statistics
from perfumery.quiz.store import clear_quiz_responses, get_quiz_responses, record_quiz_response
from perfumery.recommendations.models import QuizPreferences


def _quiz(name: str, lifestyle: str = "", **prefs) -> PersonalityQuiz:
    return PersonalityQuiz(name=name, lifestyle=lifestyle, preferences=QuizPreferences(**prefs))


def test_record_assigns_id_and_timestamp():
    clear_quiz_responses()
    saved = record_quiz_response(_quiz("Ana", "active"))
    second = record_quiz_response(_quiz("Ben"))
    assert saved.id == 1
    assert second.id == 2
    assert saved.created_at is not None
    assert [q.name for q in get_quiz_responses()] == ["Ana", "Ben"]


def test_clear_resets_store():
    record_quiz_response(_quiz("Cy"))
    clear_quiz_responses()
    assert get_quiz_responses() == []
    assert record_quiz_response(_quiz("Di")).id == 1


def test_statistics_counts():
    quizzes = [
        _quiz("Ana", "active", light_fresh=True, summer=True),
        _quiz("Ben", "professional", light_fresh=True, woody_earthy=True, winter=True),
        _quiz("Cy", "active", warm_spicy=True, year_round=True),
        _quiz("Di"),
    ]
    stats = compute_quiz_statistics(quizzes)

    assert stats.total_responses == 4
    scents = {item.name: item.count for item in stats.scent_preferences}
    assert scents["light_fresh"] == 2
    assert scents["woody_earthy"] == 1
    assert scents["citrus_energizing"] == 0

    lifestyles = [(item.name, item.count) for item in stats.lifestyle_distribution]
    assert lifestyles == [("active", 2), ("professional", 1), ("unspecified", 1)]

    seasons = {item.name: item.count for item in stats.seasonal_preferences}
    assert seasons == {"spring": 0, "summer": 1, "fall": 0, "winter": 1, "year_round": 1}


def test_statistics_empty():
    stats = compute_quiz_statistics([])
    assert stats.total_responses == 0
    assert stats.lifestyle_distribution == []
    assert all(item.count == 0 for item in stats.scent_preferences)
