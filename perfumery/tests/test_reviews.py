from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from perfumery.reviews.errors import DuplicateVoteError, InvalidReportReasonError, ReviewNotFoundError
from perfumery.reviews.models import CreateReviewRequest, ReviewFilterOptions, ReviewSort
from perfumery.reviews.stats import compute_review_stats
from perfumery.reviews.store import ReviewStore

_NOW = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


class _Clock:
    """Each call returns one hour later than the previous one."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(hours=1)
        return self.current


def _request(**overrides) -> CreateReviewRequest:
    data = {
        "perfume_id": 1,
        "user_name": "ana",
        "overall_rating": 4,
        "longevity_rating": "good",
        "sillage_rating": "moderate",
        "value_rating": 4,
        "title": "Lovely",
        "comment": "Wears beautifully all day long.",
    }
    data.update(overrides)
    return CreateReviewRequest(**data)


def _store() -> ReviewStore:
    return ReviewStore(clock=_Clock(_NOW))


# ── Validation ───────────────────────────────────────────────────────────


def test_rejects_out_of_range_rating():
    with pytest.raises(ValidationError):
        _request(overall_rating=6)


def test_rejects_unknown_longevity_rating():
    with pytest.raises(ValidationError):
        _request(longevity_rating="forever")


def test_rejects_short_comment():
    with pytest.raises(ValidationError):
        _request(comment="meh")


def test_rejects_unknown_occasion():
    with pytest.raises(ValidationError):
        _request(occasions=["funeral"])


# ── Store ────────────────────────────────────────────────────────────────


def test_create_and_get():
    store = _store()
    review = store.create(_request(pros=["fresh"]))
    assert review.id == 1
    assert review.helpful_count == 0
    assert review.is_verified_purchase is False
    assert store.get(1).pros == ["fresh"]
    with pytest.raises(ReviewNotFoundError):
        store.get(42)


def test_list_defaults_to_most_recent():
    store = _store()
    for title in ("First", "Second", "Third"):
        store.create(_request(title=title))
    store.create(_request(perfume_id=2, title="Other perfume"))
    reviews = store.list_reviews(ReviewFilterOptions(perfume_id=1))
    assert [r.title for r in reviews] == ["Third", "Second", "First"]


def test_list_filters():
    store = _store()
    store.create(_request(overall_rating=5, would_repurchase=True, title="Great stuff"))
    store.create(_request(overall_rating=2, sillage_rating="heavy", title="Too loud"))
    store.create(_request(overall_rating=5, user_name="ben", comment="Bought a second bottle already."))

    by_rating = store.list_reviews(ReviewFilterOptions(perfume_id=1, rating=5))
    assert len(by_rating) == 2
    by_sillage = store.list_reviews(ReviewFilterOptions(perfume_id=1, sillage="heavy"))
    assert [r.title for r in by_sillage] == ["Too loud"]
    assert len(store.list_reviews(ReviewFilterOptions(perfume_id=1, sillage="all"))) == 3
    repurchase = store.list_reviews(ReviewFilterOptions(perfume_id=1, would_repurchase=True))
    assert [r.title for r in repurchase] == ["Great stuff"]
    searched = store.list_reviews(ReviewFilterOptions(perfume_id=1, search_term="BEN"))
    assert [r.user_name for r in searched] == ["ben"]


def test_list_sorting():
    store = _store()
    store.create(_request(overall_rating=3, title="Mid"))
    store.create(_request(overall_rating=5, title="Top"))
    store.create(_request(overall_rating=1, title="Low"))
    store.create(_request(overall_rating=5, title="Top again"))
    store.mark_helpful(3, "u1")

    highest = store.list_reviews(ReviewFilterOptions(perfume_id=1, sort_by=ReviewSort.highest_rating))
    assert [r.title for r in highest] == ["Top again", "Top", "Mid", "Low"]
    lowest = store.list_reviews(ReviewFilterOptions(perfume_id=1, sort_by="lowest-rating"))
    assert [r.title for r in lowest] == ["Low", "Mid", "Top again", "Top"]
    helpful = store.list_reviews(ReviewFilterOptions(perfume_id=1, sort_by=ReviewSort.most_helpful))
    assert helpful[0].title == "Low"


def test_list_limit_and_offset():
    store = _store()
    for i in range(5):
        store.create(_request(title=f"Review {i}"))
    page = store.list_reviews(ReviewFilterOptions(perfume_id=1, limit=2, offset=1))
    assert [r.title for r in page] == ["Review 3", "Review 2"]


def test_mark_helpful_once_per_user():
    store = _store()
    store.create(_request())
    assert store.mark_helpful(1, "u1").helpful_count == 1
    assert store.mark_helpful(1, "u2").helpful_count == 2
    with pytest.raises(DuplicateVoteError):
        store.mark_helpful(1, "u1")
    assert store.get(1).helpful_count == 2


def test_report_validates_reason():
    store = _store()
    store.create(_request())
    report = store.report(1, "spam", "Advertising link", "u1")
    assert report.reason == "spam"
    assert store.reports(1) == [report]
    with pytest.raises(InvalidReportReasonError):
        store.report(1, "boring", "", "u2")
    with pytest.raises(ReviewNotFoundError):
        store.report(9, "spam", "", "u2")


# ── Stats ────────────────────────────────────────────────────────────────


def test_stats_for_perfume():
    store = _store()
    store.create(_request(
        overall_rating=5, value_rating=4, would_repurchase=True,
        occasions=["work", "daily"], seasons=["spring"], comment="x" * 100,
    ))
    store.create(_request(
        overall_rating=3, value_rating=2, longevity_rating="average",
        occasions=["work"], seasons=["spring", "summer"], comment="y" * 100,
    ))
    store.create(_request(perfume_id=2, overall_rating=1))
    store.mark_helpful(1, "u1")
    store.mark_helpful(1, "u2")

    now = _NOW + timedelta(days=1)
    stats = compute_review_stats(store.for_perfume(1), perfume_id=1, now=now)

    assert stats.total_reviews == 2
    assert stats.average_overall_rating == 4.0
    assert stats.average_value_rating == 3.0
    assert stats.rating_distribution == {1: 0, 2: 0, 3: 1, 4: 0, 5: 1}
    assert stats.longevity_distribution["good"] == 1
    assert stats.longevity_distribution["average"] == 1
    assert stats.average_longevity_rating == "average"
    assert stats.average_sillage_rating == "moderate"
    assert [(u.occasion, u.count) for u in stats.popular_occasions] == [("work", 2), ("daily", 1)]
    assert [(u.occasion, u.count) for u in stats.popular_seasons] == [("spring", 2), ("summer", 1)]
    assert stats.would_repurchase_percentage == 50.0
    assert stats.verified_purchase_percentage == 0.0
    assert stats.helpful_votes_per_review == 1.0
    assert stats.recent_reviews_count == 2
    assert stats.engagement_score == pytest.approx(2.0)


def test_stats_recent_window():
    store = _store()
    store.create(_request())
    stats = compute_review_stats(store.for_perfume(1), perfume_id=1, now=_NOW + timedelta(days=45))
    assert stats.recent_reviews_count == 0


def test_stats_without_reviews():
    stats = compute_review_stats([], perfume_id=7)
    assert stats.total_reviews == 0
    assert stats.rating_distribution == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    assert stats.average_longevity_rating == ""
    assert stats.popular_occasions == []
