from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from .config import DEFAULT_REVIEW_CONFIG, ReviewConfig
from .errors import DuplicateVoteError, InvalidReportReasonError, ReviewNotFoundError
from .models import (
    REPORT_REASONS,
    CreateReviewRequest,
    Review,
    ReviewFilterOptions,
    ReviewReport,
    ReviewSort,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _recency(review: Review) -> tuple[datetime, int]:
    return (review.created_at, review.id)


class ReviewStore:
    """In-process review storage with filtering, helpful votes and reports."""

    def __init__(
        self,
        config: ReviewConfig = DEFAULT_REVIEW_CONFIG,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.config = config
        self._clock = clock
        self._reviews: dict[int, Review] = {}
        self._votes: set[tuple[int, str]] = set()
        self._reports: list[ReviewReport] = []
        self._next_id = 1

    def create(self, request: CreateReviewRequest) -> Review:
        now = self._clock()
        review = Review(
            id=self._next_id,
            created_at=now,
            updated_at=now,
            **request.model_dump(),
        )
        self._reviews[review.id] = review
        self._next_id += 1
        return review

    def get(self, review_id: int) -> Review:
        try:
            return self._reviews[review_id]
        except KeyError:
            raise ReviewNotFoundError(review_id) from None

    def for_perfume(self, perfume_id: int) -> list[Review]:
        return [r for r in self._reviews.values() if r.perfume_id == perfume_id]

    def list_reviews(self, options: ReviewFilterOptions) -> list[Review]:
        reviews = self.for_perfume(options.perfume_id)

        if options.rating is not None:
            reviews = [r for r in reviews if r.overall_rating == options.rating]
        if options.longevity and options.longevity != "all":
            reviews = [r for r in reviews if r.longevity_rating == options.longevity]
        if options.sillage and options.sillage != "all":
            reviews = [r for r in reviews if r.sillage_rating == options.sillage]
        if options.would_repurchase is not None:
            reviews = [r for r in reviews if r.would_repurchase == options.would_repurchase]
        if options.verified_purchase is not None:
            reviews = [r for r in reviews if r.is_verified_purchase == options.verified_purchase]
        if options.search_term:
            term = options.search_term.lower()
            reviews = [
                r for r in reviews
                if term in r.title.lower() or term in r.comment.lower() or term in r.user_name.lower()
            ]

        # Secondary key first: stable sorts keep newest-first within ties
        reviews = sorted(reviews, key=_recency, reverse=True)
        if options.sort_by is ReviewSort.most_helpful:
            reviews = sorted(reviews, key=lambda r: r.helpful_count, reverse=True)
        elif options.sort_by is ReviewSort.highest_rating:
            reviews = sorted(reviews, key=lambda r: r.overall_rating, reverse=True)
        elif options.sort_by is ReviewSort.lowest_rating:
            reviews = sorted(reviews, key=lambda r: r.overall_rating)

        limit = options.limit or self.config.default_limit
        limit = min(limit, self.config.max_limit)
        return reviews[options.offset:options.offset + limit]

    def mark_helpful(self, review_id: int, user_identifier: str) -> Review:
        review = self.get(review_id)
        vote = (review_id, user_identifier)
        if vote in self._votes:
            raise DuplicateVoteError(review_id, user_identifier)
        self._votes.add(vote)
        updated = review.model_copy(update={
            "helpful_count": review.helpful_count + 1,
            "updated_at": self._clock(),
        })
        self._reviews[review_id] = updated
        return updated

    def report(
        self,
        review_id: int,
        reason: str,
        description: str,
        user_identifier: str,
    ) -> ReviewReport:
        if reason not in REPORT_REASONS:
            raise InvalidReportReasonError(reason)
        self.get(review_id)
        report = ReviewReport(
            review_id=review_id,
            reason=reason,
            description=description,
            user_identifier=user_identifier,
            created_at=self._clock(),
        )
        self._reports.append(report)
        logger.info("Review %d reported for %s", review_id, reason)
        return report

    def reports(self, review_id: int | None = None) -> list[ReviewReport]:
        if review_id is None:
            return list(self._reports)
        return [r for r in self._reports if r.review_id == review_id]
