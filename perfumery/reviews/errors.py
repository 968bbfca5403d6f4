from __future__ import annotations


class ReviewError(Exception):
    pass


class ReviewNotFoundError(ReviewError, LookupError):
    def __init__(self, review_id: int) -> None:
        super().__init__(f"review {review_id} not found")
        self.review_id = review_id


class DuplicateVoteError(ReviewError):
    def __init__(self, review_id: int, user_identifier: str) -> None:
        super().__init__(f"{user_identifier!r} already marked review {review_id} as helpful")
        self.review_id = review_id
        self.user_identifier = user_identifier


class InvalidReportReasonError(ReviewError, ValueError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid report reason: {reason}")
        self.reason = reason
