from __future__ import annotations


class RecommendationError(RuntimeError):
    """The catalog could not be read, so no recommendation was produced."""

    def __init__(self, message: str = "recommendation generation failed") -> None:
        super().__init__(message)
