from __future__ import annotations

import time
from typing import Any

ADVANCED_RECOMMENDATION = "advanced_recommendation"
AROMA_RECOMMENDATION = "aroma_recommendation"
RECOMMENDATION_FAILED = "recommendation_failed"

EVENT_TYPES = frozenset({ADVANCED_RECOMMENDATION, AROMA_RECOMMENDATION, RECOMMENDATION_FAILED})

_recommendation_log: list[dict[str, Any]] = []


def record_event(event_type: str, data: dict[str, Any]) -> dict[str, Any]:
    """Append one recommendation event to the log and return the stored entry."""
    if event_type not in EVENT_TYPES:
        raise ValueError(f"unknown recommendation event type: {event_type}")
    entry = {**data, "type": event_type, "timestamp": time.time()}
    _recommendation_log.append(entry)
    return entry


def get_events(event_type: str | None = None) -> list[dict[str, Any]]:
    return [e for e in _recommendation_log if event_type is None or e["type"] == event_type]


def clear_events() -> None:
    del _recommendation_log[:]
