from __future__ import annotations

from collections import Counter
from typing import Any

from .store import ADVANCED_RECOMMENDATION, AROMA_RECOMMENDATION, RECOMMENDATION_FAILED


def _top(counter: Counter[str], n: int = 10) -> list[dict[str, Any]]:
    return [{"name": name, "count": count} for name, count in counter.most_common(n)]


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    quiz_requests = [e for e in events if e["type"] == ADVANCED_RECOMMENDATION]
    aroma_requests = [e for e in events if e["type"] == AROMA_RECOMMENDATION]
    failures = [e for e in events if e["type"] == RECOMMENDATION_FAILED]
    served = quiz_requests + aroma_requests
    total = len(served)

    times = [e["response_time_ms"] for e in served if "response_time_ms" in e]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    personalities: Counter[str] = Counter()
    situations: Counter[str] = Counter()
    seasons: Counter[str] = Counter()
    for e in quiz_requests:
        personalities[e.get("personality", "unknown")] += 1
        if e.get("situation"):
            situations[e["situation"]] += 1
        if e.get("season"):
            seasons[e["season"]] += 1

    aromas: Counter[str] = Counter()
    for e in aroma_requests:
        for slug in e.get("aromas", []) or []:
            aromas[slug] += 1

    empty = sum(1 for e in served if e.get("results_returned", 0) == 0)

    return {
        "total_requests": total,
        "quiz_requests": len(quiz_requests),
        "aroma_requests": len(aroma_requests),
        "failed_requests": len(failures),
        "avg_response_time_ms": avg_time,
        "top_personalities": _top(personalities),
        "situation_usage": dict(situations),
        "season_usage": dict(seasons),
        "top_aromas": _top(aromas),
        "empty_result_rate": round(empty / total * 100, 1) if total else 0.0,
    }
