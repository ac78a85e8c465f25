from __future__ import annotations

from typing import Iterable

from cookmuse.discovery.context import RankingMetric
from cookmuse.platforms.base import CandidateVideo


def sort_key(metric: RankingMetric):
    attr = metric.value
    return lambda video: (-getattr(video, attr), video.video_id)


def dedupe(candidates: Iterable[CandidateVideo]) -> list[CandidateVideo]:
    """Collapse videos sharing an id; the first occurrence wins."""
    seen: dict[str, CandidateVideo] = {}
    for video in candidates:
        seen.setdefault(video.video_id, video)
    return list(seen.values())


def rank(candidates: Iterable[CandidateVideo], metric: RankingMetric, limit: int) -> list[CandidateVideo]:
    """Sort by ``metric`` descending (id ascending on ties) and truncate."""
    if limit <= 0:
        return []
    return sorted(candidates, key=sort_key(metric))[:limit]


def merge(candidates: Iterable[CandidateVideo], metric: RankingMetric, limit: int) -> list[CandidateVideo]:
    """Final merge over every search path: dedupe, rank, truncate."""
    return rank(dedupe(candidates), metric, limit)
