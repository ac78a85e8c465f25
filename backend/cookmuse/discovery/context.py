from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable

from cookmuse.catalog import unique
from cookmuse.platforms.base import CandidateVideo


class SearchMode(str, enum.Enum):
    SELECTION = "selection"
    TRENDING = "trending"


class RankingMetric(str, enum.Enum):
    LIKE_COUNT = "like_count"
    VIEW_COUNT = "view_count"


def metric_for(mode: SearchMode) -> RankingMetric:
    if mode is SearchMode.TRENDING:
        return RankingMetric.VIEW_COUNT
    return RankingMetric.LIKE_COUNT


@dataclass(frozen=True)
class SearchRequest:
    """An immutable discovery request."""

    tags: tuple[str, ...]
    tools: tuple[str, ...] = ()
    language: str = "en"
    mode: SearchMode = SearchMode.SELECTION
    desired_count: int = 6

    def __post_init__(self):
        if self.desired_count < 1:
            raise ValueError(f"desired_count must be >= 1, got {self.desired_count}")
        object.__setattr__(self, "tags", unique(self.tags))
        object.__setattr__(self, "tools", unique(self.tools))

    @classmethod
    def build(
        cls,
        tags: Iterable[str],
        tools: Iterable[str] = (),
        *,
        language: str,
        mode: SearchMode,
        desired_count: int,
    ) -> SearchRequest:
        return cls(
            tags=tuple(tags),
            tools=tuple(tools),
            language=language,
            mode=mode,
            desired_count=desired_count,
        )

    @property
    def metric(self) -> RankingMetric:
        return metric_for(self.mode)


@dataclass(frozen=True)
class TaskFailure:
    """A search task that contributed nothing because its last stage failed."""

    query: str
    error: BaseException

    @property
    def transient(self) -> bool:
        return bool(getattr(self.error, "transient", False))

    @property
    def error_type(self) -> str:
        return type(self.error).__name__


@dataclass
class DiscoveryResult:
    """Final ranked videos plus diagnostics about how they were found."""

    videos: list[CandidateVideo] = field(default_factory=list)
    queries: list[str] = field(default_factory=list)
    failures: list[TaskFailure] = field(default_factory=list)
    ingredients: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.videos)
