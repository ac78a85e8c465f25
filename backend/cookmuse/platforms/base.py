from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Iterable

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/{video_id}"


class SearchOrder(str, enum.Enum):
    RELEVANCE = "relevance"
    VIEW_COUNT = "viewCount"


@dataclass(frozen=True)
class SearchHit:
    """A raw search result, before statistics are fetched."""

    video_id: str
    title: str
    description: str = ""
    thumbnail_url: str = ""
    channel_title: str = ""
    published_at: datetime | None = None


@dataclass(frozen=True)
class CandidateVideo:
    """Provider-agnostic video metadata with engagement statistics.

    Identity is ``video_id``: two instances with the same id describe the
    same logical video.
    """

    video_id: str
    title: str
    description: str = ""
    thumbnail_url: str = ""
    channel_title: str = ""
    published_at: datetime | None = None
    duration_seconds: int | None = None
    like_count: int = 0
    view_count: int = 0

    @property
    def video_url(self) -> str:
        return YOUTUBE_WATCH_URL.format(video_id=self.video_id)

    @property
    def embed_url(self) -> str:
        return YOUTUBE_EMBED_URL.format(video_id=self.video_id)

    @property
    def duration_label(self) -> str | None:
        if self.duration_seconds is None:
            return None
        hours, rest = divmod(self.duration_seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        if hours:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    @property
    def like_count_label(self) -> str:
        return format_count(self.like_count)

    @property
    def view_count_label(self) -> str:
        return format_count(self.view_count)


def format_count(value: int) -> str:
    """Compact display form: 950, 1.2K, 3.4M."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return str(value)


class SearchClient(ABC):
    """Abstract base class for video search providers.

    To add a new provider, subclass this and register with
    @SearchClientRegistry.register("provider_name").
    """

    @abstractmethod
    async def search(
        self,
        query: str,
        language: str,
        *,
        window_months: int | None,
        max_results: int,
        order_by: SearchOrder,
        quality_filters: bool = True,
    ) -> list[SearchHit]:
        """Search for videos matching the query.

        ``window_months`` restricts results to videos published within the
        last N months; ``None`` means no recency constraint.
        """
        ...

    @abstractmethod
    async def fetch_details(self, video_ids: Iterable[str]) -> list[CandidateVideo]:
        """Fetch statistics and content details for the given video ids."""
        ...

    async def aclose(self) -> None:
        """Release any network resources held by the client."""


class SearchClientRegistry:
    """Registry for search clients. Use as a decorator to register new providers."""

    _clients: ClassVar[dict[str, type[SearchClient]]] = {}

    @classmethod
    def register(cls, name: str):
        """Decorator to register a search client class."""

        def decorator(client_cls: type[SearchClient]):
            cls._clients[name] = client_cls
            return client_cls

        return decorator

    @classmethod
    def get(cls, name: str, **kwargs) -> SearchClient:
        """Instantiate and return a registered search client."""
        if name not in cls._clients:
            available = ", ".join(cls._clients.keys()) or "(none)"
            raise ValueError(
                f"Unknown provider '{name}'. Available: {available}"
            )
        return cls._clients[name](**kwargs)

    @classmethod
    def list_providers(cls) -> list[str]:
        return list(cls._clients.keys())
