from __future__ import annotations

import calendar
import html
import logging
import re
from datetime import datetime, timezone
from typing import Callable, Iterable

import httpx

from cookmuse.config import settings
from cookmuse.errors import (
    InvalidConfigurationError,
    InvalidQueryError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
    SearchError,
)
from cookmuse.platforms.base import (
    CandidateVideo,
    SearchClient,
    SearchClientRegistry,
    SearchHit,
    SearchOrder,
)

logger = logging.getLogger(__name__)

# The API caps both maxResults and the number of ids per videos.list call
MAX_PAGE_SIZE = 50
DESCRIPTION_LIMIT = 200

# App language -> (regionCode, relevanceLanguage)
REGION_LANGUAGES: dict[str, tuple[str, str]] = {
    "en": ("US", "en"),
    "zh-Hans": ("CN", "zh"),
    "ja": ("JP", "ja"),
    "ko": ("KR", "ko"),
    "de": ("DE", "de"),
    "es": ("ES", "es"),
    "fr": ("FR", "fr"),
    "ru": ("RU", "ru"),
}
DEFAULT_REGION_LANGUAGE = ("US", "en")

RATE_LIMIT_REASONS = {
    "quotaExceeded",
    "rateLimitExceeded",
    "userRateLimitExceeded",
    "dailyLimitExceeded",
}
INVALID_KEY_REASONS = {"keyInvalid", "keyExpired", "accessNotConfigured", "forbidden"}

_DURATION_RE = re.compile(
    r"^P(?:(?P<days>\d+)D)?(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?$"
)

# Module-level shared client (lazily initialized, reused across client instances)
_shared_client: httpx.AsyncClient | None = None


def _get_shared_client() -> httpx.AsyncClient:
    """Get or create the shared httpx client for YouTube API calls."""
    global _shared_client
    if _shared_client is None or _shared_client.is_closed:
        _shared_client = httpx.AsyncClient(timeout=settings.http_timeout)
    return _shared_client


async def close_shared_client() -> None:
    global _shared_client
    if _shared_client is not None and not _shared_client.is_closed:
        await _shared_client.aclose()
    _shared_client = None


def region_for(language: str) -> tuple[str, str]:
    return REGION_LANGUAGES.get(language, DEFAULT_REGION_LANGUAGE)


def months_ago(now: datetime, months: int) -> datetime:
    """Step back ``months`` calendar months, clamping the day to month end."""
    index = now.year * 12 + (now.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def parse_duration(value: str | None) -> int | None:
    """Parse an ISO-8601 duration such as ``PT4M13S`` into seconds."""
    if not value:
        return None
    match = _DURATION_RE.match(value)
    if not match:
        return None
    parts = {k: int(v) if v else 0 for k, v in match.groupdict().items()}
    return parts["days"] * 86400 + parts["hours"] * 3600 + parts["minutes"] * 60 + parts["seconds"]


def clean_title(title: str) -> str:
    return html.unescape(title or "")


def clean_description(description: str) -> str:
    text = html.unescape(description or "")
    if len(text) > DESCRIPTION_LIMIT:
        return text[:DESCRIPTION_LIMIT] + "..."
    return text


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_count(value) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


def _thumbnail(snippet: dict) -> str:
    thumbnails = snippet.get("thumbnails") or {}
    for size in ("medium", "high", "default"):
        url = (thumbnails.get(size) or {}).get("url")
        if url:
            return url
    return ""


def _error_reason(response: httpx.Response) -> tuple[str, str]:
    try:
        body = response.json()
    except ValueError:
        return "", response.text[:200]
    error = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        # Some gateways send a bare string or list instead of the error object
        return "", str(error if error is not None else body)[:200]
    errors = error.get("errors") or [{}]
    first = errors[0] if isinstance(errors, list) and isinstance(errors[0], dict) else {}
    return first.get("reason", ""), str(error.get("message", ""))


def translate_http_error(response: httpx.Response) -> SearchError:
    """Map a failed YouTube API response onto the search error taxonomy."""
    status = response.status_code
    reason, message = _error_reason(response)
    detail = f"YouTube API {status} {reason}: {message}".strip()

    if status == 429 or reason in RATE_LIMIT_REASONS:
        return RateLimitedError(detail, status_code=status)
    if reason in INVALID_KEY_REASONS or status in (401, 403):
        return InvalidConfigurationError(detail, status_code=status)
    if status == 400:
        return InvalidQueryError(detail, status_code=status)
    if status == 404:
        return NotFoundError(detail, status_code=status)
    return NetworkError(detail, status_code=status)


@SearchClientRegistry.register("youtube")
class YouTubeSearchClient(SearchClient):
    """YouTube Data API v3 search client."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._api_key = settings.youtube_api_key if api_key is None else api_key
        self._base_url = (base_url or settings.youtube_api_base_url).rstrip("/")
        self._own_client = client
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def _client(self) -> httpx.AsyncClient:
        return self._own_client or _get_shared_client()

    async def _get(self, path: str, params: dict) -> dict:
        if not self._api_key:
            logger.error("YouTube API key is not configured")
            raise InvalidConfigurationError("YouTube API key is not configured")

        url = f"{self._base_url}/{path}"
        try:
            resp = await self._client.get(url, params={**params, "key": self._api_key})
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            error = translate_http_error(exc.response)
            logger.warning("YouTube %s failed: %s", path, error)
            raise error from exc
        except httpx.RequestError as exc:
            logger.warning("YouTube %s request error: %s", path, exc)
            raise NetworkError(f"YouTube request failed: {exc}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise NetworkError("YouTube returned a malformed response") from exc
        if not isinstance(data, dict):
            raise NetworkError("YouTube returned a malformed response")
        return data

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
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
        if not query.strip():
            raise InvalidQueryError("Search query is empty")

        region_code, relevance_language = region_for(language)
        params = {
            "part": "snippet",
            "q": query,
            "type": "video",
            "maxResults": max(1, min(max_results, MAX_PAGE_SIZE)),
            "order": order_by.value,
            "regionCode": region_code,
            "relevanceLanguage": relevance_language,
        }
        if window_months is not None:
            published_after = months_ago(self._clock(), window_months)
            params["publishedAfter"] = published_after.strftime("%Y-%m-%dT%H:%M:%SZ")
        if quality_filters:
            params["videoDuration"] = "medium"
            params["videoDefinition"] = "high"

        data = await self._get("search", params)

        hits = []
        for item in data.get("items") or []:
            ref = item.get("id") if isinstance(item, dict) else None
            video_id = ref.get("videoId") if isinstance(ref, dict) else None
            if not video_id:
                continue
            snippet = item.get("snippet") or {}
            hits.append(
                SearchHit(
                    video_id=video_id,
                    title=clean_title(snippet.get("title", "")),
                    description=clean_description(snippet.get("description", "")),
                    thumbnail_url=_thumbnail(snippet),
                    channel_title=snippet.get("channelTitle", ""),
                    published_at=_parse_timestamp(snippet.get("publishedAt")),
                )
            )

        logger.info(
            "Found %d videos for query '%s' (window=%s, order=%s)",
            len(hits),
            query,
            window_months,
            order_by.value,
        )
        return hits

    # ------------------------------------------------------------------
    # Details / statistics
    # ------------------------------------------------------------------
    async def fetch_details(self, video_ids: Iterable[str]) -> list[CandidateVideo]:
        ids = list(dict.fromkeys(v for v in video_ids if v))
        if not ids:
            return []

        videos: list[CandidateVideo] = []
        for start in range(0, len(ids), MAX_PAGE_SIZE):
            batch = ids[start:start + MAX_PAGE_SIZE]
            data = await self._get(
                "videos",
                {"part": "snippet,statistics,contentDetails", "id": ",".join(batch)},
            )
            for item in data.get("items") or []:
                if isinstance(item, dict):
                    videos.append(self._parse_video(item))

        logger.info("Fetched details for %d/%d videos", len(videos), len(ids))
        return videos

    @staticmethod
    def _parse_video(item: dict) -> CandidateVideo:
        snippet = item.get("snippet") or {}
        statistics = item.get("statistics") or {}
        content = item.get("contentDetails") or {}
        return CandidateVideo(
            video_id=item.get("id", ""),
            title=clean_title(snippet.get("title", "")),
            description=clean_description(snippet.get("description", "")),
            thumbnail_url=_thumbnail(snippet),
            channel_title=snippet.get("channelTitle", ""),
            published_at=_parse_timestamp(snippet.get("publishedAt")),
            duration_seconds=parse_duration(content.get("duration")),
            like_count=_parse_count(statistics.get("likeCount")),
            view_count=_parse_count(statistics.get("viewCount")),
        )

    async def aclose(self) -> None:
        if self._own_client is not None:
            await self._own_client.aclose()
