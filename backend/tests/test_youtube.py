"""Unit tests for cookmuse.platforms.youtube."""

from __future__ import annotations

from datetime import datetime, timezone

import httpx
import pytest

from cookmuse.config import Settings
from cookmuse.discovery.cascade import FallbackCascade, FallbackStage
from cookmuse.discovery.context import SearchMode
from cookmuse.errors import (
    InvalidConfigurationError,
    InvalidQueryError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
)
from cookmuse.platforms import SearchClientRegistry
from cookmuse.platforms.base import CandidateVideo, SearchOrder, format_count
from cookmuse.platforms.youtube import (
    YouTubeSearchClient,
    clean_description,
    months_ago,
    parse_duration,
    region_for,
)

BASE_URL = "https://yt.test/youtube/v3"
FIXED_NOW = datetime(2024, 8, 31, 12, 0, 0, tzinfo=timezone.utc)


def _search_item(video_id: str, title: str = "Title") -> dict:
    return {
        "id": {"kind": "youtube#video", "videoId": video_id},
        "snippet": {
            "title": title,
            "description": "desc",
            "channelTitle": "Chef",
            "publishedAt": "2024-05-01T10:00:00Z",
            "thumbnails": {"medium": {"url": f"https://i.ytimg.com/{video_id}/mq.jpg"}},
        },
    }


def _video_item(video_id: str, likes: str | None = "10", views: str | None = "100") -> dict:
    statistics = {}
    if likes is not None:
        statistics["likeCount"] = likes
    if views is not None:
        statistics["viewCount"] = views
    return {
        "id": video_id,
        "snippet": {
            "title": "Tom &amp; Jerry&#39;s stew",
            "description": "x" * 250,
            "channelTitle": "Chef",
            "publishedAt": "2024-05-01T10:00:00Z",
            "thumbnails": {"default": {"url": "https://i.ytimg.com/default.jpg"}},
        },
        "statistics": statistics,
        "contentDetails": {"duration": "PT1H2M3S"},
    }


def _client(handler, api_key: str = "test-key") -> YouTubeSearchClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return YouTubeSearchClient(api_key, base_url=BASE_URL, client=http, clock=lambda: FIXED_NOW)


def _error(status: int, reason: str) -> httpx.Response:
    return httpx.Response(
        status,
        json={"error": {"code": status, "message": "nope", "errors": [{"reason": reason}]}},
    )


# ── Helpers ─────────────────────────────────────────────────────────────


def test_parse_duration():
    assert parse_duration("PT4M13S") == 253
    assert parse_duration("PT1H") == 3600
    assert parse_duration("P1DT1S") == 86401
    assert parse_duration("P0D") == 0
    assert parse_duration("") is None
    assert parse_duration("garbage") is None


def test_months_ago_clamps_to_month_end():
    assert months_ago(FIXED_NOW, 6) == datetime(2024, 2, 29, 12, 0, 0, tzinfo=timezone.utc)
    assert months_ago(FIXED_NOW, 1) == datetime(2024, 7, 31, 12, 0, 0, tzinfo=timezone.utc)
    assert months_ago(datetime(2024, 3, 15), 4) == datetime(2023, 11, 15)


def test_region_table_with_default():
    assert region_for("zh-Hans") == ("CN", "zh")
    assert region_for("ko") == ("KR", "ko")
    assert region_for("pt-BR") == ("US", "en")


def test_clean_description_truncates():
    assert clean_description("a &amp; b") == "a & b"
    assert clean_description("y" * 201) == "y" * 200 + "..."


def test_candidate_labels():
    video = CandidateVideo(video_id="abc", title="t", duration_seconds=253, like_count=1500)
    assert video.duration_label == "4:13"
    assert video.like_count_label == "1.5K"
    assert video.video_url == "https://www.youtube.com/watch?v=abc"
    assert video.embed_url == "https://www.youtube.com/embed/abc"
    assert format_count(2_500_000) == "2.5M"
    assert format_count(999) == "999"


def test_registry_exposes_youtube():
    assert "youtube" in SearchClientRegistry.list_providers()
    with pytest.raises(ValueError):
        SearchClientRegistry.get("vimeo")


# ── Search ──────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_search_sends_window_and_quality_filters():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"items": [_search_item("v1"), _search_item("v2")]})

    client = _client(handler)

    hits = await client.search(
        "potato beef recipe",
        "ja",
        window_months=6,
        max_results=2,
        order_by=SearchOrder.RELEVANCE,
    )

    params = seen["params"]
    assert seen["path"] == "/youtube/v3/search"
    assert params["q"] == "potato beef recipe"
    assert params["type"] == "video"
    assert params["maxResults"] == "2"
    assert params["order"] == "relevance"
    assert params["regionCode"] == "JP"
    assert params["relevanceLanguage"] == "ja"
    assert params["publishedAfter"] == "2024-02-29T12:00:00Z"
    assert params["videoDuration"] == "medium"
    assert params["videoDefinition"] == "high"
    assert params["key"] == "test-key"

    assert [h.video_id for h in hits] == ["v1", "v2"]
    assert hits[0].channel_title == "Chef"
    assert hits[0].thumbnail_url == "https://i.ytimg.com/v1/mq.jpg"
    assert hits[0].published_at == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_unbounded_search_omits_window_and_filters():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"items": []})

    client = _client(handler)

    hits = await client.search(
        "q",
        "en",
        window_months=None,
        max_results=500,
        order_by=SearchOrder.VIEW_COUNT,
        quality_filters=False,
    )

    assert hits == []
    params = seen["params"]
    assert "publishedAfter" not in params
    assert "videoDuration" not in params
    assert "videoDefinition" not in params
    assert params["order"] == "viewCount"
    assert params["maxResults"] == "50"


@pytest.mark.asyncio
async def test_search_skips_items_without_video_id():
    def handler(request):
        return httpx.Response(
            200, json={"items": [{"id": {"kind": "youtube#channel"}}, _search_item("v1")]}
        )

    hits = await _client(handler).search(
        "q", "en", window_months=None, max_results=5, order_by=SearchOrder.RELEVANCE
    )

    assert [h.video_id for h in hits] == ["v1"]


@pytest.mark.asyncio
async def test_missing_api_key_fails_before_any_request():
    def handler(request):
        raise AssertionError("no request expected")

    client = _client(handler, api_key="")

    with pytest.raises(InvalidConfigurationError):
        await client.search("q", "en", window_months=None, max_results=5, order_by=SearchOrder.RELEVANCE)


@pytest.mark.asyncio
async def test_blank_query_is_invalid():
    client = _client(lambda request: httpx.Response(200, json={"items": []}))

    with pytest.raises(InvalidQueryError):
        await client.search("  ", "en", window_months=None, max_results=5, order_by=SearchOrder.RELEVANCE)


@pytest.mark.parametrize(
    ("response", "expected"),
    [
        (_error(403, "quotaExceeded"), RateLimitedError),
        (_error(429, "rateLimitExceeded"), RateLimitedError),
        (_error(400, "keyInvalid"), InvalidConfigurationError),
        (_error(403, "forbidden"), InvalidConfigurationError),
        (_error(400, "invalidSearchFilter"), InvalidQueryError),
        (_error(404, "videoNotFound"), NotFoundError),
        (_error(503, "backendError"), NetworkError),
        (httpx.Response(502, text="Bad Gateway"), NetworkError),
        (httpx.Response(503, json={"error": "backend unavailable"}), NetworkError),
        (httpx.Response(500, json=["oops"]), NetworkError),
        (httpx.Response(403, json={"error": {"errors": ["quotaExceeded"]}}), InvalidConfigurationError),
    ],
)
@pytest.mark.asyncio
async def test_http_errors_map_to_taxonomy(response, expected):
    client = _client(lambda request: response)

    with pytest.raises(expected):
        await client.search("q", "en", window_months=None, max_results=5, order_by=SearchOrder.RELEVANCE)


@pytest.mark.asyncio
async def test_transport_errors_are_network_errors():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(NetworkError):
        await _client(handler).fetch_details(["v1"])


# ── Details ─────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_fetch_details_parses_statistics():
    seen = {}

    def handler(request):
        seen["params"] = dict(request.url.params)
        return httpx.Response(
            200, json={"items": [_video_item("v1"), _video_item("v2", likes=None, views="oops")]}
        )

    videos = await _client(handler).fetch_details(["v1", "v2", "v1"])

    assert seen["params"]["id"] == "v1,v2"
    assert seen["params"]["part"] == "snippet,statistics,contentDetails"
    first, second = videos
    assert first.like_count == 10
    assert first.view_count == 100
    assert first.duration_seconds == 3723
    assert first.duration_label == "1:02:03"
    assert first.title == "Tom & Jerry's stew"
    assert first.description == "x" * 200 + "..."
    assert first.thumbnail_url == "https://i.ytimg.com/default.jpg"
    assert second.like_count == 0
    assert second.view_count == 0


@pytest.mark.asyncio
async def test_fetch_details_batches_ids():
    batches = []

    def handler(request):
        ids = request.url.params["id"].split(",")
        batches.append(ids)
        return httpx.Response(200, json={"items": [_video_item(i) for i in ids]})

    ids = [f"v{i}" for i in range(60)]
    videos = await _client(handler).fetch_details(ids)

    assert [len(b) for b in batches] == [50, 10]
    assert [v.video_id for v in videos] == ids


@pytest.mark.asyncio
async def test_fetch_details_without_ids_makes_no_request():
    def handler(request):
        raise AssertionError("no request expected")

    assert await _client(handler).fetch_details([]) == []


@pytest.mark.asyncio
async def test_non_object_body_is_a_network_error():
    client = _client(lambda request: httpx.Response(200, json=["v1"]))

    with pytest.raises(NetworkError):
        await client.search("q", "en", window_months=None, max_results=5, order_by=SearchOrder.RELEVANCE)


@pytest.mark.asyncio
async def test_bare_string_error_lets_the_cascade_fall_back():
    calls = []

    def handler(request):
        calls.append(dict(request.url.params))
        if "publishedAfter" in request.url.params:
            return httpx.Response(503, json={"error": "backend unavailable"})
        return httpx.Response(200, json={"items": []})

    cascade = FallbackCascade(_client(handler), Settings(_env_file=None))

    result = await cascade.run("potato beef", "en", SearchMode.SELECTION, 2)

    assert result.stages == [FallbackStage.RECENT_STRICT, FallbackStage.UNBOUNDED]
    assert result.videos == []
    assert len(calls) == 2
