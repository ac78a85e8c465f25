import logging

from fastapi import APIRouter, Depends, HTTPException

from cookmuse.api.deps import get_orchestrator
from cookmuse.catalog import (
    KITCHENWARE_TAGS,
    MEAT_TAGS,
    STAPLE_TAGS,
    SUPPORTED_LANGUAGES,
    VEGETABLE_TAGS,
)
from cookmuse.discovery import DiscoveryOrchestrator, DiscoveryResult
from cookmuse.errors import DiscoveryError, InvalidConfigurationError
from cookmuse.schemas import (
    CatalogResponse,
    DiscoveryResponse,
    GachaRequest,
    SearchFailureResponse,
    SelectionSearchRequest,
    TrendingSearchRequest,
    VideoResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(result: DiscoveryResult) -> DiscoveryResponse:
    return DiscoveryResponse(
        videos=[VideoResponse.model_validate(v) for v in result.videos],
        queries=result.queries,
        ingredients=result.ingredients,
        failures=[
            SearchFailureResponse(query=f.query, error_type=f.error_type, transient=f.transient)
            for f in result.failures
        ],
    )


async def _run(coro) -> DiscoveryResponse:
    try:
        result = await coro
    except InvalidConfigurationError as e:
        logger.error("Video search is misconfigured: %s", e)
        raise HTTPException(status_code=503, detail="视频搜索服务未正确配置，请检查 API 密钥")
    except DiscoveryError as e:
        raise HTTPException(status_code=502, detail=f"视频搜索失败: {e}")
    return _to_response(result)


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog():
    return CatalogResponse(
        vegetables=list(VEGETABLE_TAGS),
        meats=list(MEAT_TAGS),
        staples=list(STAPLE_TAGS),
        kitchenware=list(KITCHENWARE_TAGS),
        languages=list(SUPPORTED_LANGUAGES),
    )


@router.post("/recipes/search", response_model=DiscoveryResponse)
async def search_recipes(
    body: SelectionSearchRequest,
    orchestrator: DiscoveryOrchestrator = Depends(get_orchestrator),
):
    return await _run(
        orchestrator.search_by_selection(body.ingredients, body.kitchenware, body.language)
    )


@router.post("/recipes/trending", response_model=DiscoveryResponse)
async def search_trending(
    body: TrendingSearchRequest,
    orchestrator: DiscoveryOrchestrator = Depends(get_orchestrator),
):
    return await _run(
        orchestrator.search_trending(body.ingredients, body.language, body.max_results)
    )


@router.post("/recipes/gacha", response_model=DiscoveryResponse)
async def gacha(
    body: GachaRequest,
    orchestrator: DiscoveryOrchestrator = Depends(get_orchestrator),
):
    """Random match: trending videos for a random ingredient draw."""
    return await _run(orchestrator.search_gacha(body.language, body.servings))
