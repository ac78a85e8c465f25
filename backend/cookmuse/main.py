import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cookmuse import __version__
from cookmuse.api.routes.health import router as health_router
from cookmuse.api.routes.recipes import router as recipes_router
from cookmuse.config import settings
from cookmuse.platforms import SearchClientRegistry
from cookmuse.platforms.youtube import close_shared_client

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting CookMuse %s (%s)", __version__, settings.app_env)
    if not settings.youtube_api_key:
        logger.warning("YOUTUBE_API_KEY is not set; searches will fail until it is configured")
    app.state.search_client = SearchClientRegistry.get("youtube")

    yield
    await app.state.search_client.aclose()
    await close_shared_client()


app = FastAPI(
    title="CookMuse",
    description="Cooking video recommendations for the ingredients you have",
    version=__version__,
    debug=settings.app_debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/api", tags=["health"])
app.include_router(recipes_router, prefix="/api", tags=["recipes"])
