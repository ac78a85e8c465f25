from datetime import datetime

from pydantic import BaseModel, Field


# --- Request Schemas ---

class SelectionSearchRequest(BaseModel):
    ingredients: list[str] = Field(default_factory=list, max_length=50, description="Ingredient tags")
    kitchenware: list[str] = Field(default_factory=list, max_length=10, description="Kitchenware tags")
    language: str | None = Field(default=None, description="App language code, e.g. en, zh-Hans")


class TrendingSearchRequest(BaseModel):
    ingredients: list[str] = Field(default_factory=list, max_length=50)
    language: str | None = None
    max_results: int = Field(default=5, ge=1, le=20, description="Number of videos to return")


class GachaRequest(BaseModel):
    language: str | None = None
    servings: int = Field(default=3, ge=1, le=10, description="Number of recipes to draw")


# --- Response Schemas ---

class VideoResponse(BaseModel):
    video_id: str
    title: str
    description: str
    thumbnail_url: str
    channel_title: str
    published_at: datetime | None = None
    duration_seconds: int | None = None
    duration_label: str | None = None
    like_count: int
    view_count: int
    like_count_label: str
    view_count_label: str
    video_url: str
    embed_url: str

    model_config = {"from_attributes": True}


class SearchFailureResponse(BaseModel):
    query: str
    error_type: str
    transient: bool


class DiscoveryResponse(BaseModel):
    videos: list[VideoResponse]
    queries: list[str]
    ingredients: list[str] = Field(default_factory=list)
    failures: list[SearchFailureResponse] = Field(default_factory=list)


class CatalogResponse(BaseModel):
    vegetables: list[str]
    meats: list[str]
    staples: list[str]
    kitchenware: list[str]
    languages: list[str]
