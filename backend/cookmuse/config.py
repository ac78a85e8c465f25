from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_env: str = "development"
    app_debug: bool = True
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5174"]

    # YouTube Data API
    youtube_api_key: str = ""
    youtube_api_base_url: str = "https://www.googleapis.com/youtube/v3"
    http_timeout: float = 30.0

    # Discovery
    default_language: str = "en"
    selection_result_limit: int = 6

    # Per-combination quota: below the threshold each combination may
    # contribute the small quota, otherwise the large one.
    combination_quota_threshold: int = 4
    small_combination_quota: int = 2
    large_combination_quota: int = 1

    # Fallback cascade windows / raw-hit sizes
    selection_window_months: int = 6
    trending_window_months: int = 1
    selection_unbounded_raw_results: int = 20
    trending_min_raw_results: int = 20

    # Fan-out limits (0 = unlimited concurrency)
    max_concurrent_searches: int = 0
    search_deadline_seconds: float = 30.0


settings = Settings()
