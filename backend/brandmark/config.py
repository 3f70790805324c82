"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    brandmark_env: str = "development"
    brandmark_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Public origin used in robots.txt / sitemap.xml
    site_url: str = "https://onebbau.de"

    # Browsers revalidate every time, shared caches keep it for a day
    favicon_cache_control: str = (
        "public, max-age=0, s-maxage=86400, stale-while-revalidate=604800"
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
