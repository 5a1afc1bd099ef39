"""
Server configuration and environment settings.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables (DOCSEARCH_*)."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    app_name: str = "Documentation Search API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Index sources: key/value directory first, then the asset bundle
    kv_dir: Optional[Path] = None
    assets_dir: Optional[Path] = Path("./book")
    assets_url: Optional[str] = None  # remote origin, takes precedence over assets_dir
    index_key: str = "search-index"
    index_path: str = "search-index.json"
    load_timeout: Optional[float] = 10.0  # seconds, per request

    # Rendering
    content_target: str = "#content"  # region swapped by hx-get links
    cache_max_age: int = 60


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
