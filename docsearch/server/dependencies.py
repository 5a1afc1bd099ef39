"""
Dependency injection for FastAPI.

Provides singleton index loader and search engine instances. Tests swap
them through `app.dependency_overrides`.
"""

import logging
from typing import Optional

from ..indexing import (
    BlobProvider,
    DirectoryKeyValueStore,
    HttpBlobProvider,
    IndexLoader,
    KeyValueProvider,
    LocalBlobProvider,
)
from ..retrieval import SearchEngine
from .config import get_settings

logger = logging.getLogger(__name__)

# Global singleton instances
_loader_instance: Optional[IndexLoader] = None
_engine_instance: Optional[SearchEngine] = None


def _build_blob_provider() -> Optional[BlobProvider]:
    settings = get_settings()

    if settings.assets_url:
        logger.info(f"  Asset origin: {settings.assets_url}")
        return HttpBlobProvider(settings.assets_url)
    if settings.assets_dir is not None:
        logger.info(f"  Asset dir: {settings.assets_dir}")
        return LocalBlobProvider(settings.assets_dir)

    logger.warning("No asset source configured - blob fallback disabled")
    return None


def _build_loader() -> IndexLoader:
    """Create the index loader from settings."""
    settings = get_settings()

    logger.info("Configuring search index loader...")
    key_value: Optional[KeyValueProvider] = None
    if settings.kv_dir is not None:
        logger.info(f"  Key/value dir: {settings.kv_dir}")
        key_value = DirectoryKeyValueStore(settings.kv_dir)

    return IndexLoader(
        key_value=key_value,
        blob=_build_blob_provider(),
        key=settings.index_key,
        blob_path=settings.index_path,
    )


def get_loader() -> IndexLoader:
    """Get the singleton index loader."""
    global _loader_instance

    if _loader_instance is None:
        _loader_instance = _build_loader()
    return _loader_instance


def get_engine() -> SearchEngine:
    """Get the singleton search engine."""
    global _engine_instance

    if _engine_instance is None:
        _engine_instance = SearchEngine()
    return _engine_instance
