"""
Search index loader.

Resolves the current index through an ordered fallback chain:
1. The key/value provider (key "search-index"), if one is configured
2. The blob provider (path "search-index.json")

The first step that yields a well-formed index wins. The index is
re-read on every call; caching belongs to the providers.
"""

import logging
from typing import Optional

import anyio

from ..models import SearchIndex
from .providers import BlobProvider, KeyValueProvider

logger = logging.getLogger(__name__)

INDEX_KEY = "search-index"
INDEX_PATH = "search-index.json"


class IndexUnavailable(Exception):
    """No provider could supply a usable search index."""

    def __init__(self, reason: str = ""):
        self.reason = reason
        super().__init__("Search index not available")


class IndexLoader:
    """Loads the search index from a key/value store with blob fallback."""

    def __init__(
        self,
        key_value: Optional[KeyValueProvider],
        blob: Optional[BlobProvider],
        key: str = INDEX_KEY,
        blob_path: str = INDEX_PATH,
    ):
        """Initialize the loader.

        Args:
            key_value: Primary provider, or None to skip straight to the blob
            blob: Fallback provider, or None to disable the fallback
            key: Key of the index in the key/value store
            blob_path: Path of the index in the blob store
        """
        self.key_value = key_value
        self.blob = blob
        self.key = key
        self.blob_path = blob_path

    async def _from_key_value(self) -> Optional[SearchIndex]:
        if self.key_value is None:
            return None
        try:
            payload = await self.key_value.get(self.key)
            if not payload:
                logger.info(f"Key '{self.key}' not found, falling back to blob store")
                return None
            return SearchIndex.from_dict(payload)
        except Exception as e:
            # Provider faults and malformed payloads fall through to the blob
            logger.warning(f"Key/value index read failed: {e}")
            return None

    async def _from_blob(self) -> Optional[SearchIndex]:
        if self.blob is None:
            return None
        try:
            response = await self.blob.fetch(self.blob_path)
            if not response.ok:
                logger.warning(f"Blob fetch of '{self.blob_path}' returned {response.status}")
                return None
            return SearchIndex.from_dict(response.json())
        except Exception as e:
            logger.warning(f"Blob index read failed: {e}")
            return None

    async def load(self, deadline: Optional[float] = None) -> SearchIndex:
        """
        Load the current search index.

        Args:
            deadline: Seconds allowed for the whole load, or None for no limit.
                Pending upstream reads are cancelled once it expires.

        Returns:
            The loaded SearchIndex

        Raises:
            IndexUnavailable: If every provider missed, failed or timed out
        """
        try:
            with anyio.fail_after(deadline):
                index = await self._from_key_value()
                if index is None:
                    index = await self._from_blob()
        except TimeoutError:
            logger.warning(f"Index load exceeded deadline of {deadline}s")
            raise IndexUnavailable("timeout")

        if index is None:
            raise IndexUnavailable("no provider returned an index")

        logger.debug(f"Loaded index v{index.version} with {len(index)} documents")
        return index
