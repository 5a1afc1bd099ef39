"""
Index loading for the documentation search service.

This package contains:
- providers: Key/value and blob storage providers
- loader: Fallback-chain index loader
"""

from .providers import (
    BlobResponse,
    KeyValueProvider,
    BlobProvider,
    DirectoryKeyValueStore,
    LocalBlobProvider,
    HttpBlobProvider,
)

from .loader import IndexLoader, IndexUnavailable, INDEX_KEY, INDEX_PATH

__all__ = [
    # Providers
    "BlobResponse",
    "KeyValueProvider",
    "BlobProvider",
    "DirectoryKeyValueStore",
    "LocalBlobProvider",
    "HttpBlobProvider",
    # Loader
    "IndexLoader",
    "IndexUnavailable",
    "INDEX_KEY",
    "INDEX_PATH",
]
