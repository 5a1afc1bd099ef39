"""
Data models for the documentation search service.

This package contains:
- index: The search index as loaded from storage (read-only)
- search: Per-query search result models
"""

from .index import (
    MalformedIndexError,
    Heading,
    AuthRequirement,
    IndexConfig,
    SearchDocument,
    SearchIndex,
)

from .search import MatchInfo, SearchResult

__all__ = [
    # Index models
    "MalformedIndexError",
    "Heading",
    "AuthRequirement",
    "IndexConfig",
    "SearchDocument",
    "SearchIndex",
    # Search models
    "MatchInfo",
    "SearchResult",
]
