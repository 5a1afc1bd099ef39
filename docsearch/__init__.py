"""
docsearch - Server-side search for htmx documentation sites

Scores documents from a pre-built search index against a free-text query
and renders ranked results as JSON or as an htmx HTML fragment.

Packages:
    - models: Search index and search result models
    - indexing: Storage providers and the fallback-chain index loader
    - retrieval: Scoring, excerpting and ranking pipeline
    - server: FastAPI application and result rendering
"""

__version__ = "1.0.0"
__author__ = "docsearch"

# Core models
from .models import (
    MalformedIndexError,
    Heading,
    AuthRequirement,
    IndexConfig,
    SearchDocument,
    SearchIndex,
    MatchInfo,
    SearchResult,
)

# Indexing
from .indexing import (
    IndexLoader,
    IndexUnavailable,
    DirectoryKeyValueStore,
    LocalBlobProvider,
    HttpBlobProvider,
)

# Retrieval
from .retrieval import (
    SearchConfig,
    SearchEngine,
    tokenize,
    build_excerpt,
    rank_results,
)

__all__ = [
    # Version
    "__version__",
    # Core models
    "MalformedIndexError",
    "Heading",
    "AuthRequirement",
    "IndexConfig",
    "SearchDocument",
    "SearchIndex",
    "MatchInfo",
    "SearchResult",
    # Indexing
    "IndexLoader",
    "IndexUnavailable",
    "DirectoryKeyValueStore",
    "LocalBlobProvider",
    "HttpBlobProvider",
    # Retrieval
    "SearchConfig",
    "SearchEngine",
    "tokenize",
    "build_excerpt",
    "rank_results",
]
