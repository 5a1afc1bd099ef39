"""
Query pipeline for documentation search.

This package contains:
- config: Weights, window sizes and limits
- scorer: Query tokenization and weighted substring scoring
- excerpt: Context window extraction
- ranking: Stable ordering and truncation
- engine: The composed search pipeline
"""

from .config import SearchConfig, DEFAULT_CONFIG

from .scorer import tokenize, score_document, score_documents

from .excerpt import build_excerpt

from .ranking import rank_results

from .engine import SearchEngine

__all__ = [
    # Config
    "SearchConfig",
    "DEFAULT_CONFIG",
    # Scoring
    "tokenize",
    "score_document",
    "score_documents",
    # Excerpts
    "build_excerpt",
    # Ranking
    "rank_results",
    # Engine
    "SearchEngine",
]
