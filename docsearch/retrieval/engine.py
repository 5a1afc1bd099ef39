"""
Search engine: composes scoring, excerpting and ranking.
"""

import logging
from typing import Optional

from ..models import SearchIndex, SearchResult
from .config import DEFAULT_CONFIG, SearchConfig
from .excerpt import build_excerpt
from .ranking import rank_results
from .scorer import score_documents, tokenize

logger = logging.getLogger(__name__)


class SearchEngine:
    """Stateless query pipeline over a loaded index."""

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def search(self, index: SearchIndex, query: str) -> list[SearchResult]:
        """
        Run a query against the index:
        1. Tokenize the query
        2. Score every document (zero scores dropped)
        3. Build excerpts for body matches
        4. Stable sort by score and truncate
        """
        terms = tokenize(query)
        if not terms:
            return []

        candidates = score_documents(index, terms, self.config)

        for result in candidates:
            if result.matches.body:
                result.excerpt = build_excerpt(result.document, terms, self.config)

        ranked = rank_results(candidates, self.config.max_results)
        logger.debug(
            f"Query {query[:100]!r}: {len(candidates)} candidates, {len(ranked)} returned"
        )
        return ranked
