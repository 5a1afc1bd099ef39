"""
Weighted substring scoring of documents against a query.

Scoring is presence-based: each distinct query term adds the title weight
once if it occurs in the title, the heading weight once per heading it
occurs in, and the body weight once if it occurs anywhere in the body.
Matching is substring containment on lowercased text, so "cat" matches
"concatenate".
"""

import logging

from ..models import MatchInfo, SearchDocument, SearchIndex, SearchResult
from .config import DEFAULT_CONFIG, SearchConfig

logger = logging.getLogger(__name__)


def tokenize(query: str) -> list[str]:
    """Lowercase the query and split it on whitespace runs.

    Duplicate terms are kept; each occurrence scores again.
    """
    return query.lower().split()


def score_document(
    document: SearchDocument,
    terms: list[str],
    config: SearchConfig = DEFAULT_CONFIG,
) -> SearchResult:
    """Score a single document. The result may have a score of 0."""
    title_lower = document.title.lower()
    body_lower = document.body.lower()
    headings_lower = [(h.text, h.text.lower()) for h in document.headings]

    score = 0
    matches = MatchInfo()

    for term in terms:
        if term in title_lower:
            score += config.title_weight
            matches.title = True

        for text, text_lower in headings_lower:
            if term in text_lower:
                score += config.heading_weight
                if text not in matches.headings:
                    matches.headings.append(text)

        if term in body_lower:
            score += config.body_weight
            matches.body = True

    return SearchResult(document=document, score=score, matches=matches)


def score_documents(
    index: SearchIndex,
    terms: list[str],
    config: SearchConfig = DEFAULT_CONFIG,
) -> list[SearchResult]:
    """Score every document in the index, dropping zero-score documents.

    Args:
        index: Loaded search index
        terms: Tokenized query terms
        config: Scoring weights

    Returns:
        Matching results in index order
    """
    if not terms:
        return []

    results = []
    for document in index.documents:
        result = score_document(document, terms, config)
        if result.score > 0:
            results.append(result)

    logger.debug(f"Scored {len(index.documents)} documents, {len(results)} matched")
    return results
