"""
Result ordering and truncation.
"""

from ..models import SearchResult
from .config import DEFAULT_CONFIG


def rank_results(
    results: list[SearchResult],
    limit: int = DEFAULT_CONFIG.max_results,
) -> list[SearchResult]:
    """Sort by score descending and keep the top `limit` results.

    `sorted` is stable and `reverse=True` keeps equal-score results in
    their input (index) order.
    """
    ranked = sorted(results, key=lambda r: r.score, reverse=True)
    return ranked[:limit]
