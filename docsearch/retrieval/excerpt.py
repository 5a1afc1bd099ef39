"""
Context excerpts for search results.
"""

from typing import Optional

from ..models import SearchDocument
from .config import DEFAULT_CONFIG, SearchConfig


def build_excerpt(
    document: SearchDocument,
    terms: list[str],
    config: SearchConfig = DEFAULT_CONFIG,
) -> Optional[str]:
    """Cut a window of the body around the first matching term.

    The anchor term is the first term in query order that occurs in the
    body, not the earliest occurrence in the body. The window is taken
    from the original-case body and marked with an ellipsis on each side
    that was cut.

    Args:
        document: Document whose body matched
        terms: Tokenized query terms, in query order
        config: Window sizes

    Returns:
        Excerpt text, or None if no term occurs in the body
    """
    body = document.body
    if not body:
        return None

    body_lower = body.lower()
    first_term = next((t for t in terms if t in body_lower), None)
    if first_term is None:
        return None

    pos = body_lower.index(first_term)
    start = max(0, pos - config.excerpt_lead)
    end = min(len(body), pos + config.excerpt_tail)

    prefix = config.ellipsis if start > 0 else ""
    suffix = config.ellipsis if end < len(body) else ""
    return f"{prefix}{body[start:end]}{suffix}"
