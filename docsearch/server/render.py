"""
Rendering of search results as JSON payloads or htmx HTML fragments.

Every value interpolated into HTML goes through `escape_html`.
"""

from ..models import SearchResult
from ..retrieval import DEFAULT_CONFIG
from .schemas import SearchHit, SearchResponse

HEADING_LIMIT = DEFAULT_CONFIG.max_rendered_headings

# "&" must be replaced first so the entities added afterwards stay intact
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(value: str) -> str:
    """Escape HTML special characters."""
    for char, entity in _HTML_ESCAPES:
        value = value.replace(char, entity)
    return value


# ============================================================================
# JSON
# ============================================================================

def render_json(results: list[SearchResult], heading_limit: int = HEADING_LIMIT) -> SearchResponse:
    """Build the JSON response model for ranked results."""
    return SearchResponse(
        results=[
            SearchHit(
                path=r.document.path,
                title=r.document.title,
                headings=r.top_headings(heading_limit),
                excerpt=r.excerpt,
                score=r.score,
            )
            for r in results
        ]
    )


# ============================================================================
# HTML fragments
# ============================================================================

def render_empty_html() -> str:
    """Placeholder shown before the user has typed a query."""
    return '<div class="search-no-results">Enter a search term</div>'


def render_no_results_html(query: str) -> str:
    return f'<div class="search-no-results">No results found for "{escape_html(query)}"</div>'


def _nav_attrs(href: str, target: str) -> str:
    """Link attributes for plain navigation plus an htmx content swap."""
    href = escape_html(href)
    return (
        f'href="{href}" hx-get="{href}" '
        f'hx-target="{escape_html(target)}" hx-push-url="true"'
    )


def _render_item(result: SearchResult, target: str, heading_limit: int) -> str:
    doc = result.document
    parts = [
        '  <li class="search-result-item" role="option">',
        f'    <a {_nav_attrs(doc.path, target)} class="search-result-link">',
        f'      <span class="search-result-title">{escape_html(doc.title)}</span>',
        "    </a>",
    ]

    headings = result.top_headings(heading_limit)
    if headings:
        parts.append('    <ul class="search-result-headings">')
        for text in headings:
            href = doc.path + result.anchor_for(text)
            parts.append(
                f'      <li><a {_nav_attrs(href, target)} class="search-result-heading">'
                f"{escape_html(text)}</a></li>"
            )
        parts.append("    </ul>")

    if result.excerpt:
        parts.append(f'    <p class="search-result-excerpt">{escape_html(result.excerpt)}</p>')

    parts.append("  </li>")
    return "\n".join(parts)


def render_html(
    results: list[SearchResult],
    query: str,
    target: str = "#content",
    heading_limit: int = HEADING_LIMIT,
) -> str:
    """
    Render ranked results as an accessible listbox fragment.

    Args:
        results: Ranked search results
        query: The raw query text (echoed when nothing matched)
        target: CSS selector of the region htmx swaps on click
        heading_limit: Maximum heading sub-links per result

    Returns:
        HTML fragment for insertion into the search results region
    """
    if not results:
        return render_no_results_html(query)

    items = "\n".join(_render_item(r, target, heading_limit) for r in results)
    return f'<ul class="search-results-list" role="listbox">\n{items}\n</ul>'
