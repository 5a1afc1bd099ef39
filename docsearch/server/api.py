"""
API route definitions for the search endpoint.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Header, Query
from fastapi.responses import HTMLResponse, JSONResponse, Response

from ..indexing import IndexLoader, IndexUnavailable
from ..retrieval import SearchEngine
from .config import Settings, get_settings
from .dependencies import get_engine, get_loader
from .render import render_empty_html, render_html, render_json
from .schemas import ErrorResponse, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter()

FRAGMENT_HEADER = "HX-Request"
UNAVAILABLE_MESSAGE = "Search index not available"


def wants_html(hx_request: Optional[str], accept: Optional[str]) -> bool:
    """HTML for htmx fragment requests or browsers asking for text/html."""
    return hx_request == "true" or "text/html" in (accept or "")


def _empty_response(html: bool) -> Response:
    """Response for a blank query. Carries no cache directive."""
    if html:
        return HTMLResponse(render_empty_html(), headers={"Vary": FRAGMENT_HEADER})
    return JSONResponse(SearchResponse().model_dump())


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={
        200: {"content": {"text/html": {}}, "description": "JSON results or an HTML fragment"},
        503: {"model": ErrorResponse, "description": "Search index not available"},
    },
    summary="Search the documentation",
    description="""
Full-text search over the book's search index.

Returns an HTML fragment when the request carries `HX-Request: true` or an
`Accept` header containing `text/html`; JSON otherwise.

Scoring per query term: title match +10, each matching heading +5,
body match +1. Results are ordered by score (ties keep index order) and
capped at 20.
"""
)
async def search(
    settings: Annotated[Settings, Depends(get_settings)],
    loader: Annotated[IndexLoader, Depends(get_loader)],
    engine: Annotated[SearchEngine, Depends(get_engine)],
    q: Annotated[Optional[str], Query(description="Search query")] = None,
    hx_request: Annotated[Optional[str], Header()] = None,
    accept: Annotated[Optional[str], Header()] = None,
) -> Response:
    """Search the index and render results in the negotiated format."""
    query = (q or "").strip()
    html = wants_html(hx_request, accept)

    if not query:
        return _empty_response(html)

    try:
        index = await loader.load(deadline=settings.load_timeout)
    except IndexUnavailable as e:
        logger.error(f"Search index unavailable: {e.reason}")
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(error=UNAVAILABLE_MESSAGE).model_dump(),
        )

    results = engine.search(index, query)
    logger.info(f"Query {query[:100]!r} returned {len(results)} results")

    cache_control = f"private, max-age={settings.cache_max_age}"
    if html:
        return HTMLResponse(
            render_html(results, query, target=settings.content_target),
            headers={"Vary": FRAGMENT_HEADER, "Cache-Control": cache_control},
        )

    return JSONResponse(
        render_json(results).model_dump(exclude_none=True),
        headers={"Cache-Control": cache_control},
    )
