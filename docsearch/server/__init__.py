"""
FastAPI Server for documentation search.

This package provides a thin HTTP wrapper around the search engine.
"""

from .main import app, create_app
from .render import escape_html, render_html, render_json
from .schemas import SearchHit, SearchResponse, ErrorResponse

__all__ = [
    "app",
    "create_app",
    # Rendering
    "escape_html",
    "render_html",
    "render_json",
    # Schemas
    "SearchHit",
    "SearchResponse",
    "ErrorResponse",
]
