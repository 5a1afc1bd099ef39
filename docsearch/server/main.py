"""
FastAPI Application Entry Point.

Documentation Search API - server-side search for htmx-enhanced books

Run with:
    uvicorn docsearch.server.main:app --host 0.0.0.0 --port 8000

Or for development:
    uvicorn docsearch.server.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import router
from .config import get_settings
from .dependencies import get_loader

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the index loader up front so misconfiguration shows in the
    startup log. The index itself is read per request.
    """
    logger.info("Starting Documentation Search API Server...")
    get_loader()

    yield

    logger.info("Shutting down Documentation Search API Server...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
## Documentation Search API

Server-side search over a pre-built book search index.

- **JSON** results for API clients
- **HTML fragments** for htmx-driven search boxes (`HX-Request: true`)

The index is read from a key/value directory when configured, falling back
to `search-index.json` in the built asset bundle.
""",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.include_router(router, tags=["Search"])

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "docsearch.server.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
