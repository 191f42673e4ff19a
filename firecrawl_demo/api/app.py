"""FastAPI application factory.

Lifespan
--------
On startup the app builds a single Firecrawl client (shared across all
requests via ``request.app.state.firecrawl``).  The SDK client holds no
connections of its own, so there is nothing to close on shutdown.

Routers
-------
    /api/scrape, /api/batch-scrape     — page scraping
    /api/crawl, /api/crawl-status      — crawl jobs and job polling
    /, /firecrawl-demo                 — tabbed demo UI
    /health                            — liveness probe
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from firecrawl_demo.api.errors import install_error_handlers
from firecrawl_demo.config import settings
from firecrawl_demo.scraper import make_client

from firecrawl_demo.api.routers import crawl as crawl_router
from firecrawl_demo.api.routers import pages as pages_router
from firecrawl_demo.api.routers import scrape as scrape_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the provider client on startup."""
    if not settings.api_key_configured:
        print(
            "[startup] FIRECRAWL_API_KEY is not set; using the placeholder key. "
            "Provider calls will fail until a real key is configured."
        )
    app.state.firecrawl = make_client()
    yield


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Firecrawl Demo API",
        description=(
            "Trigger single-page scraping, site crawling, batch scraping and "
            "job-status polling against the Firecrawl service."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(app)

    app.include_router(scrape_router.router, prefix="/api", tags=["scrape"])
    app.include_router(crawl_router.router, prefix="/api", tags=["crawl"])
    app.include_router(pages_router.router)

    @app.get("/health", tags=["system"])
    def health() -> dict[str, Any]:
        """Liveness probe; never calls the provider."""
        return {"status": "ok", "api_key_configured": settings.api_key_configured}

    return app


# Module-level instance used by uvicorn:
#   uvicorn firecrawl_demo.api.app:app --reload
app = create_app()
