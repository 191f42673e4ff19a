"""Scrape endpoints — single page and batch.

Routes
------
POST /api/scrape        Body: {"url": "https://...", "options": {...}}
POST /api/batch-scrape  Body: {"urls": ["https://...", ...], "options": {...}}

``options`` is optional; when omitted the defaults
``{"formats": ["markdown"], "onlyMainContent": true}`` apply.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from firecrawl_demo.api.errors import ApiError
from firecrawl_demo.scraper import batch_scrape, scrape_url

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeBody(BaseModel):
    url: Optional[str] = None
    options: Optional[dict[str, Any]] = None


class BatchScrapeBody(BaseModel):
    # Left untyped so a non-list gets the route's own 400 message.
    urls: Any = None
    options: Optional[dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/scrape")
def scrape_endpoint(request: Request, body: Optional[ScrapeBody] = None) -> dict[str, Any]:
    """Scrape one URL and return its markdown, html and links."""
    if body is None or not body.url:
        raise ApiError(400, "URL is required")

    client = request.app.state.firecrawl
    try:
        return scrape_url(client, body.url, body.options)
    except Exception as exc:
        print(f"[scrape] Error scraping website: {exc}")
        raise ApiError(500, str(exc) or "Failed to scrape website") from exc


@router.post("/batch-scrape")
def batch_scrape_endpoint(request: Request, body: Optional[BatchScrapeBody] = None) -> dict[str, Any]:
    """Submit several URLs for scraping.

    Returns a job id when the SDK queues the batch, or the scraped documents
    directly when it had to fall back to one call per URL.
    """
    urls = body.urls if body is not None else None
    if not urls or not isinstance(urls, list):
        raise ApiError(400, "URLs array is required and must not be empty")

    client = request.app.state.firecrawl
    try:
        return batch_scrape(client, urls, body.options)
    except Exception as exc:
        print(f"[batch-scrape] Error batch scraping URLs: {exc}")
        raise ApiError(500, str(exc) or "Failed to batch scrape URLs") from exc
