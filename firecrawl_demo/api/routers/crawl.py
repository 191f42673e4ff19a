"""Crawl endpoints — start a crawl and poll job status.

Routes
------
POST /api/crawl         Body: {"url": "https://...", "options": {...}}
POST /api/crawl-status  Body: {"jobId": "...", "kind": "crawl|batch"}

Crawls run asynchronously on the provider side; ``/api/crawl`` only returns
the job id.  ``kind`` defaults to ``crawl``; pass ``batch`` to poll a job
returned by ``/api/batch-scrape``.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field

from firecrawl_demo.api.errors import ApiError
from firecrawl_demo.scraper import job_status, start_crawl

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class CrawlBody(BaseModel):
    url: Optional[str] = None
    options: Optional[dict[str, Any]] = None


class CrawlStatusBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_id: Optional[str] = Field(default=None, alias="jobId")
    kind: Literal["crawl", "batch"] = "crawl"


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/crawl")
def crawl_endpoint(request: Request, body: Optional[CrawlBody] = None) -> dict[str, Any]:
    """Start crawling a site and return the provider's job id."""
    if body is None or not body.url:
        raise ApiError(400, "URL is required")

    client = request.app.state.firecrawl
    try:
        return start_crawl(client, body.url, body.options)
    except Exception as exc:
        print(f"[crawl] Error crawling website: {exc}")
        raise ApiError(500, str(exc) or "Failed to crawl website") from exc


@router.post("/crawl-status")
def crawl_status_endpoint(request: Request, body: Optional[CrawlStatusBody] = None) -> dict[str, Any]:
    """Return the provider's status payload for a crawl or batch job."""
    if body is None or not body.job_id:
        raise ApiError(400, "Job ID is required")

    client = request.app.state.firecrawl
    try:
        return job_status(client, body.job_id, body.kind)
    except Exception as exc:
        print(f"[crawl-status] Error checking crawl status: {exc}")
        raise ApiError(500, str(exc) or "Failed to check crawl status") from exc
