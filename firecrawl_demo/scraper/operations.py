"""The four provider operations exposed by the demo.

Each function takes a Firecrawl client (anything exposing the probed method
names), applies default options, calls the provider and returns the JSON
envelope served by the HTTP routes and printed by the CLI.

Raises:
    ProviderError: when the provider reports ``success: false`` or the
        client exposes none of the expected methods.  SDK exceptions
        propagate unchanged.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Optional, Sequence

from firecrawl_demo.scraper.client import require_method, resolve_method
from firecrawl_demo.scraper.models import JobKind
from firecrawl_demo.scraper.normalise import (
    ensure_success,
    format_page,
    job_handle,
    to_payload,
)
from firecrawl_demo.scraper.options import (
    crawl_kwargs,
    resolve_crawl_options,
    resolve_scrape_options,
    scrape_kwargs,
)

# Candidate SDK method names, newest spelling first.
SCRAPE_METHODS = ("scrape", "scrape_url")
CRAWL_METHODS = ("start_crawl", "async_crawl_url", "crawl_url")
BATCH_METHODS = (
    "start_batch_scrape",
    "async_batch_scrape_urls",
    "batch_scrape",
    "batch_scrape_urls",
)
STATUS_METHODS: dict[str, tuple[str, ...]] = {
    "crawl": ("get_crawl_status", "check_crawl_status"),
    "batch": ("get_batch_scrape_status", "check_batch_scrape_status"),
}

CRAWL_STARTED_MESSAGE = "Crawl job started successfully"
BATCH_DONE_MESSAGE = "Batch scrape operation completed successfully"
BATCH_FALLBACK_MESSAGE = "URLs scraped individually"


def scrape_url(client: Any, url: str, options: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Scrape a single page and return ``{success, data: {markdown, html, links}}``."""
    _, scrape = require_method(client, SCRAPE_METHODS)
    response = to_payload(scrape(url, **scrape_kwargs(resolve_scrape_options(options))))
    print(f"[scrape] Provider response: {json.dumps(response, indent=2, default=str)}")

    ensure_success(response, "Failed to scrape website")
    return {"success": True, "data": asdict(format_page(response))}


def start_crawl(client: Any, url: str, options: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Queue a crawl of *url* and return its job handle."""
    name, crawl = require_method(client, CRAWL_METHODS)
    print(f"[crawl] Starting crawl of {url!r} via client.{name}")
    response = to_payload(crawl(url, **crawl_kwargs(resolve_crawl_options(options))))

    ensure_success(response, "Failed to crawl website")
    handle = job_handle(response, "crawl")
    return {
        "success": True,
        "jobId": handle.job_id,
        "message": CRAWL_STARTED_MESSAGE,
        "status": handle.status,
    }


def batch_scrape(
    client: Any, urls: Sequence[str], options: Optional[dict[str, Any]] = None
) -> dict[str, Any]:
    """Scrape *urls* through the SDK's bulk method, or one by one if it has none.

    The per-URL fallback runs sequentially and keeps the input order.
    """
    kwargs = scrape_kwargs(resolve_scrape_options(options))

    found = resolve_method(client, BATCH_METHODS)
    if found is None:
        print("[batch-scrape] Batch scrape methods not available, falling back to individual scraping")
        _, scrape = require_method(client, SCRAPE_METHODS)
        results = [to_payload(scrape(url, **kwargs)) for url in urls]
        response: dict[str, Any] = {
            "success": True,
            "data": results,
            "message": BATCH_FALLBACK_MESSAGE,
        }
    else:
        name, bulk = found
        print(f"[batch-scrape] Submitting {len(urls)} URL(s) via client.{name}")
        response = to_payload(bulk(list(urls), **kwargs))

    ensure_success(response, "Failed to batch scrape URLs")
    handle = job_handle(response, "batch")
    return {
        "success": True,
        "jobId": handle.job_id,
        "data": response.get("data"),
        "message": response.get("message") or BATCH_DONE_MESSAGE,
    }


def job_status(client: Any, job_id: str, kind: JobKind = "crawl") -> dict[str, Any]:
    """Return the provider's status payload for a crawl or batch job."""
    try:
        candidates = STATUS_METHODS[kind]
    except KeyError:
        raise ValueError(f"Unknown job kind {kind!r}; expected 'crawl' or 'batch'") from None

    _, get_status = require_method(client, candidates)
    response = to_payload(get_status(job_id))

    ensure_success(response, "Failed to get crawl status")
    return {**response, "success": True}
