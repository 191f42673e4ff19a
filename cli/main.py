"""Firecrawl demo CLI — terminal access to the same operations as the web UI.

Usage:
    firecrawl-demo --help

Commands:
    scrape   → POST /api/scrape
    crawl    → POST /api/crawl
    batch    → POST /api/batch-scrape
    status   → POST /api/crawl-status
    setup    → API key instructions
    serve    → run the web app under uvicorn
"""

from __future__ import annotations

import json
from typing import Any, Callable, List

import typer

from firecrawl_demo.config import SETUP_INSTRUCTIONS, settings
from firecrawl_demo.scraper import (
    batch_scrape,
    job_status,
    make_client,
    scrape_url,
    start_crawl,
)

app = typer.Typer(
    name="firecrawl-demo",
    help="Scrape, crawl and batch-scrape through the Firecrawl API.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _scrape_options(html: bool, full_page: bool) -> dict[str, Any]:
    formats = ["markdown"]
    if html:
        formats.append("html")
    return {"formats": formats, "onlyMainContent": not full_page}


def _run(tag: str, call: Callable[[], dict[str, Any]]) -> None:
    """Run *call*, print its envelope as JSON, exit 1 on any failure."""
    try:
        result = call()
    except Exception as exc:
        typer.echo(f"[{tag}] Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    typer.echo(json.dumps(result, indent=2, default=str))


# ---------------------------------------------------------------------------
# Provider commands
# ---------------------------------------------------------------------------

@app.command("scrape")
def scrape(
    url: str = typer.Argument(..., help="URL to scrape."),
    html: bool = typer.Option(False, "--html", help="Also return the page HTML."),
    full_page: bool = typer.Option(False, "--full-page", help="Keep navigation and boilerplate."),
) -> None:
    """Scrape a single URL and print markdown, html and links."""
    client = make_client()
    typer.echo(f"[scrape] Scraping {url!r} …", err=True)
    _run("scrape", lambda: scrape_url(client, url, _scrape_options(html, full_page)))


@app.command("crawl")
def crawl(
    url: str = typer.Argument(..., help="Starting URL."),
    limit: int = typer.Option(settings.crawl_default_limit, min=1, help="Maximum pages to crawl."),
    depth: int = typer.Option(settings.crawl_default_depth, min=1, help="Maximum link depth."),
    html: bool = typer.Option(False, "--html", help="Also return page HTML."),
    full_page: bool = typer.Option(False, "--full-page", help="Keep navigation and boilerplate."),
) -> None:
    """Start a crawl job and print its job id."""
    client = make_client()
    options = {
        "limit": limit,
        "maxDepth": depth,
        "scrapeOptions": _scrape_options(html, full_page),
    }
    typer.echo(f"[crawl] Starting crawl of {url!r}  (limit={limit}, depth={depth})", err=True)
    _run("crawl", lambda: start_crawl(client, url, options))


@app.command("batch")
def batch(
    urls: List[str] = typer.Argument(..., help="URLs to scrape."),
    html: bool = typer.Option(False, "--html", help="Also return page HTML."),
    full_page: bool = typer.Option(False, "--full-page", help="Keep navigation and boilerplate."),
) -> None:
    """Batch-scrape several URLs."""
    client = make_client()
    typer.echo(f"[batch] Submitting {len(urls)} URL(s) …", err=True)
    _run("batch", lambda: batch_scrape(client, urls, _scrape_options(html, full_page)))


@app.command("status")
def status(
    job_id: str = typer.Argument(..., help="Job id returned by crawl or batch."),
    batch_job: bool = typer.Option(False, "--batch", help="Poll a batch scrape job instead of a crawl."),
) -> None:
    """Print the provider's status payload for a job."""
    client = make_client()
    kind = "batch" if batch_job else "crawl"
    _run("status", lambda: job_status(client, job_id, kind))


# ---------------------------------------------------------------------------
# Local commands
# ---------------------------------------------------------------------------

@app.command("setup")
def setup() -> None:
    """Show how to configure the Firecrawl API key."""
    typer.echo(SETUP_INSTRUCTIONS)
    if settings.api_key_configured:
        typer.echo("[setup] FIRECRAWL_API_KEY is configured.")
    else:
        typer.echo("[setup] FIRECRAWL_API_KEY is not set; the placeholder key is in use.")


@app.command("serve")
def serve(
    host: str = typer.Option(settings.host, help="Interface to bind."),
    port: int = typer.Option(settings.port, help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes."),
) -> None:
    """Run the web app (API + demo page) under uvicorn."""
    import uvicorn  # noqa: PLC0415

    typer.echo(f"[serve] Demo UI at http://{host}:{port}/")
    uvicorn.run("firecrawl_demo.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
