"""Scraper package — thin wrappers around the Firecrawl SDK."""

from firecrawl_demo.scraper.client import ProviderError, make_client
from firecrawl_demo.scraper.models import JobHandle, ScrapedPage
from firecrawl_demo.scraper.operations import (
    batch_scrape,
    job_status,
    scrape_url,
    start_crawl,
)

__all__ = [
    "make_client",
    "ProviderError",
    "scrape_url",
    "start_crawl",
    "batch_scrape",
    "job_status",
    "ScrapedPage",
    "JobHandle",
]
