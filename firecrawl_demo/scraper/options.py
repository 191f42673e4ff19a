"""Default option bags and their translation to SDK keyword arguments.

Request bodies use the provider's REST spelling (``onlyMainContent``,
``maxDepth``, ``scrapeOptions``); the Python SDK takes snake_case keywords.
A supplied options bag replaces the defaults wholesale, it is never merged.
"""

from __future__ import annotations

import copy
import re
from typing import Any, Optional

from firecrawl.v2.types import ScrapeOptions

from firecrawl_demo.config import settings

DEFAULT_SCRAPE_OPTIONS: dict[str, Any] = {
    "formats": ["markdown"],
    "onlyMainContent": True,
}

# REST names whose SDK keyword is not a plain snake_case conversion.
_RENAMED = {
    "maxDepth": "max_discovery_depth",
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake(key: str) -> str:
    """``onlyMainContent`` → ``only_main_content``; snake_case keys pass through."""
    if key in _RENAMED:
        return _RENAMED[key]
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def default_scrape_options() -> dict[str, Any]:
    return copy.deepcopy(DEFAULT_SCRAPE_OPTIONS)


def default_crawl_options() -> dict[str, Any]:
    return {
        "limit": settings.crawl_default_limit,
        "maxDepth": settings.crawl_default_depth,
        "scrapeOptions": default_scrape_options(),
    }


def resolve_scrape_options(options: Optional[dict[str, Any]]) -> dict[str, Any]:
    return default_scrape_options() if options is None else options


def resolve_crawl_options(options: Optional[dict[str, Any]]) -> dict[str, Any]:
    return default_crawl_options() if options is None else options


def scrape_kwargs(options: dict[str, Any]) -> dict[str, Any]:
    """Translate a scrape options bag into keyword arguments for ``scrape``/``batch_scrape``."""
    return {to_snake(key): value for key, value in options.items()}


def crawl_kwargs(options: dict[str, Any]) -> dict[str, Any]:
    """Translate a crawl options bag into keyword arguments for ``start_crawl``.

    The nested ``scrapeOptions`` dict becomes the SDK's ``ScrapeOptions`` model.
    """
    kwargs: dict[str, Any] = {}
    for key, value in options.items():
        name = to_snake(key)
        if name == "scrape_options" and isinstance(value, dict):
            value = ScrapeOptions(**scrape_kwargs(value))
        kwargs[name] = value
    return kwargs
