"""Provider client construction and SDK method probing.

The Firecrawl SDK has renamed its methods between releases (``scrape_url`` →
``scrape``, ``async_crawl_url`` → ``start_crawl`` and so on).  Callers name
the candidates they accept, most recent first, and the first callable
attribute found on the client is used.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from firecrawl import Firecrawl

from firecrawl_demo.config import settings


class ProviderError(RuntimeError):
    """The provider reported a failed request (``success: false``)."""


def make_client(api_key: Optional[str] = None, api_url: Optional[str] = None) -> Firecrawl:
    """Return a Firecrawl client configured from *settings* unless overridden.

    No request is made here; a placeholder key only fails once the provider
    is actually called.
    """
    kwargs: dict[str, Any] = {"api_key": api_key or settings.firecrawl_api_key}
    url = api_url or settings.firecrawl_api_url
    if url:
        kwargs["api_url"] = url
    return Firecrawl(**kwargs)


def resolve_method(
    client: Any, names: Sequence[str]
) -> Optional[tuple[str, Callable[..., Any]]]:
    """Return ``(name, bound_method)`` for the first callable in *names*, or ``None``."""
    for name in names:
        method = getattr(client, name, None)
        if callable(method):
            return name, method
    return None


def require_method(client: Any, names: Sequence[str]) -> tuple[str, Callable[..., Any]]:
    """Like :func:`resolve_method` but raise :class:`ProviderError` when nothing matches."""
    found = resolve_method(client, names)
    if found is None:
        raise ProviderError(
            f"{type(client).__name__} exposes none of: {', '.join(names)}"
        )
    return found
