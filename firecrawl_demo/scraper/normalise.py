"""Turn provider responses into plain dicts and stable envelopes."""

from __future__ import annotations

from typing import Any

from firecrawl_demo.scraper.client import ProviderError
from firecrawl_demo.scraper.models import JobHandle, JobKind, ScrapedPage


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _content_source(payload: dict[str, Any]) -> dict[str, Any]:
    """Return the dict holding the page content.

    Current SDKs return the document fields at the top level; older REST
    envelopes nest them under ``data``.
    """
    if any(payload.get(key) for key in ("markdown", "content", "html")):
        return payload
    nested = payload.get("data")
    if isinstance(nested, dict):
        return nested
    return payload


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def to_payload(response: Any) -> dict[str, Any]:
    """Convert an SDK response (pydantic model, dict or plain object) to a dict."""
    if response is None:
        return {}
    if isinstance(response, dict):
        return dict(response)
    model_dump = getattr(response, "model_dump", None)
    if callable(model_dump):
        return model_dump(mode="json")
    if hasattr(response, "__dict__"):
        return {k: v for k, v in vars(response).items() if not k.startswith("_")}
    return {"data": response}


def ensure_success(payload: dict[str, Any], default_message: str) -> dict[str, Any]:
    """Raise :class:`ProviderError` when *payload* reports ``success: false``.

    A missing ``success`` key counts as success: the v2 SDK raises on
    failure instead of returning a flag.
    """
    if payload.get("success") is False:
        raise ProviderError(payload.get("error") or default_message)
    return payload


def format_page(payload: dict[str, Any]) -> ScrapedPage:
    source = _content_source(payload)
    return ScrapedPage(
        markdown=source.get("markdown") or source.get("content") or "",
        html=source.get("html") or "",
        links=source.get("links") or [],
    )


def job_handle(payload: dict[str, Any], kind: JobKind) -> JobHandle:
    job_id = payload.get("id") or payload.get("job_id") or payload.get("jobId")
    return JobHandle(kind=kind, job_id=job_id, status=payload.get("status"))
