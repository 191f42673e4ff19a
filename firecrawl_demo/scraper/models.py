"""Data models for the scraper layer.

These are transient shapes relayed between the provider and the HTTP / CLI
surfaces.  Nothing here is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Literal, Optional

JobKind = Literal["crawl", "batch"]


@dataclass
class ScrapedPage:
    """Normalised content of a single scraped page."""

    markdown: str = ""
    html: str = ""
    links: List[Any] = field(default_factory=list)


@dataclass
class JobHandle:
    """Opaque identifier of an asynchronous crawl or batch job.

    Only the provider understands ``job_id``; this codebase uses it as a
    lookup key for status polling.
    """

    kind: JobKind
    job_id: Optional[str] = None
    status: Optional[str] = None
