"""HTML page routes rendered with Jinja2 templates.

Routes
------
GET /                 → demo.html
GET /firecrawl-demo   → demo.html

The page talks to the JSON routes under ``/api`` with ``fetch``; nothing is
rendered server-side beyond the initial form and the setup hints.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from firecrawl_demo.config import SETUP_INSTRUCTIONS, settings

_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=_TEMPLATES_DIR)

router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
@router.get("/firecrawl-demo", response_class=HTMLResponse)
def demo_page(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "demo.html",
        {
            "api_key_configured": settings.api_key_configured,
            "setup_instructions": SETUP_INSTRUCTIONS,
            "crawl_limit": settings.crawl_default_limit,
            "crawl_depth": settings.crawl_default_depth,
        },
    )
