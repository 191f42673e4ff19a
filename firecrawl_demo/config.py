"""Centralised settings for the Firecrawl demo.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

For local development create ``.env`` next to ``pyproject.toml`` with::

    FIRECRAWL_API_KEY=fc-your-api-key
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

PLACEHOLDER_API_KEY = "YOUR_FIRECRAWL_API_KEY"

SETUP_INSTRUCTIONS = """\
To use the Firecrawl functionality:
1. Sign up at https://firecrawl.dev/
2. Get your API key from the dashboard
3. Create a .env file in the project root with:
   FIRECRAWL_API_KEY=fc-your-api-key-here
"""


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Provider credentials
    # ------------------------------------------------------------------
    firecrawl_api_key: str = field(
        default_factory=lambda: os.environ.get("FIRECRAWL_API_KEY") or PLACEHOLDER_API_KEY
    )
    # Empty string means "use the SDK's default endpoint".
    firecrawl_api_url: str = field(
        default_factory=lambda: os.environ.get("FIRECRAWL_API_URL", "")
    )

    # ------------------------------------------------------------------
    # Crawl defaults (applied when a request carries no options)
    # ------------------------------------------------------------------
    crawl_default_limit: int = field(
        default_factory=lambda: int(os.environ.get("CRAWL_DEFAULT_LIMIT", "10"))
    )
    crawl_default_depth: int = field(
        default_factory=lambda: int(os.environ.get("CRAWL_DEFAULT_DEPTH", "2"))
    )

    # ------------------------------------------------------------------
    # HTTP server (used by ``firecrawl-demo serve``)
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("DEMO_HOST", "127.0.0.1")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("DEMO_PORT", "8000"))
    )

    @property
    def api_key_configured(self) -> bool:
        """``False`` while the placeholder (or an empty) key is in effect."""
        key = self.firecrawl_api_key.strip()
        return bool(key) and key != PLACEHOLDER_API_KEY


# Module-level singleton — import this everywhere:
#   from firecrawl_demo.config import settings
settings = Settings()
