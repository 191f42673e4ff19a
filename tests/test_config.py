"""Tests for environment-driven settings."""

from __future__ import annotations

from firecrawl_demo.config import PLACEHOLDER_API_KEY, Settings


class TestSettings:
    def test_placeholder_when_key_unset(self, monkeypatch) -> None:
        monkeypatch.delenv("FIRECRAWL_API_KEY", raising=False)
        s = Settings()
        assert s.firecrawl_api_key == PLACEHOLDER_API_KEY
        assert s.api_key_configured is False

    def test_placeholder_when_key_empty(self, monkeypatch) -> None:
        monkeypatch.setenv("FIRECRAWL_API_KEY", "")
        assert Settings().firecrawl_api_key == PLACEHOLDER_API_KEY

    def test_key_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("FIRECRAWL_API_KEY", "fc-abc123")
        s = Settings()
        assert s.firecrawl_api_key == "fc-abc123"
        assert s.api_key_configured is True

    def test_crawl_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("CRAWL_DEFAULT_LIMIT", raising=False)
        monkeypatch.setenv("CRAWL_DEFAULT_DEPTH", "4")
        s = Settings()
        assert s.crawl_default_limit == 10
        assert s.crawl_default_depth == 4

    def test_server_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("DEMO_HOST", raising=False)
        monkeypatch.delenv("DEMO_PORT", raising=False)
        s = Settings()
        assert s.host == "127.0.0.1"
        assert s.port == 8000
