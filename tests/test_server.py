"""Tests for the FastAPI app."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from gamefeed.ingest.fetch import FetchError
from gamefeed.server import app, get_settings

SETTINGS = {
    "url": "https://pcgamer.com/news",
    "proxies": ["https://p1/?u=", "https://p2/?u="],
    "timeout": 5,
    "max_articles": 0,
    "require_link": True,
    "out_dir": "data",
}


@pytest.fixture
def client():
    app.dependency_overrides[get_settings] = lambda: dict(SETTINGS)
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestScrapeRoute:
    """Tests for GET /api/scrape."""

    def test_success(self, client: TestClient, listing_html: str) -> None:
        with patch("gamefeed.feed.fetch_via_proxies", return_value=(listing_html, "direct")) as mock_fetch:
            response = client.get("/api/scrape")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "First story headline" in response.text
        # the route never goes through the proxies
        assert mock_fetch.call_args[0][1] is None

    def test_failure_renders_error_page(self, client: TestClient) -> None:
        with patch("gamefeed.feed.fetch_via_proxies", side_effect=FetchError("HTTP error! status: 403")):
            response = client.get("/api/scrape")

        assert response.status_code == 500
        assert "Failed to scrape data: HTTP error! status: 403" in response.text


class TestIndexRoute:
    """Tests for GET / and GET /api/articles."""

    def test_uses_proxies(self, client: TestClient, listing_html: str) -> None:
        with patch("gamefeed.feed.fetch_via_proxies", return_value=(listing_html, "https://p1/?u=")) as mock_fetch:
            response = client.get("/")

        assert response.status_code == 200
        assert mock_fetch.call_args[0][1] == SETTINGS["proxies"]
        assert "Third &amp; final" in response.text
        assert "&amp;amp;" not in response.text

    def test_sample_fallback(self, client: TestClient) -> None:
        with patch("gamefeed.feed.fetch_via_proxies", side_effect=FetchError("all proxies failed")):
            response = client.get("/")

        assert response.status_code == 200
        assert "showing sample data" in response.text

    def test_articles_json(self, client: TestClient, listing_html: str) -> None:
        with patch("gamefeed.feed.fetch_via_proxies", return_value=(listing_html, "https://p1/?u=")):
            data = client.get("/api/articles").json()

        assert data["source"] == "https://p1/?u="
        assert [a["title"] for a in data["articles"]][:2] == ["First story headline", "Second story headline"]


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}
