"""FastAPI app serving the rendered feed.

GET /api/scrape   direct fetch, error page with status 500 when the site is unreachable
GET /             proxied fetch, placeholder articles when every proxy fails
GET /api/articles proxied fetch as JSON
GET /health
"""

import logging
from functools import lru_cache
from typing import Dict

from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse

from gamefeed.feed import build_feed
from gamefeed.format.html import render_error, render_html
from gamefeed.ingest.fetch import FetchError
from gamefeed.util.config import load_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Dict:
    return load_settings()


def _proxied_feed(settings: Dict) -> Dict:
    return build_feed(
        settings["url"],
        proxies=settings["proxies"],
        sample_on_failure=True,
        require_link=settings["require_link"],
        limit=settings["max_articles"],
        timeout=settings["timeout"],
    )


app = FastAPI(title="Gaming News Feed")


@app.get("/api/scrape", response_class=HTMLResponse)
def scrape(settings: Dict = Depends(get_settings)):
    try:
        feed = build_feed(
            settings["url"],
            require_link=settings["require_link"],
            limit=settings["max_articles"],
            timeout=settings["timeout"],
        )
    except FetchError as e:
        logger.error("scraping error: %s", e)
        return HTMLResponse(render_error(str(e)), status_code=500)
    return HTMLResponse(render_html(feed))


@app.get("/", response_class=HTMLResponse)
def index(settings: Dict = Depends(get_settings)):
    return HTMLResponse(render_html(_proxied_feed(settings)))


@app.get("/api/articles")
def articles(settings: Dict = Depends(get_settings)):
    return _proxied_feed(settings)


@app.get("/health")
def health():
    return {"status": "ok"}
