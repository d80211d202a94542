import logging
from typing import Dict, List
from urllib.parse import urlsplit

from gamefeed.ingest.articles import ArticleExtractor, extract_page_title
from gamefeed.ingest.fetch import FetchError, fetch_via_proxies

logger = logging.getLogger(__name__)

NO_PAGE_TITLE = "Sample data"

# Shown when every fetch path failed and the caller asked for placeholders. Each links to the feed URL.
SAMPLE_ARTICLES: List[Dict] = [
    {
        "title": "Sample article: the news source could not be reached",
        "image_url": "https://placehold.co/600x340?text=Gaming+News",
    },
    {
        "title": "Sample article: showing placeholder content instead",
        "image_url": "https://placehold.co/600x340?text=Placeholder",
    },
    {
        "title": "Sample article: try again in a few minutes",
        "image_url": "https://placehold.co/600x340?text=Try+Again",
    },
]


def site_name(url: str) -> str:
    host = urlsplit(url).netloc.lower()
    return host[4:] if host.startswith("www.") else host


def sample_feed(url: str, error: str) -> Dict:
    return {
        "url": url,
        "site": site_name(url),
        "page_title": NO_PAGE_TITLE,
        "content_length": 0,
        "articles": [{**a, "link_url": url} for a in SAMPLE_ARTICLES],
        "source": "sample",
        "is_sample": True,
        "error": error,
    }


def build_feed(
    url: str,
    proxies: List[str] | None = None,
    sample_on_failure: bool = False,
    require_link: bool = True,
    limit: int | None = None,
    timeout: float = 12,
) -> Dict:
    """Fetch the listing page (directly, or through proxies) and extract its articles.
       FetchError propagates unless sample_on_failure is set.
    """
    try:
        document, source = fetch_via_proxies(url, proxies, timeout=timeout)
    except FetchError as e:
        if not sample_on_failure:
            raise
        logger.warning("falling back to sample articles: %s", e)
        return sample_feed(url, str(e))

    articles = ArticleExtractor(require_link=require_link).extract(document)
    if limit and limit > 0:
        articles = articles[:limit]
    logger.info("extracted %d articles from %s (%d chars via %s)", len(articles), url, len(document), source)

    return {
        "url": url,
        "site": site_name(url),
        "page_title": extract_page_title(document),
        "content_length": len(document),
        "articles": articles,
        "source": source,
        "is_sample": False,
        "error": None,
    }
