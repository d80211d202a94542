import logging
import requests
from typing import Dict, List, Tuple
from urllib.parse import quote
from requests.exceptions import RequestException

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    # A normal desktop browser UA helps with basic bot filters
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/124.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Connection": "close",
}

# Raw pass-through proxies, tried in order. The target URL is appended url-encoded.
DEFAULT_PROXIES = [
    "https://api.allorigins.win/raw?url=",
    "https://corsproxy.io/?url=",
    "https://api.codetabs.com/v1/proxy?quest=",
]


class FetchError(RuntimeError):
    """The page could not be fetched (network error, timeout or non-2xx status)."""


def fetch_text(url: str, timeout: float = 12, headers: Dict[str, str] | None = None) -> str:
    try:
        r = requests.get(
            url, timeout=timeout,
            headers={**DEFAULT_HEADERS, **(headers or {})},
            allow_redirects=True,
        )
        r.raise_for_status()
    except RequestException as e:
        raise FetchError(f"{url}: {e}") from e
    return r.text


def proxy_url(endpoint: str, target: str) -> str:
    return endpoint + quote(target, safe="")


def fetch_via_proxies(url: str, proxies: List[str] | None, timeout: float = 12) -> Tuple[str, str]:
    """Try each proxy endpoint in order and return (body, endpoint) for the first that answers.
       No proxies means a plain direct fetch, reported as endpoint "direct".
    """
    if not proxies:
        return fetch_text(url, timeout=timeout), "direct"

    failures = []
    for endpoint in proxies:
        try:
            body = fetch_text(proxy_url(endpoint, url), timeout=timeout)
        except FetchError as e:
            logger.warning("proxy %s failed for %s: %s", endpoint, url, e)
            failures.append(endpoint)
            continue
        logger.debug("fetched %s via %s (%d chars)", url, endpoint, len(body))
        return body, endpoint

    raise FetchError(f"all {len(failures)} proxies failed for {url}: {', '.join(failures)}")
