import os, yaml
from typing import Dict, List
from dotenv import load_dotenv

from gamefeed.ingest.fetch import DEFAULT_PROXIES

DEFAULT_URL = "https://pcgamer.com/news"

# Keys accepted from feed.yml; anything else is ignored.
KNOWN_KEYS = ("url", "proxies", "timeout", "max_articles", "require_link", "out_dir")


def _parse_list(s: str | None) -> List[str]:
    if not s:
        return []
    raw = [x.strip() for x in s.replace(";", ",").split(",")]
    return [x for x in raw if x]

def _parse_bool(s: str | None, default: bool) -> bool:
    if s is None or not s.strip():
        return default
    return s.strip().lower() in ("1", "true", "yes", "on")


def _from_env() -> Dict:
    proxies_env = os.getenv("FEED_PROXIES")
    return {
        "url": os.getenv("FEED_URL", DEFAULT_URL),
        "proxies": _parse_list(proxies_env) if proxies_env is not None else list(DEFAULT_PROXIES),
        "timeout": float(os.getenv("FEED_TIMEOUT", "12")),
        "max_articles": int(os.getenv("FEED_MAX_ARTICLES", "0")),
        "require_link": _parse_bool(os.getenv("FEED_REQUIRE_LINK"), True),
        "out_dir": os.getenv("FEED_OUT_DIR", "data"),
    }


def load_yaml(path: str) -> Dict:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return {k: v for k, v in data.items() if k in KNOWN_KEYS}


def load_settings(path: str | None = None) -> Dict:
    """Environment (and .env) first, then feed.yml on top. CLI flags are applied by the caller."""
    load_dotenv()
    settings = _from_env()
    settings.update(load_yaml(path or os.getenv("FEED_CONFIG", "feed.yml")))
    if isinstance(settings["proxies"], str):
        settings["proxies"] = _parse_list(settings["proxies"])
    return settings
