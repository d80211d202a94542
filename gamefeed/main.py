import os, sys, argparse, logging
from typing import Dict, List
from datetime import datetime

from gamefeed.feed import build_feed
from gamefeed.format.html import render_html, render_error, render_text
from gamefeed.ingest.fetch import FetchError
from gamefeed.util.config import load_settings


# --------------------------------- output -------------------------------------

def _write_page(html: str, out: str | None, outdir: str = "data") -> str:
    if out:
        path = out
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
    else:
        os.makedirs(outdir, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(outdir, f"feed-{stamp}.html")
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    return path


# --------------------------------- CLI args -----------------------------------

def _parse_args(argv: List[str] | None = None):
    p = argparse.ArgumentParser(description="Gaming news feed scraper")
    p.add_argument("--url", type=str, default=None, help="Override FEED_URL")
    p.add_argument("--config", type=str, default=None, help="YAML settings file (default: feed.yml)")
    p.add_argument("--via-proxy", action="store_true", help="Fetch through the configured proxy list")
    p.add_argument("--sample-on-failure", action="store_true", help="Render placeholder articles if every fetch fails")
    p.add_argument("--max-articles", type=int, default=None, help="Override FEED_MAX_ARTICLES (0 = no cap)")
    p.add_argument("--allow-missing-link", action="store_true", help="Keep articles with no preceding link")
    p.add_argument("--out", type=str, default=None, help="Write the page here instead of <out_dir>/feed-<stamp>.html")
    p.add_argument("--text", action="store_true", help="Also print a plaintext listing")
    p.add_argument("--serve", action="store_true", help="Run the web app instead of a one-shot render")
    p.add_argument("--host", type=str, default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--debug", action="store_true", help="Verbose debug logging to stdout")
    return p.parse_args(argv)


def _merge(settings: Dict, args) -> Dict:
    merged = dict(settings)
    if args.url:
        merged["url"] = args.url
    if args.max_articles is not None:
        merged["max_articles"] = args.max_articles
    if args.allow_missing_link:
        merged["require_link"] = False
    return merged


# ----------------------------------- main -------------------------------------

def main(argv: List[str] | None = None) -> int:
    args = _parse_args(argv)
    debug = args.debug or bool(os.getenv("DEBUG"))
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)

    settings = _merge(load_settings(args.config), args)
    if debug:
        print(f"[config] url={settings['url']} via_proxy={args.via_proxy} require_link={settings['require_link']}")
        if args.via_proxy:
            print(f"[config] proxies= {settings['proxies']}")

    if args.serve:
        import uvicorn
        uvicorn.run("gamefeed.server:app", host=args.host, port=args.port, log_level="debug" if debug else "info")
        return 0

    try:
        feed = build_feed(
            settings["url"],
            proxies=settings["proxies"] if args.via_proxy else None,
            sample_on_failure=args.sample_on_failure,
            require_link=settings["require_link"],
            limit=settings["max_articles"],
            timeout=settings["timeout"],
        )
    except FetchError as e:
        path = _write_page(render_error(str(e)), args.out, settings["out_dir"])
        print(f"[fetch] failed: {e}", file=sys.stderr)
        print(f"Wrote error page to: {path}")
        return 1

    if debug:
        print(f"[counts] chars={feed['content_length']} articles={len(feed['articles'])} source={feed['source']}")
        for it in feed["articles"][:5]:
            print(f"  • {it['title'][:90]}  [{it['link_url']}]")

    if args.text:
        print(render_text(feed))

    path = _write_page(render_html(feed), args.out, settings["out_dir"])
    print(f"Wrote feed to: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())


# Local examples:
# uv run python -m gamefeed.main --debug --text
# uv run python -m gamefeed.main --via-proxy --sample-on-failure --out data/feed.html
# uv run python -m gamefeed.main --serve --port 8000
