"""Pytest configuration and fixtures for gamefeed tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def listing_html() -> str:
    """A trimmed-down news listing page with three articles."""
    return """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <title>Latest gaming news | PC Gamer</title>
    </head>
    <body>
        <nav><a href="/home">Home</a></nav>
        <div class="listingResults">
            <a href="https://www.pcgamer.com/games/first-story/" class="article-link">
                <article class="search-result">
                    <figure class="search-result__image">
                        <img data-original="https://cdn.example.com/one.jpg" alt="">
                    </figure>
                    <h3 class="article-name">
                        First story headline
                    </h3>
                </article>
            </a>
            <a href="https://www.pcgamer.com/games/second-story/?a=1&b=2" class="article-link">
                <article class="search-result">
                    <figure data-original="https://cdn.example.com/two.jpg"></figure>
                    <h3 class="article-name">Second story headline</h3>
                </article>
            </a>
            <a href="https://www.pcgamer.com/games/third-story/" class="article-link">
                <article class="search-result">
                    <figure><div class="lazy" data-original="https://cdn.example.com/three.jpg"></div></figure>
                    <h3 class="article-name">Third &amp; final</h3>
                </article>
            </a>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def simple_article() -> str:
    """The smallest document that yields one article."""
    return (
        '<a href="/x"><article><figure data-original="img1.png"></figure>'
        '<h3 class="article-name">Hello</h3></article></a>'
    )


@pytest.fixture
def feed() -> dict:
    """A feed as built by build_feed."""
    return {
        "url": "https://pcgamer.com/news",
        "site": "pcgamer.com",
        "page_title": "Latest gaming news | PC Gamer",
        "content_length": 1234,
        "articles": [
            {"title": "First", "image_url": "https://cdn.example.com/1.jpg", "link_url": "https://pcgamer.com/1"},
            {"title": "Second", "image_url": "https://cdn.example.com/2.jpg", "link_url": "https://pcgamer.com/2"},
        ],
        "source": "direct",
        "is_sample": False,
        "error": None,
    }
