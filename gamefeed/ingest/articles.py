import re
from typing import List, Dict

# Any start or end tag: group 1 is "/" for end tags, group 2 the name, group 3 the raw attributes.
# A "<" inside the attribute text ends the candidate, so stray "<n" in prose never swallows the next tag.
TAG_RE = re.compile(r"<(/?)([A-Za-z][A-Za-z0-9:-]*)([^<>]*)>")

# Quoted attributes only; unquoted values are ignored like the rest of the markup we don't need.
ATTR_RE = re.compile(r"""([^\s=/"'<>]+)\s*=\s*(["'])(.*?)\2""", re.S)

TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.I)
NO_TITLE = "No title found"


def _attrs(raw: str) -> Dict[str, str]:
    """Attribute names are case-insensitive, values are kept verbatim. First one wins."""
    out: Dict[str, str] = {}
    for name, _quote, value in ATTR_RE.findall(raw):
        out.setdefault(name.lower(), value)
    return out


def _close_re(tag: str):
    return re.compile(r"</%s\s*>" % re.escape(tag), re.I)


def extract_page_title(document: str) -> str:
    m = TITLE_RE.search(document)
    return m.group(1) if m else NO_TITLE


class ArticleExtractor:
    """Single forward pass over a listing page that yields one record per article block.

    Each record needs a title (text of ``<h3 class="article-name">``) and an image
    (``data-original`` inside the block's ``<figure>``). The link is the href of the
    last anchor start tag seen before the block opened; anchors inside earlier
    blocks count too. Blocks never nest: the first close tag ends the block, and a
    block start tag found inside an open block is skipped.
    """

    def __init__(
        self,
        block_tag: str = "article",
        image_tag: str = "figure",
        image_attr: str = "data-original",
        title_tag: str = "h3",
        title_class: str = "article-name",
        require_link: bool = True,
    ):
        self.block_tag = block_tag.lower()
        self.image_tag = image_tag.lower()
        self.image_attr = image_attr.lower()
        self.title_tag = title_tag.lower()
        self.title_class = title_class
        self.require_link = require_link
        self._block_close = _close_re(self.block_tag)
        self._title_close = _close_re(self.title_tag)

    def extract(self, document: str) -> List[Dict]:
        out: List[Dict] = []
        last_href = ""
        block_end = 0
        pos = 0

        while True:
            m = TAG_RE.search(document, pos)
            if not m:
                break
            pos = m.end()
            if m.group(1):
                continue
            name = m.group(2).lower()

            if name == "a":
                href = _attrs(m.group(3)).get("href")
                if href is not None:
                    last_href = href
                continue

            if name != self.block_tag:
                continue
            if m.start() < block_end:
                # nested start tag, the enclosing block already owns this span
                continue

            close = self._block_close.search(document, m.end())
            if close is None:
                break
            block_end = close.end()

            record = self._record(document, m.end(), close.start(), last_href)
            if record is not None:
                out.append(record)

        return out

    def _record(self, document: str, start: int, end: int, link: str) -> Dict | None:
        title = self._find_title(document, start, end)
        image = self._find_image(document, start, end)
        if not title or not image:
            return None
        if self.require_link and not link:
            return None
        return {"title": title, "image_url": image, "link_url": link}

    def _find_image(self, document: str, start: int, end: int) -> str:
        pos = start
        depth = 0
        while True:
            m = TAG_RE.search(document, pos, end)
            if not m:
                return ""
            pos = m.end()
            name = m.group(2).lower()
            if m.group(1):
                if name == self.image_tag and depth:
                    depth -= 1
                continue
            if name == self.image_tag:
                depth += 1
            if depth:
                value = _attrs(m.group(3)).get(self.image_attr)
                if value is not None:
                    return value

    def _find_title(self, document: str, start: int, end: int) -> str:
        pos = start
        while True:
            m = TAG_RE.search(document, pos, end)
            if not m:
                return ""
            pos = m.end()
            if m.group(1) or m.group(2).lower() != self.title_tag:
                continue
            if _attrs(m.group(3)).get("class") != self.title_class:
                continue

            # text must run straight to the close tag, no child elements
            lt = document.find("<", pos, end)
            if lt <= pos:
                continue
            if self._title_close.match(document, lt, end):
                return document[pos:lt].strip()


_default = ArticleExtractor()


def extract_articles(document: str, require_link: bool = True) -> List[Dict]:
    if require_link:
        return _default.extract(document)
    return ArticleExtractor(require_link=False).extract(document)
