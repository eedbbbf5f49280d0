"""HTML descriptions to plain, line-separated text."""

import logging
import re

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_MARKUP_RE = re.compile(r"<[A-Za-z/][^>]*>|&(?:[A-Za-z]+|#\d+|#x[0-9A-Fa-f]+);")
_BLOCK_TAGS = ["p", "div", "li", "tr", "h1", "h2", "h3", "h4", "h5", "h6", "section", "article"]
_LINE_JUNK_RE = re.compile(r"[ \t]+")
_BLANKS_RE = re.compile(r"\n{3,}")


def looks_like_markup(text: str | None) -> bool:
    return bool(text and _MARKUP_RE.search(text))


def html_to_text(text: str | None) -> str:
    """Flatten HTML to text with one line per block element or <br>.

    Text without tags or entities is returned as is.
    """
    if not text:
        return ""
    if not looks_like_markup(text):
        return text

    soup = BeautifulSoup(text, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(_BLOCK_TAGS):
        block.insert_before("\n")
        block.insert_after("\n")

    lines = [_LINE_JUNK_RE.sub(" ", line).strip() for line in soup.get_text().split("\n")]
    flat = _BLANKS_RE.sub("\n\n", "\n".join(lines)).strip()
    logger.debug("Stripped markup: %d -> %d chars", len(text), len(flat))
    return flat
