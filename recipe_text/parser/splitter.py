"""Split run-on ingredient chunks at every new amount token."""

import logging
import re

from recipe_text.parser.amounts import AMOUNT_RE, unit_alias_to_canonical

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"^[A-Za-z][A-Za-z-]*$")
_STOPWORDS = frozenset({"a", "an", "the", "of", "and", "or"})
_UNIT_TOKEN_RE = re.compile(r"\s*([A-Za-z.]+)")

_IDIOM_TAILS = (
    (
        re.compile(r"(?:,?\s*and\s*)?\bsalt\s+and\s+pepper\s+to\s+taste\.?$", re.IGNORECASE),
        "Salt and pepper to taste",
    ),
    (
        re.compile(r"(?:,?\s*and\s*)?\bsalt\s+to\s+taste\.?$", re.IGNORECASE),
        "Salt to taste",
    ),
    (
        re.compile(r"(?:,?\s*and\s*)?\bpepper\s+to\s+taste\.?$", re.IGNORECASE),
        "Pepper to taste",
    ),
)


def salvage_word(prefix: str) -> str:
    """Pick the last meaningful word from text that precedes the first amount.

    Scraped or comma-split text often leaves an ingredient name stranded in
    front of its quantity ("e flour 3 cups milk"). Only the last qualifying
    word is kept: alphabetic, not a stopword, longer than two characters.
    """
    words = [w for w in prefix.split() if _WORD_RE.match(w)]
    for word in reversed(words):
        if word.lower() not in _STOPWORDS and len(word) > 2:
            return word
    return ""


def peel_salt_pepper_tail(line: str) -> list[str]:
    """Split a trailing "salt and pepper to taste" idiom into its own line."""
    s = (line or "").strip()
    if not s:
        return []
    for pattern, phrase in _IDIOM_TAILS:
        if pattern.search(s):
            host = pattern.sub("", s).strip().rstrip(",;").strip()
            return [host, phrase] if host else [phrase]
    return [s]


def _insert_after_quantity(piece: str, word: str) -> str:
    """Place ``word`` after the leading quantity (and unit, when there is one)."""
    m = AMOUNT_RE.match(piece)
    if not m:
        return f"{word} {piece}"
    head_end = m.end()
    unit = _UNIT_TOKEN_RE.match(piece, head_end)
    if unit and unit_alias_to_canonical(unit.group(1)):
        head_end = unit.end()
    spliced = f"{piece[:head_end]} {word} {piece[head_end:]}"
    return re.sub(r"\s{2,}", " ", spliced).strip()


def explode_on_new_amount(chunk: str) -> list[str]:
    """Slice a chunk into one piece per amount token.

    "3 cups flour 2 eggs" becomes ["3 cups flour", "2 eggs"]. Returns an empty
    list when the chunk holds no amount at all.
    """
    text = (chunk or "").replace("\u00a0", " ").strip()
    if not text:
        return []

    starts = [m.start() for m in AMOUNT_RE.finditer(text)]
    if not starts:
        return []

    salvage = salvage_word(text[: starts[0]])

    raw_pieces = []
    for i, start in enumerate(starts):
        end = starts[i + 1] if i + 1 < len(starts) else len(text)
        raw_pieces.append(text[start:end].strip())

    if salvage:
        logger.debug("Salvaged %r from prefix of %r", salvage, text)
        raw_pieces[0] = _insert_after_quantity(raw_pieces[0], salvage)

    pieces = []
    for piece in raw_pieces:
        pieces.extend(peel_salt_pepper_tail(piece))
    return [p for p in pieces if p]
