"""Split a raw caption or description into candidate lines."""

import re
from collections.abc import Iterable, Iterator

# Segments longer than this that contain commas are treated as run-on lists.
LONG_SEGMENT_CHARS = 40

_LINE_BREAK_RE = re.compile(r"\r\n?|[\u2028\u2029]")
_STUCK_UNIT_RE = re.compile(
    r"\b(\d+(?:\s+\d+/\d+)?)(?=(?:lbs?|pounds?|oz|g|kg|ml|l)\b)", re.IGNORECASE
)
_INGREDIENTS_MARK_RE = re.compile(r"ingredients?\s*:", re.IGNORECASE)
_STEPS_MARK_RE = re.compile(
    r"(?:instructions?|steps?|directions?|method)\s*:", re.IGNORECASE
)
_SPLIT_RE = re.compile(r"\n|[•·▪▫►▶]")
_COMMA_RE = re.compile(r"\s*,\s*")
_LEAD_DASH_RE = re.compile(r"^-+\s*")

_BLOCK_START = ("ingredients",)
_BLOCK_END = ("steps", "instructions", "directions", "method")


def normalize_text(raw: str | None) -> str:
    """Unify line endings and spaces, and separate quantities glued to units."""
    s = _LINE_BREAK_RE.sub("\n", raw or "").replace("\u00a0", " ")
    return _STUCK_UNIT_RE.sub(r"\1 ", s)


def segment_lines(raw: str | None) -> Iterator[str]:
    """Yield trimmed, non-empty candidate lines from raw text."""
    s = normalize_text(raw)
    s = _INGREDIENTS_MARK_RE.sub("\nIngredients:\n", s)
    s = _STEPS_MARK_RE.sub("\nSteps:\n", s)

    for part in _SPLIT_RE.split(s):
        part = part.strip()
        if not part:
            continue
        if "," in part and len(part) > LONG_SEGMENT_CHARS:
            pieces = _COMMA_RE.split(part)
        else:
            pieces = [part]
        for piece in pieces:
            piece = _LEAD_DASH_RE.sub("", piece).strip()
            if piece:
                yield piece


def find_ingredient_block(lines: Iterable[str]) -> list[str] | None:
    """Return the lines between an "ingredients" anchor and the next steps anchor.

    Returns None when there is no anchor at all, so callers can tell an empty
    block apart from a caption without one.
    """
    block: list[str] | None = None
    for line in lines:
        lower = line.lower()
        if block is None:
            if lower.startswith(_BLOCK_START):
                block = []
            continue
        if lower.startswith(_BLOCK_END):
            break
        block.append(line)
    return block
