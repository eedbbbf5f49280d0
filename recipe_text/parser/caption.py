"""Turn a social caption (or a pasted block) into clean ingredient lines."""

import logging
import re

from recipe_text.models import ParsedIngredient
from recipe_text.parser.classifier import is_social_noise, looks_ingredienty
from recipe_text.parser.ingredients import normalize_ingredient_lines
from recipe_text.parser.segmenter import find_ingredient_block, segment_lines
from recipe_text.parser.social import clean_social_boilerplate
from recipe_text.parser.splitter import explode_on_new_amount, peel_salt_pepper_tail

logger = logging.getLogger(__name__)

_BLOCK_SPLIT_RE = re.compile(r"\n|;|\||[•·▪▫►▶]")
_BLOCK_LEAD_RE = re.compile(r"^[\s\-–—•*·]+")


def _from_block(block: list[str]) -> list[str]:
    """Explode lines from an explicit ingredients section.

    Lines there are trusted, so a line without any amount ("Salt") is kept whole.
    """
    pieces: list[str] = []
    for line in block:
        if not looks_ingredienty(line):
            continue
        exploded = explode_on_new_amount(line)
        pieces.extend(exploded or peel_salt_pepper_tail(line))
    return pieces


def _from_loose_lines(lines: list[str]) -> list[str]:
    pieces: list[str] = []
    for line in lines:
        if not looks_ingredienty(line) or is_social_noise(line):
            continue
        pieces.extend(explode_on_new_amount(line))
    return pieces


def caption_to_ingredients(caption: str) -> list[ParsedIngredient]:
    """Extract parsed ingredients from a raw caption."""
    lines = list(segment_lines(clean_social_boilerplate(caption)))
    block = find_ingredient_block(lines)

    if block is not None:
        logger.debug("Ingredients block found (%d lines)", len(block))
        pieces = _from_block(block)
    else:
        logger.debug("No ingredients block; scanning %d lines", len(lines))
        pieces = _from_loose_lines(lines)

    return normalize_ingredient_lines(pieces)


def caption_to_ingredient_lines(caption: str) -> list[str]:
    """Extract canonical ingredient strings from a raw caption."""
    return [p.canonical for p in caption_to_ingredients(caption)]


def normalize_ingredient_block(block: str) -> list[str]:
    """Normalize a pasted paragraph or a scraped ingredient list into canonical lines."""
    chunks = [
        _BLOCK_LEAD_RE.sub("", chunk).strip()
        for chunk in _BLOCK_SPLIT_RE.split((block or "").replace("\r", ""))
    ]
    return explode_and_normalize([c for c in chunks if c])


def explode_and_normalize(lines: list[str]) -> list[str]:
    """Split every line at new amounts (keeping amount-less lines) and normalize."""
    expanded: list[str] = []
    for raw in lines or []:
        line = str(raw)
        expanded.extend(explode_on_new_amount(line) or peel_salt_pepper_tail(line))
    return [p.canonical for p in normalize_ingredient_lines(expanded)]
