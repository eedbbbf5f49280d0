"""Ingredient line parsing and list normalization."""

import logging
import re
import threading

from cachetools import LRUCache, cached

from recipe_text.models import ParsedIngredient
from recipe_text.parser.amounts import (
    AMOUNT_CORE,
    AMOUNT_RE,
    amount_to_number,
    pluralize_unit,
    unit_alias_to_canonical,
)
from recipe_text.parser.splitter import salvage_word

logger = logging.getLogger(__name__)

PARSE_CACHE_SIZE = 2048

_parse_cache: LRUCache[str, ParsedIngredient] = LRUCache(maxsize=PARSE_CACHE_SIZE)
_parse_lock = threading.RLock()

_LEADING_RE = re.compile(rf"^({AMOUNT_CORE})\s*([A-Za-zÀ-ÿ.]+)?\s*(.*)$", re.DOTALL)
_NEXT_WORD_RE = re.compile(r"^([A-Za-z.]+)\s*(.*)$", re.DOTALL)
_UNIT_OF_RE = re.compile(r"^(?:an?\s+)?([A-Za-z. ]+?)\s+of\s+(.*)$", re.IGNORECASE | re.DOTALL)
_LEADING_OF_RE = re.compile(r"^of\s+", re.IGNORECASE)
_PAREN_RE = re.compile(r"\(([^()]+)\)")
_STRAY_PAREN_RE = re.compile(r"[()]")
_NOTE_CLAUSE_RE = re.compile(
    r",\s*(diced|chopped|minced|shredded|grated|softened|melted"
    r"|room\s*temperature|to\s*taste)\b",
    re.IGNORECASE,
)
_SALT_RE = re.compile(r"salt", re.IGNORECASE)
_PEPPER_RE = re.compile(r"pepper(?:\s+to\s+taste)?", re.IGNORECASE)

SALT_AND_PEPPER = ParsedIngredient(
    original="Salt and pepper to taste",
    qty=None,
    unit=None,
    item="salt and pepper",
    note="to taste",
    canonical="Salt and pepper to taste",
)


def _collapse(s: str) -> str:
    return re.sub(r"\s+", " ", s).strip()


def _split_quantity(work: str) -> tuple[str, str | None, str]:
    """Split working text into (quantity text, canonical unit, rest).

    A token after the quantity that is not a known unit ("2 jalapenos") stays
    with the food text instead of being dropped.
    """
    m = _LEADING_RE.match(work)
    if m:
        qty_text = m.group(1)
        unit_raw = (m.group(2) or "").strip()
        after = (m.group(3) or "").strip()
        if not unit_raw:
            return qty_text, None, after

        pair = _NEXT_WORD_RE.match(after)
        if pair:
            unit = unit_alias_to_canonical(f"{unit_raw} {pair.group(1)}")
            if unit and " " in unit:
                return qty_text, unit, pair.group(2).strip()

        unit = unit_alias_to_canonical(unit_raw)
        if unit is None:
            return qty_text, None, f"{unit_raw} {after}".strip()
        return qty_text, unit, after

    # "pinch of salt", "a dash of hot sauce"
    lead = _UNIT_OF_RE.match(work)
    if lead:
        unit = unit_alias_to_canonical(lead.group(1))
        if unit:
            return "", unit, lead.group(2).strip()
    return "", None, work


def _split_notes(text: str) -> tuple[str, str | None]:
    """Pull parenthetical and trailing preparation notes out of the food text.

    Adjectives in front of the food ("boneless skinless chicken") are kept.
    """
    notes: list[str] = []

    def _paren(m: re.Match) -> str:
        txt = _collapse(m.group(1))
        if txt:
            notes.append(txt)
        return " "

    def _clause(m: re.Match) -> str:
        notes.append(_collapse(m.group(1)).lower())
        return ""

    core = _PAREN_RE.sub(_paren, text)
    # a cut at an amount inside "( ... )" leaves half a pair behind
    core = _STRAY_PAREN_RE.sub(" ", core)
    core = _NOTE_CLAUSE_RE.sub(_clause, core)
    core = _collapse(core).strip(" ,")
    unique = list(dict.fromkeys(notes))
    return core, ", ".join(unique) if unique else None


def _build_canonical(qty_text: str, unit: str | None, item: str, note: str | None) -> str:
    parts = []
    if qty_text:
        parts.append(qty_text)
    if unit:
        parts.append(pluralize_unit(unit, qty_text))
        if not qty_text and item:
            # "pinch of salt" keeps its "of" when there is no number in front
            parts.append("of")
    parts.append(item)
    canon = " ".join(parts)
    if note:
        if note.strip().lower() == "optional":
            canon += " (optional)"
        else:
            canon += f", {note}"
    canon = re.sub(r"\s+,", ",", canon)
    return re.sub(r"\s{2,}", " ", canon).strip()


@cached(_parse_cache, lock=_parse_lock)
def parse_ingredient_line(line: str) -> ParsedIngredient:
    """Parse one ingredient line into quantity, unit, item and note.

    Never raises for odd input: an unreadable quantity gives ``qty=None`` and a
    line with no amount or unit keeps its text as the item.
    """
    original = (line or "").strip()
    if not original:
        return ParsedIngredient(original=original)

    # Words before the first amount are usually debris from splitting; keep
    # the last useful one ("e flour 3 cups milk" -> "flour").
    work = original
    salvage = ""
    first = AMOUNT_RE.search(work)
    if first and first.start() > 0:
        salvage = salvage_word(work[: first.start()])
        work = work[first.start() :].strip()

    qty_text, unit, rest = _split_quantity(work)
    qty = amount_to_number(qty_text)

    if salvage and not re.search(rf"\b{re.escape(salvage)}\b", rest, re.IGNORECASE):
        rest = _collapse(f"{salvage} {rest}")

    rest = _LEADING_OF_RE.sub("", rest).strip()
    item, note = _split_notes(rest)

    canonical = _build_canonical(qty_text, unit, item, note)
    if not canonical:
        item = _collapse(original)
        canonical = item

    return ParsedIngredient(
        original=original,
        qty=qty,
        unit=unit,
        item=item,
        note=note,
        canonical=canonical,
    )


def _parse_single(raw) -> ParsedIngredient:
    """Parse a single line, falling back to the cleaned raw text on failure."""
    line = "" if raw is None else str(raw)
    try:
        return parse_ingredient_line(line)
    except Exception:
        logger.debug("Failed to parse ingredient: %s", line, exc_info=True)
        text = _collapse(line)
        return ParsedIngredient(original=line.strip(), item=text, canonical=text)


def _merge_salt_and_pepper(items: list[ParsedIngredient]) -> list[ParsedIngredient]:
    """Collapse a bare "Salt" and bare "Pepper" entry into one line."""
    i_salt = next((i for i, p in enumerate(items) if _SALT_RE.fullmatch(p.canonical)), -1)
    i_pep = next((i for i, p in enumerate(items) if _PEPPER_RE.fullmatch(p.canonical)), -1)
    if i_salt == -1 or i_pep == -1:
        return items

    keep = [p for i, p in enumerate(items) if i not in (i_salt, i_pep)]
    merged_key = SALT_AND_PEPPER.canonical.lower()
    if any(p.canonical.lower() == merged_key for p in keep):
        logger.debug("Dropped bare salt and pepper entries already covered")
        return keep

    first = min(i_salt, i_pep)
    keep.insert(first, SALT_AND_PEPPER)
    logger.debug("Merged salt and pepper entries at position %d", first)
    return keep


def normalize_ingredient_lines(lines) -> list[ParsedIngredient]:
    """Parse, de-duplicate (case-insensitive) and tidy a list of ingredient lines."""
    seen: set[str] = set()
    out: list[ParsedIngredient] = []

    for raw in lines or []:
        parsed = _parse_single(raw)
        key = parsed.canonical.lower()
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(parsed)

    return _merge_salt_and_pepper(out)
