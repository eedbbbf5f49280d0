"""Pick a recipe title out of a noisy caption."""

import logging
import re
from collections.abc import Callable, Iterable

from recipe_text.parser.social import clean_social_boilerplate

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "Recipe"
TITLE_MIN_CHARS = 3
TITLE_MAX_CHARS = 72

_TITLE_SPAN = r"[^.,!?\n@#]"

_INGREDIENTS_HEADER_RE = re.compile(r"^[ \t]*ingredients?\b", re.IGNORECASE | re.MULTILINE)
_RECIPE_PATTERNS = (
    # "Garlic Butter Pasta Ingredients: ..."
    re.compile(rf"({_TITLE_SPAN}{{5,60}}?)\s*(?:ingredients|what\s+you\s+need)\b", re.IGNORECASE),
    re.compile(rf"\brecipe\s+for\s+({_TITLE_SPAN}{{5,60}})", re.IGNORECASE),
    re.compile(rf"({_TITLE_SPAN}{{5,60}}?)\s+recipe\b", re.IGNORECASE),
    # first line, when an ingredients list follows somewhere below it
    re.compile(
        rf"^({_TITLE_SPAN}{{5,60}}?)(?=[ \t]*\n.*?\b(?:ingredients|what\s+you\s+need)\b)",
        re.IGNORECASE | re.DOTALL,
    ),
    re.compile(rf"how\s+to\s+make\s+({_TITLE_SPAN}{{5,60}})", re.IGNORECASE),
    re.compile(
        rf"\b(?:this|delicious|homemade|easy)\s+({_TITLE_SPAN}{{2,50}}?\s(?:bread|cake|sauce))\b",
        re.IGNORECASE,
    ),
)
_QUOTED_RES = (
    re.compile(r"[“\"]([^“”\"\n]{3,80})[”\"]"),
    re.compile(r"(?<!\w)['‘]([^'‘’\n]{3,80})['’](?!\w)"),
)
_LINE_SPLIT_RE = re.compile(r"\s*[~|\n•]\s*")
_RECIPE_WORD_RE = re.compile(
    r"\b(?:recipe|pasta|bread|sauce|chicken|beef|pork|fish|soup|salad|sandwich|cake|cookies)\b",
    re.IGNORECASE,
)
_CAPITALIZED_RE = re.compile(r"\b([A-Z][a-z]+(?:\s+[A-Za-z][a-z]+){1,4})\b(?=\s|$)")

_HANDLES_TAGS_RE = re.compile(r"^(?:[#@][\w.-]+\b[\s,:-]*){1,4}")
_INTRO_VERBS_RE = re.compile(
    r"^(?:made|making|try|trying|cook|cooking|baking|how\s+to\s+make)\s+", re.IGNORECASE
)
_TRAILING_PUNCT_RE = re.compile(r"\s*[.,!?:;]+\s*$")
_QUOTES_RE = re.compile(r"[“”\"<>]")
_EMOJI_RE = re.compile("[\U0001F300-\U0001FAFF\u2600-\u27BF\uFE0F\u200D]")

_WEAK_TITLE_RE = re.compile(
    r"(?:recipe|food|yummy|delicious|tasty|homemade|amazing|good|tiktok|instagram"
    r"|youtube|facebook|pinterest|food\s*network|allrecipes)",
    re.IGNORECASE,
)
_HANDLE_ONLY_RE = re.compile(r"[@#][\w.-]+")
_DIGITS_ONLY_RE = re.compile(r"\d{6,}")
_INSTRUCTION_ONLY_RE = re.compile(r"(?:prepare|mix|add|combine|ingredients?)(?:\s+\w+)?", re.IGNORECASE)
_SECTION_HEADER_RE = re.compile(
    r"^\s*(?:ingredients?|steps?|directions?|instructions?|method)\s*:", re.IGNORECASE
)
_MEASUREMENT_RE = re.compile(
    r"^[\d.,/¼½¾⅓⅔⅛]+\s*(?:cup|tsp|tbsp|oz|g|ml|kg)s?\b", re.IGNORECASE
)


def clean_title(text: str) -> str:
    """Strip handles, intro verbs, quotes, emoji and trailing punctuation."""
    s = _EMOJI_RE.sub("", text or "").strip()
    s = _HANDLES_TAGS_RE.sub("", s)
    s = _INTRO_VERBS_RE.sub("", s)
    s = _QUOTES_RE.sub("", s)
    s = s.strip().strip("'‘’").strip()
    s = _TRAILING_PUNCT_RE.sub("", s)
    return re.sub(r"\s+", " ", s).strip()


def is_valid_title(text: str) -> bool:
    clean = (text or "").strip()
    if not TITLE_MIN_CHARS <= len(clean) <= TITLE_MAX_CHARS:
        return False
    if _WEAK_TITLE_RE.fullmatch(clean):
        return False
    if _HANDLE_ONLY_RE.fullmatch(clean) or _DIGITS_ONLY_RE.fullmatch(clean):
        return False
    if _INSTRUCTION_ONLY_RE.fullmatch(clean):
        return False
    if _SECTION_HEADER_RE.search(clean) or _MEASUREMENT_RE.search(clean):
        return False
    return True


# -- candidate producers, one per strategy --


def _before_ingredients_header(text: str) -> Iterable[str]:
    m = _INGREDIENTS_HEADER_RE.search(text)
    if not m:
        return []
    preceding = [line for line in text[: m.start()].splitlines() if line.strip()]
    return preceding[-1:]


def _recipe_patterns(text: str) -> Iterable[str]:
    for pattern in _RECIPE_PATTERNS:
        m = pattern.search(text)
        if m:
            yield m.group(1)


def _quoted(text: str) -> Iterable[str]:
    for pattern in _QUOTED_RES:
        m = pattern.search(text)
        if m:
            yield m.group(1)


def _recipe_word_lines(text: str) -> Iterable[str]:
    return (line for line in _LINE_SPLIT_RE.split(text) if _RECIPE_WORD_RE.search(line))


def _capitalized_phrase(text: str) -> Iterable[str]:
    m = _CAPITALIZED_RE.search(text)
    return [m.group(1)] if m else []


def _any_line(text: str) -> Iterable[str]:
    return _LINE_SPLIT_RE.split(text)


_STRATEGIES: list[tuple[str, Callable[[str], Iterable[str]]]] = [
    ("ingredients header", _before_ingredients_header),
    ("recipe pattern", _recipe_patterns),
    ("quoted text", _quoted),
    ("recipe-word line", _recipe_word_lines),
    ("capitalized phrase", _capitalized_phrase),
    ("first line", _any_line),
]


def extract_recipe_title(text: str | None) -> str:
    """Return the best title candidate, or "Recipe" when nothing qualifies."""
    try:
        clean_text = clean_social_boilerplate(text)
        if not clean_text:
            return FALLBACK_TITLE

        for name, produce in _STRATEGIES:
            for raw in produce(clean_text):
                candidate = clean_title(raw)
                if is_valid_title(candidate):
                    logger.debug("Title from %s: %r", name, candidate)
                    return candidate
            logger.debug("No title from %s", name)
    except Exception:
        logger.debug("Title extraction failed", exc_info=True)

    return FALLBACK_TITLE
