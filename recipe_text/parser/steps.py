"""Step extraction scoped to the instructions section of a caption."""

import logging
import re

from recipe_text.parser.segmenter import normalize_text

logger = logging.getLogger(__name__)

MAX_STEPS = 40

_STEP_HEADER_RE = re.compile(
    r"^[ \t]*(?:\U0001F525\s*)?(?:instructions?|directions?|steps?|method)\b[ \t]*[:\-–—]?"
    r"|\b(?:instructions?|directions?|steps?|method)[ \t]*:",
    re.IGNORECASE | re.MULTILINE,
)
_TAIL_CUT_RE = re.compile(r"\n\s*#|\n\s*less\b", re.IGNORECASE)
_INLINE_NUMBER_RE = re.compile(r"(\s)(\d{1,2}[.)]\s+)")
_INLINE_BULLET_RE = re.compile(r"(\s)([-*•])\s+")
_NUMBERING_RE = re.compile(r"^\s*\d{1,2}[.)]\s+")
_BULLET_RE = re.compile(r"^\s*[-*•]\s+")
_DANGLING_RE = re.compile(r"^\s*[:\-–—]\s*")
_STOP_LINE_RE = re.compile(r"^\s*(?:less|see more|music\b|credits?\b)", re.IGNORECASE)
_STEP_VERB_RE = re.compile(
    r"^(?:cut|slice|dice|mix|stir|whisk|combine|add|bake|fry|air\s*fry|preheat|heat"
    r"|cook|season|coat|marinate|pour|fold|serve|flip|shake|toss|boil|simmer|drain"
    r"|melt|blend|bring|place|transfer|sprinkle|top|garnish|saut[eé]|roast|grill|let)\b",
    re.IGNORECASE,
)
_TEMPERATURE_RE = re.compile(r"^\d{1,3}\s*[°º]")
_ENDS_SENTENCE_RE = re.compile(r"\.\s*$")


def _strip_marker(line: str) -> str:
    line = _NUMBERING_RE.sub("", line)
    line = _BULLET_RE.sub("", line)
    return _DANGLING_RE.sub("", line).strip()


def _looks_like_step(line: str) -> bool:
    return bool(
        _STEP_VERB_RE.search(line)
        or _ENDS_SENTENCE_RE.search(line)
        or _TEMPERATURE_RE.search(line)
    )


def _unique(lines: list[str]) -> list[str]:
    return list(dict.fromkeys(line for line in lines if line))[:MAX_STEPS]


def _steps_after_header(text: str) -> list[str]:
    header = _STEP_HEADER_RE.search(text)
    if not header:
        return []

    tail = text[header.end() :]
    cut = _TAIL_CUT_RE.search(tail)
    if cut:
        tail = tail[: cut.start()]

    tail = _INLINE_NUMBER_RE.sub(r"\n\2", tail)
    tail = _INLINE_BULLET_RE.sub(r"\n\2 ", tail)

    steps = []
    for raw in tail.split("\n"):
        line = _strip_marker(raw)
        if _STOP_LINE_RE.match(line):
            break
        if line and _looks_like_step(line):
            steps.append(line)
    return _unique(steps)


def _steps_anywhere(text: str) -> list[str]:
    """Numbered lines and verb-led lines from a caption without a steps header."""
    steps = []
    for raw in text.split("\n"):
        if _STOP_LINE_RE.match(raw):
            continue
        numbered = bool(_NUMBERING_RE.match(raw))
        line = _strip_marker(raw)
        if line and (numbered or _STEP_VERB_RE.search(line)):
            steps.append(line)
    return _unique(steps)


def caption_to_steps(text: str | None) -> list[str]:
    """Extract cooking steps from a caption, in order and without duplicates."""
    raw = normalize_text(text).strip()
    if not raw:
        return []

    direct = _steps_after_header(raw)
    if len(direct) >= 2:
        logger.debug("Steps from header section: %d", len(direct))
        return direct

    fallback = _steps_anywhere(raw)
    logger.debug("Steps: header=%d fallback=%d", len(direct), len(fallback))
    return fallback if len(fallback) > len(direct) else direct
