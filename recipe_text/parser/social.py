"""Social-media caption cleanup and recipe-likeness scoring."""

import logging
import re

logger = logging.getLogger(__name__)

_COUNT = r"\d[\d,.]*[KkMm]?"

# "1,234 likes, 56 comments - chef_anna on June 3, 2024: ..."
_HEADER_RE = re.compile(
    rf"^\s*{_COUNT}\s+likes?,?\s*{_COUNT}\s+comments?\s*[-–—]\s*[^:\n]+:\s*",
    re.IGNORECASE,
)
_LIKES_LINE_RE = re.compile(rf"^[ \t]*{_COUNT}[ \t]+likes?[ \t]*$", re.IGNORECASE | re.MULTILINE)
_COMMENTS_LINE_RE = re.compile(
    rf"^[ \t]*{_COUNT}[ \t]+comments?[ \t]*$", re.IGNORECASE | re.MULTILINE
)
_FOOTER_RE = re.compile(
    r"^[ \t]*(?:tiktok[ \t]*[-|–—][ \t]*)?make[ \t]+your[ \t]+day[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)
_TIKTOK_SUFFIX_RE = re.compile(r"[ \t]*\|[ \t]*tiktok[ \t]*$", re.IGNORECASE | re.MULTILINE)
_BLANK_RUN_RE = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)+")

_UNIT_HIT_RE = re.compile(
    r"\b(?:cups?|tsp|tbsp|teaspoon|tablespoon|oz|ounces?|lb|pound|g|gram|kg|ml|l"
    r"|lit(?:er|re)|cloves?|eggs?|sticks?)\b"
)
_NUMBERISH_RE = re.compile(r"[0-9¼½¾⅓⅔⅛⅜⅝⅞]")
_BULLET_LIST_RE = re.compile(r"^\s*[-*•]", re.MULTILINE)
_NUMBERED_LIST_RE = re.compile(r"^\s*\d+[.)]", re.MULTILINE)
_FOOD_EMOJI_RE = re.compile(
    "[\U0001F355\U0001F354\U0001F35E\U0001F956\U0001F968\U0001F96F\U0001F96A"
    "\U0001F959\U0001F32E\U0001F32F\U0001F957\U0001F958\U0001F35D\U0001F96B"
    "\U0001F35C\U0001F372\U0001F35B\U0001F363\U0001F371\U0001F95F\U0001F364"
    "\U0001F357\U0001F356\U0001F9C0\U0001F95A\U0001F953\U0001F969\U0001F950"
    "\U0001F9C2\U0001F944\U0001F37D⏲]"
)
_FORMAT_GLYPH_RE = re.compile("[\U0001F6D2\U0001F4DD\U0001F37D⏰➡]")
_PROMO_RE = re.compile(
    r"tour|tickets|anniversary|merch|follow|subscribe|link in bio|watch this"
    r"|check out|new post"
)
_LEADING_VERB_RE = re.compile(
    r"^(?:step|preheat|mix|combine|add|stir|whisk|bake|boil|simmer|cook|fry|sauté"
    r"|grill|roast)\b"
)

MIN_COMMENT_CHARS = 20
RECIPE_SCORE_THRESHOLD = 300


def clean_social_boilerplate(text: str | None) -> str:
    """Strip like/comment counters and platform footers from a caption."""
    if not text:
        return ""
    s = _HEADER_RE.sub("", text)
    s = _LIKES_LINE_RE.sub("", s)
    s = _COMMENTS_LINE_RE.sub("", s)
    s = _FOOTER_RE.sub("", s)
    s = _TIKTOK_SUFFIX_RE.sub("", s)
    return _BLANK_RUN_RE.sub("\n\n", s).strip()


def score_recipe_content(text: str | None) -> float:
    """Score how much a block of text reads like a recipe. Higher is better."""
    if not text:
        return 0.0
    s = text.lower()
    score = 0.0

    if re.search(r"\bingredients?\b", s):
        score += 500
    if re.search(r"\b(?:steps?|directions?|method|instructions?)\b", s):
        score += 360
    if re.search(r"\b(?:recipe|homemade)\b", s):
        score += 400

    score += len(_UNIT_HIT_RE.findall(s)) * 70

    if _NUMBERISH_RE.search(s):
        score += 80
    if _BULLET_LIST_RE.search(s):
        score += 80
    if _NUMBERED_LIST_RE.search(s):
        score += 90
    if _FOOD_EMOJI_RE.search(text):
        score += 60
    if _FORMAT_GLYPH_RE.search(text):
        score += 40

    if text.count("#") / max(1, len(text)) > 0.02:
        score -= 60
    if _PROMO_RE.search(s):
        score -= 120
    if _LEADING_VERB_RE.search(s):
        score -= 100

    return score + min(len(text), 1000) / 10


def pick_recipe_comments(comments, limit: int = 5) -> list[str]:
    """Return up to ``limit`` comments that look like recipes, best first."""
    scored = [
        (score_recipe_content(c), c)
        for c in comments or []
        if c and len(c) >= MIN_COMMENT_CHARS
    ]
    keep = [pair for pair in scored if pair[0] >= RECIPE_SCORE_THRESHOLD]
    # stable on ties so the original comment order breaks them
    keep.sort(key=lambda pair: pair[0], reverse=True)
    logger.debug("Recipe-like comments: %d of %d", len(keep), len(scored))
    return [c for _, c in keep[:limit]]
