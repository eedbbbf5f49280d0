"""Decide whether a caption line reads like an ingredient."""

import re

from recipe_text.parser.amounts import AMOUNT_RE, UNIT_WORD_RE

_COOKING_VERB_RE = re.compile(
    r"\b(?:mix|stir|bake|cook|air[- ]?fry|preheat|add|whisk|saute|sauté|boil"
    r"|simmer|serve|top|drain)\b",
    re.IGNORECASE,
)
_COMMON_FOOD_RE = re.compile(
    r"\b(?:salt|pepper|oil|butter|flour|sugar|garlic|onion|eggs?|milk|cream"
    r"|cheese|tomato|soy|vinegar|chicken|beef|pork|shrimp|rice|pasta|bread"
    r"|yeast|baking|vanilla|cocoa|chili|cilantro|parsley|basil|lemon|lime)\b",
    re.IGNORECASE,
)
_SOCIAL_NOISE_RE = re.compile(
    r"\b(?:follow|subscribe|music|soundtrack|credits|link\s+in\s+bio|shop|use\s+code)\b",
    re.IGNORECASE,
)


def has_cooking_verb(line: str) -> bool:
    return bool(_COOKING_VERB_RE.search(line or ""))


def looks_ingredienty(line: str) -> bool:
    """Accept lines with an amount, unit or common food word; reject instructions."""
    s = (line or "").strip()
    if not s:
        return False
    if has_cooking_verb(s):
        return False
    return bool(
        AMOUNT_RE.search(s) or UNIT_WORD_RE.search(s) or _COMMON_FOOD_RE.search(s)
    )


def is_social_noise(line: str) -> bool:
    """True for promo lines such as "follow for more" or "link in bio"."""
    return bool(_SOCIAL_NOISE_RE.search(line or ""))
