"""Amount tokens, unicode fractions and unit aliases shared by the text pipeline."""

import re
from fractions import Fraction
from types import MappingProxyType

UNICODE_FRACTIONS = MappingProxyType(
    {
        "¼": Fraction(1, 4),
        "½": Fraction(1, 2),
        "¾": Fraction(3, 4),
        "⅐": Fraction(1, 7),
        "⅑": Fraction(1, 9),
        "⅒": Fraction(1, 10),
        "⅓": Fraction(1, 3),
        "⅔": Fraction(2, 3),
        "⅕": Fraction(1, 5),
        "⅖": Fraction(2, 5),
        "⅗": Fraction(3, 5),
        "⅘": Fraction(4, 5),
        "⅙": Fraction(1, 6),
        "⅚": Fraction(5, 6),
        "⅛": Fraction(1, 8),
        "⅜": Fraction(3, 8),
        "⅝": Fraction(5, 8),
        "⅞": Fraction(7, 8),
    }
)

FRACTION_CLASS = "[" + "".join(UNICODE_FRACTIONS) + "]"

_DASHES = "[-–—]"
_NUMBER = r"\d+(?:\.\d+)?"

# Order matters: longer forms must be tried before their prefixes.
AMOUNT_CORE = (
    "(?:"
    rf"\d+\s*{FRACTION_CLASS}"  # 1½, 1 ½
    r"|\d+\s+\d+/\d+"  # 1 1/2
    rf"|{_NUMBER}\s*{_DASHES}\s*{_NUMBER}"  # 2-3, 2 – 3
    r"|\d+/\d+"  # 3/4
    rf"|{_NUMBER}"  # 2, 2.5
    rf"|{FRACTION_CLASS}"  # ½
    ")"
)

# An amount that starts a token: beginning of text or after whitespace/punctuation,
# and not running on into a word, another fraction or a decimal part.
AMOUNT_RE = re.compile(rf"(?:^|(?<=[\s,;()])){AMOUNT_CORE}(?![\w/]|\.\d)")

_MIXED_UNICODE_RE = re.compile(rf"^(\d+)\s*({FRACTION_CLASS})$")
_MIXED_RE = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_RANGE_RE = re.compile(rf"^({_NUMBER})\s*{_DASHES}\s*{_NUMBER}$")
_DECIMAL_RE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")

UNIT_ALIASES = MappingProxyType(
    {
        # teaspoons
        "t": "teaspoon",
        "tsp": "teaspoon",
        "tsps": "teaspoon",
        "teaspoon": "teaspoon",
        "teaspoons": "teaspoon",
        # tablespoons
        "tbsp": "tablespoon",
        "tbsps": "tablespoon",
        "tbs": "tablespoon",
        "tbl": "tablespoon",
        "tblsp": "tablespoon",
        "tablespoon": "tablespoon",
        "tablespoons": "tablespoon",
        # cups
        "c": "cup",
        "cup": "cup",
        "cups": "cup",
        # weight
        "oz": "ounce",
        "ounce": "ounce",
        "ounces": "ounce",
        "lb": "pound",
        "lbs": "pound",
        "pound": "pound",
        "pounds": "pound",
        "g": "gram",
        "gram": "gram",
        "grams": "gram",
        "kg": "kilogram",
        "kilogram": "kilogram",
        "kilograms": "kilogram",
        # volume
        "ml": "milliliter",
        "milliliter": "milliliter",
        "milliliters": "milliliter",
        "millilitre": "milliliter",
        "millilitres": "milliliter",
        "l": "liter",
        "liter": "liter",
        "liters": "liter",
        "litre": "liter",
        "litres": "liter",
        "fl oz": "fluid ounce",
        "floz": "fluid ounce",
        "fluid ounce": "fluid ounce",
        "fluid ounces": "fluid ounce",
        # loose units
        "pinch": "pinch",
        "pinches": "pinch",
        "dash": "dash",
        "dashes": "dash",
        "clove": "clove",
        "cloves": "clove",
        "slice": "slice",
        "slices": "slice",
        "stick": "stick",
        "sticks": "stick",
        "can": "can",
        "cans": "can",
    }
)

PLURAL_UNITS = MappingProxyType(
    {
        "teaspoon": "teaspoons",
        "tablespoon": "tablespoons",
        "cup": "cups",
        "ounce": "ounces",
        "pound": "pounds",
        "gram": "grams",
        "kilogram": "kilograms",
        "milliliter": "milliliters",
        "liter": "liters",
        "fluid ounce": "fluid ounces",
        "pinch": "pinches",
        "dash": "dashes",
        "clove": "cloves",
        "slice": "slices",
        "stick": "sticks",
        "can": "cans",
    }
)

# Single letters like "t" and "c" are too ambiguous to count as unit words in prose.
_UNIT_WORDS = sorted(
    (alias for alias in UNIT_ALIASES if len(alias) > 1 or alias in ("g", "l")),
    key=len,
    reverse=True,
)
UNIT_WORD_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(w).replace(r"\ ", r"\s+") for w in _UNIT_WORDS) + r")\b",
    re.IGNORECASE,
)


def find_amounts(text: str) -> list[re.Match]:
    """Return every boundary-aware amount token in the text, in order."""
    return list(AMOUNT_RE.finditer(text))


def amount_to_number(text: str | None) -> float | None:
    """Resolve an amount token to a number; ranges keep their lower bound."""
    if not text:
        return None
    q = text.strip()

    if q in UNICODE_FRACTIONS:
        return float(UNICODE_FRACTIONS[q])

    m = _MIXED_UNICODE_RE.match(q)
    if m:
        return float(int(m.group(1)) + UNICODE_FRACTIONS[m.group(2)])

    m = _MIXED_RE.match(q)
    if m:
        whole, num, den = (int(g) for g in m.groups())
        if not den:
            return float(whole)
        return float(whole + Fraction(num, den))

    m = _FRACTION_RE.match(q)
    if m:
        num, den = (int(g) for g in m.groups())
        return float(Fraction(num, den)) if den else None

    m = _RANGE_RE.match(q)
    if m:
        return float(m.group(1))

    q = q.replace(",", ".")
    if _DECIMAL_RE.match(q):
        return float(q)
    return None


def unit_alias_to_canonical(raw: str | None) -> str | None:
    """Map a unit spelling ("Tbsp.", "fl oz", "cups") to its canonical singular name."""
    if not raw:
        return None
    clean = raw.lower().replace(".", "").strip()
    if not clean:
        return None

    joined = re.sub(r"\s+", " ", clean)
    if joined in UNIT_ALIASES:
        return UNIT_ALIASES[joined]

    squished = re.sub(r"\s+", "", clean)
    if squished in UNIT_ALIASES:
        return UNIT_ALIASES[squished]

    if joined.endswith("s") and joined[:-1] in UNIT_ALIASES:
        return UNIT_ALIASES[joined[:-1]]
    return None


def should_pluralize(qty_text: str) -> bool:
    """Decide unit pluralization from the quantity as it was written."""
    q = (qty_text or "").strip()
    if not q or q == "1":
        return False
    if q in UNICODE_FRACTIONS:
        return False
    if _MIXED_UNICODE_RE.match(q) or _MIXED_RE.match(q) or _RANGE_RE.match(q):
        return True
    value = amount_to_number(q)
    return value is not None and value > 1


def pluralize_unit(unit: str, qty_text: str) -> str:
    if not unit:
        return ""
    if not should_pluralize(qty_text):
        return unit
    return PLURAL_UNITS.get(unit, unit)
