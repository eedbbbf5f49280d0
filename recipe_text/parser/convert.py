"""Convert parsed quantities between US and metric units for display."""

import math
from typing import Literal

from recipe_text.models import DisplayQuantity
from recipe_text.parser.amounts import unit_alias_to_canonical

UnitSystem = Literal["us", "metric"]

ML_PER_TSP = 5
ML_PER_TBSP = 15
ML_PER_FLOZ = 29.5735
ML_PER_CUP = 240
G_PER_OZ = 28.3495
G_PER_LB = 453.592

# canonical unit -> milliliters (volume) or grams (mass) per unit
_ML_PER_UNIT = {
    "milliliter": 1,
    "liter": 1000,
    "teaspoon": ML_PER_TSP,
    "tablespoon": ML_PER_TBSP,
    "fluid ounce": ML_PER_FLOZ,
    "cup": ML_PER_CUP,
}
_G_PER_UNIT = {
    "gram": 1,
    "kilogram": 1000,
    "ounce": G_PER_OZ,
    "pound": G_PER_LB,
}
_METRIC = frozenset({"milliliter", "liter", "gram", "kilogram"})


def _round_to(n: float, step: float) -> float:
    # half-up, then drop float noise such as 0.30000000000000004
    return round(math.floor(n / step + 0.5) * step, 4)


def _us_volume(ml: float) -> tuple[float, str]:
    if ml < 15:
        return _round_to(ml / ML_PER_TSP, 0.25), "teaspoon"
    if ml < 90:
        return _round_to(ml / ML_PER_TBSP, 0.25), "tablespoon"
    if ml < 360:
        return _round_to(ml / ML_PER_FLOZ, 0.25), "fluid ounce"
    return _round_to(ml / ML_PER_CUP, 0.25), "cup"


def _metric_volume(ml: float) -> tuple[float, str]:
    if ml >= 1000:
        return _round_to(ml / 1000, 0.05), "liter"
    return float(math.floor(ml + 0.5)), "milliliter"


def _us_mass(g: float) -> tuple[float, str]:
    if g >= G_PER_LB:
        return _round_to(g / G_PER_LB, 0.05), "pound"
    return _round_to(g / G_PER_OZ, 0.05), "ounce"


def _metric_mass(g: float) -> tuple[float, str]:
    if g >= 1000:
        return _round_to(g / 1000, 0.01), "kilogram"
    return float(math.floor(g + 0.5)), "gram"


def detect_unit_system(unit: str | None) -> UnitSystem | None:
    """Say whether a unit spelling belongs to the US or the metric system."""
    canonical = unit_alias_to_canonical(unit)
    if canonical in _METRIC:
        return "metric"
    if canonical in _ML_PER_UNIT or canonical in _G_PER_UNIT:
        return "us"
    return None


def convert_for_display(qty: float, unit: str, pref: UnitSystem) -> DisplayQuantity:
    """Express a quantity in the preferred system, picking a readable unit.

    Volumes go through milliliters and masses through grams. Units that are
    neither (pinch, clove, ...) come back unchanged.
    """
    canonical = unit_alias_to_canonical(unit)
    if canonical is None or math.isnan(qty):
        return DisplayQuantity(qty=qty, unit=unit)

    if canonical in _ML_PER_UNIT:
        ml = qty * _ML_PER_UNIT[canonical]
        value, shown = _metric_volume(ml) if pref == "metric" else _us_volume(ml)
    elif canonical in _G_PER_UNIT:
        g = qty * _G_PER_UNIT[canonical]
        value, shown = _metric_mass(g) if pref == "metric" else _us_mass(g)
    else:
        return DisplayQuantity(qty=qty, unit=unit)

    return DisplayQuantity(qty=value, unit=shown)
