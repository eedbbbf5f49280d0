"""Tests for display unit conversion."""

import pytest

from recipe_text.models import DisplayQuantity
from recipe_text.parser.convert import convert_for_display, detect_unit_system

# -- detect_unit_system --


def test_detect_us_units():
    assert detect_unit_system("Tbsp") == "us"
    assert detect_unit_system("cups") == "us"
    assert detect_unit_system("lb") == "us"


def test_detect_metric_units():
    assert detect_unit_system("ml") == "metric"
    assert detect_unit_system("grams") == "metric"


def test_detect_unknown():
    assert detect_unit_system("clove") is None
    assert detect_unit_system(None) is None


# -- volume --


def test_cup_to_metric():
    assert convert_for_display(1, "cup", "metric") == DisplayQuantity(qty=240, unit="milliliter")


def test_large_volume_to_liters():
    assert convert_for_display(5, "cups", "metric") == DisplayQuantity(qty=1.2, unit="liter")


def test_small_volume_picks_teaspoon():
    assert convert_for_display(1, "tsp", "us") == DisplayQuantity(qty=1, unit="teaspoon")


def test_three_teaspoons_become_tablespoon():
    assert convert_for_display(3, "tsp", "us") == DisplayQuantity(qty=1, unit="tablespoon")


def test_milliliters_to_fluid_ounces():
    assert convert_for_display(100, "ml", "us") == DisplayQuantity(qty=3.5, unit="fluid ounce")


def test_liters_to_cups():
    assert convert_for_display(1, "l", "us") == DisplayQuantity(qty=4.25, unit="cup")


# -- mass --


def test_grams_to_ounces():
    assert convert_for_display(200, "g", "us") == DisplayQuantity(qty=7.05, unit="ounce")


def test_grams_switch_to_pounds_at_one_pound():
    assert convert_for_display(453.592, "g", "us") == DisplayQuantity(qty=1, unit="pound")
    assert convert_for_display(500, "g", "us") == DisplayQuantity(qty=1.1, unit="pound")


def test_kilogram_to_pounds():
    assert convert_for_display(1, "kg", "us") == DisplayQuantity(qty=2.2, unit="pound")


def test_pounds_to_grams():
    assert convert_for_display(2, "lb", "metric") == DisplayQuantity(qty=907, unit="gram")


def test_heavy_mass_to_kilograms():
    result = convert_for_display(3, "lb", "metric")
    assert result.unit == "kilogram"
    assert result.qty == pytest.approx(1.36)


# -- passthrough --


def test_non_convertible_unit_unchanged():
    assert convert_for_display(3, "pinch", "metric") == DisplayQuantity(qty=3, unit="pinch")


def test_unknown_unit_unchanged():
    assert convert_for_display(2, "bananas", "us") == DisplayQuantity(qty=2, unit="bananas")


def test_nan_unchanged():
    result = convert_for_display(float("nan"), "cup", "metric")
    assert result.unit == "cup"
