"""Tests for amount tokens and unit aliases."""

from recipe_text.parser.amounts import (
    UNIT_WORD_RE,
    amount_to_number,
    find_amounts,
    pluralize_unit,
    should_pluralize,
    unit_alias_to_canonical,
)

# -- amount_to_number --


def test_whole_number():
    assert amount_to_number("2") == 2.0


def test_decimal():
    assert amount_to_number("2.5") == 2.5


def test_decimal_comma():
    assert amount_to_number("2,5") == 2.5


def test_simple_fraction():
    assert amount_to_number("3/4") == 0.75


def test_mixed_number_is_exact():
    assert amount_to_number("1 1/2") == 1.5


def test_unicode_fraction():
    assert amount_to_number("¾") == 0.75


def test_whole_plus_unicode_fraction():
    assert amount_to_number("1½") == 1.5
    assert amount_to_number("1 ½") == 1.5


def test_thirds_resolve_exactly():
    assert amount_to_number("⅓") == 1 / 3


def test_range_keeps_lower_bound():
    assert amount_to_number("2-3") == 2.0
    assert amount_to_number("2 – 3") == 2.0


def test_zero_denominator():
    assert amount_to_number("3/0") is None
    assert amount_to_number("1 1/0") == 1.0


def test_unreadable_amount():
    assert amount_to_number("abc") is None
    assert amount_to_number("") is None
    assert amount_to_number(None) is None


# -- find_amounts --


def _tokens(text):
    return [m.group() for m in find_amounts(text)]


def test_find_mixed_then_whole():
    assert _tokens("1 1/2 cups flour 2 eggs") == ["1 1/2", "2"]


def test_find_fraction_whole():
    assert _tokens("1/2 cup sugar") == ["1/2"]


def test_find_decimal_whole():
    assert _tokens("2.5 kg potatoes") == ["2.5"]


def test_find_range_whole():
    assert _tokens("2-3 cloves garlic") == ["2-3"]


def test_find_unicode():
    assert _tokens("½ cup sugar") == ["½"]
    assert _tokens("1 ½ cups milk") == ["1 ½"]


def test_no_amount_inside_words():
    assert _tokens("B12 vitamins") == []
    assert _tokens("the 3rd batch") == []


def test_amount_after_punctuation():
    assert _tokens("flour,2 eggs (3 tbsp)") == ["2", "3"]


# -- unit aliases --


def test_unit_abbreviations():
    assert unit_alias_to_canonical("tsp") == "teaspoon"
    assert unit_alias_to_canonical("Tbsp.") == "tablespoon"
    assert unit_alias_to_canonical("lbs") == "pound"
    assert unit_alias_to_canonical("c") == "cup"


def test_unit_plural_spelling():
    assert unit_alias_to_canonical("cups") == "cup"
    assert unit_alias_to_canonical("pinches") == "pinch"


def test_unit_british_spelling():
    assert unit_alias_to_canonical("litre") == "liter"
    assert unit_alias_to_canonical("millilitres") == "milliliter"


def test_two_word_unit():
    assert unit_alias_to_canonical("fl oz") == "fluid ounce"
    assert unit_alias_to_canonical("fl  oz") == "fluid ounce"
    assert unit_alias_to_canonical("FL.OZ.") == "fluid ounce"
    assert unit_alias_to_canonical("fluid ounces") == "fluid ounce"


def test_unknown_unit():
    assert unit_alias_to_canonical("bananas") is None
    assert unit_alias_to_canonical("") is None
    assert unit_alias_to_canonical(".") is None


# -- pluralization --


def test_singular_quantities():
    assert not should_pluralize("1")
    assert not should_pluralize("½")
    assert not should_pluralize("1/2")
    assert not should_pluralize("0.5")
    assert not should_pluralize("")


def test_plural_quantities():
    assert should_pluralize("2")
    assert should_pluralize("3/2")
    assert should_pluralize("1 1/2")
    assert should_pluralize("1½")
    assert should_pluralize("2-3")


def test_pluralize_unit():
    assert pluralize_unit("teaspoon", "2") == "teaspoons"
    assert pluralize_unit("cup", "1") == "cup"
    assert pluralize_unit("fluid ounce", "2") == "fluid ounces"
    assert pluralize_unit("pinch", "2") == "pinches"


# -- unit words in prose --


def test_unit_word_found():
    assert UNIT_WORD_RE.search("a cup of tea")
    assert UNIT_WORD_RE.search("two Tablespoons butter")


def test_unit_word_needs_word_boundary():
    assert UNIT_WORD_RE.search("cat food") is None
    assert UNIT_WORD_RE.search("t") is None
