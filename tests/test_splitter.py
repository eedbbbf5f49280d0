"""Tests for splitting run-on chunks at new amounts."""

from recipe_text.parser.splitter import (
    explode_on_new_amount,
    peel_salt_pepper_tail,
    salvage_word,
)

# -- explode_on_new_amount --


def test_two_amounts_two_pieces():
    assert explode_on_new_amount("3 cups flour 2 eggs") == ["3 cups flour", "2 eggs"]


def test_single_amount_single_piece():
    assert explode_on_new_amount("1 cup milk") == ["1 cup milk"]


def test_no_amount_returns_empty():
    assert explode_on_new_amount("no amounts here") == []
    assert explode_on_new_amount("") == []
    assert explode_on_new_amount(None) == []


def test_salvaged_word_goes_after_unit():
    assert explode_on_new_amount("e flour 3 cups milk") == ["3 cups flour milk"]


def test_salvaged_word_goes_after_bare_quantity():
    assert explode_on_new_amount("onion 2 large") == ["2 onion large"]


def test_stopwords_not_salvaged():
    assert explode_on_new_amount("and the 2 eggs") == ["2 eggs"]


def test_idiom_tail_split_off():
    pieces = explode_on_new_amount("1 lb chicken, salt and pepper to taste")
    assert pieces == ["1 lb chicken", "Salt and pepper to taste"]


def test_salt_to_taste_tail_with_and():
    assert explode_on_new_amount("2 eggs and salt to taste.") == ["2 eggs", "Salt to taste"]


# -- salvage_word --


def test_last_qualifying_word_wins():
    assert salvage_word("chopped fresh basil and") == "basil"


def test_short_and_stop_words_skipped():
    assert salvage_word("the of a") == ""
    assert salvage_word("e 12") == ""


# -- peel_salt_pepper_tail --


def test_plain_line_passes_through():
    assert peel_salt_pepper_tail("Salt") == ["Salt"]


def test_whole_line_is_idiom():
    assert peel_salt_pepper_tail("salt and pepper to taste") == ["Salt and pepper to taste"]


def test_pepper_to_taste_tail():
    assert peel_salt_pepper_tail("olive oil, pepper to taste") == ["olive oil", "Pepper to taste"]
