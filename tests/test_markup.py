"""Tests for HTML-to-text flattening."""

from recipe_text.parser.markup import html_to_text, looks_like_markup


def _lines(text):
    return [line for line in html_to_text(text).splitlines() if line]


def test_plain_text_passes_through():
    assert html_to_text("2 cups flour\n3 eggs") == "2 cups flour\n3 eggs"
    assert not looks_like_markup("1 < 2 cups")


def test_paragraphs_become_lines():
    assert _lines("<p>1 cup flour</p><p>2 eggs</p>") == ["1 cup flour", "2 eggs"]


def test_list_items_become_lines():
    html = "<h2>Ingredients</h2><ul><li>1 cup flour</li><li>1 egg</li></ul>"
    assert _lines(html) == ["Ingredients", "1 cup flour", "1 egg"]


def test_br_becomes_newline():
    assert _lines("1 cup flour<br>2 eggs<br/>salt") == ["1 cup flour", "2 eggs", "salt"]


def test_entities_decoded():
    assert html_to_text("Mac &amp; cheese") == "Mac & cheese"


def test_scripts_dropped():
    assert _lines("<ul><li>salt</li></ul><script>track()</script>") == ["salt"]


def test_empty():
    assert html_to_text("") == ""
    assert html_to_text(None) == ""
