"""Tests for the caption-to-recipe pipeline and the Recipe model."""

import pytest
from pydantic import ValidationError

from recipe_text.models import Recipe
from recipe_text.parser.pipeline import parse_caption

# -- Fixtures: sample captions --

CAPTION = """1,234 likes, 56 comments - chef_anna: Garlic Butter Pasta
Ingredients:
- 8 oz spaghetti
- 4 tbsp butter
- 3 cloves garlic, minced
- Salt
- Pepper to taste
Steps:
1. Boil the pasta.
2. Melt butter and add garlic.
#pasta #dinner"""

HTML_CAPTION = (
    "<p>Pancakes</p><p>Ingredients:</p>"
    "<ul><li>1 cup flour</li><li>1 egg</li></ul>"
)

RECIPE_COMMENT = """Ingredients:
- 2 cups flour
- 1 tsp salt
Steps:
1. Mix well.
2. Bake for 20 minutes."""

# -- parse_caption --


def test_full_caption():
    recipe = parse_caption(CAPTION)
    assert recipe.title == "Garlic Butter Pasta"
    assert recipe.ingredients == [
        "8 ounces spaghetti",
        "4 tablespoons butter",
        "3 cloves garlic, minced",
        "Salt and pepper to taste",
    ]
    assert recipe.steps == ["Boil the pasta.", "Melt butter and add garlic."]


def test_parsed_ingredients_match_lines():
    recipe = parse_caption(CAPTION)
    assert [p.canonical for p in recipe.parsed_ingredients] == recipe.ingredients
    assert recipe.parsed_ingredients[1].unit == "tablespoon"


def test_html_caption():
    recipe = parse_caption(HTML_CAPTION)
    assert recipe.title == "Pancakes"
    assert recipe.ingredients == ["1 cup flour", "1 egg"]


def test_ingredients_from_comment_when_caption_has_none():
    recipe = parse_caption("Recipe in the comments!", comments=["so good", RECIPE_COMMENT])
    assert recipe.ingredients == ["2 cups flour", "1 teaspoon salt"]
    assert recipe.steps == ["Mix well.", "Bake for 20 minutes."]


def test_caption_preferred_over_comments():
    recipe = parse_caption(CAPTION, comments=[RECIPE_COMMENT])
    assert recipe.ingredients[0] == "8 ounces spaghetti"


def test_nothing_found():
    recipe = parse_caption("")
    assert recipe.title == "Recipe"
    assert recipe.ingredients == []
    assert recipe.parsed_ingredients == []
    assert recipe.steps == []


# -- Recipe model --


def test_recipe_text_cleaned():
    recipe = Recipe(
        title="  Mac &amp; Cheese ",
        ingredients=[" 1 cup milk "],
        steps=["Stir &amp; serve. "],
    )
    assert recipe.title == "Mac & Cheese"
    assert recipe.ingredients == ["1 cup milk"]
    assert recipe.steps == ["Stir & serve."]


def test_recipe_is_frozen():
    recipe = Recipe(title="Soup", ingredients=[])
    with pytest.raises(ValidationError):
        recipe.title = "Stew"
