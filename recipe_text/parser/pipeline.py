"""Orchestrator: run a caption (and optional comments) through the text pipeline."""

import logging

from recipe_text.models import Recipe
from recipe_text.parser.caption import caption_to_ingredients
from recipe_text.parser.markup import html_to_text
from recipe_text.parser.social import clean_social_boilerplate, pick_recipe_comments
from recipe_text.parser.steps import caption_to_steps
from recipe_text.parser.title import extract_recipe_title

logger = logging.getLogger(__name__)


def _prepare(text: str | None) -> str:
    return clean_social_boilerplate(html_to_text(text))


def parse_caption(text: str | None, comments: list[str] | None = None) -> Recipe:
    """Build a Recipe from a caption.

    When the caption itself carries no ingredients, the most recipe-like
    comments (creators often pin the recipe there) are tried in order.
    """
    caption = _prepare(text)
    title = extract_recipe_title(caption)

    sources = [("caption", caption)]
    for i, comment in enumerate(pick_recipe_comments(comments), start=1):
        sources.append((f"comment {i}", _prepare(comment)))

    parsed = []
    source = caption
    for name, candidate in sources:
        parsed = caption_to_ingredients(candidate)
        if parsed:
            logger.info("Ingredients from %s: %d", name, len(parsed))
            source = candidate
            break
        logger.debug("%s has no ingredients", name)

    if not parsed:
        logger.info("No ingredients found in %d source(s)", len(sources))

    steps = caption_to_steps(source) or caption_to_steps(caption)

    return Recipe(
        title=title,
        ingredients=[p.canonical for p in parsed],
        parsed_ingredients=parsed,
        steps=steps,
    )
