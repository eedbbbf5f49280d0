import html

from pydantic import BaseModel, ConfigDict, model_validator


class ParsedIngredient(BaseModel):
    """Structured ingredient data extracted from a single ingredient line."""

    model_config = ConfigDict(frozen=True)

    original: str
    qty: float | None = None
    unit: str | None = None
    item: str = ""
    note: str | None = None
    canonical: str = ""


class DisplayQuantity(BaseModel):
    model_config = ConfigDict(frozen=True)

    qty: float
    unit: str


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    ingredients: list[str]
    parsed_ingredients: list[ParsedIngredient] = []
    steps: list[str] = []

    @model_validator(mode="before")
    @classmethod
    def clean_text(cls, data):
        """Decode HTML entities and strip whitespace from text fields."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if isinstance(data.get("title"), str):
            data["title"] = html.unescape(data["title"]).strip()
        for key in ("ingredients", "steps"):
            if data.get(key) is not None:
                data[key] = [html.unescape(s).strip() for s in data[key]]
        return data
