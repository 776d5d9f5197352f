"""
Meal domain models.

Semantic records decoded from TheMealDB responses.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

MAX_INGREDIENTS = 20
INGREDIENT_IMAGE_BASE_URL = "https://www.themealdb.com/images/ingredients"


class MealSummary(BaseModel):
    """
    Meal as listed in a category.

    Identity key is ``id``.

    Example:
        >>> summary = MealSummary(id="52772", name="Teriyaki Chicken Casserole")
        >>> assert summary.thumbnail_url is None
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Meal ID on TheMealDB")
    name: str = Field(..., description="Meal name")
    thumbnail_url: Optional[str] = Field(None, description="Meal image URL")


class Ingredient(BaseModel):
    """
    One normalized ingredient line.

    Derived from a ``strIngredientN`` / ``strMeasureN`` pair.

    Example:
        >>> ingredient = Ingredient(name="soy sauce", measurement="3/4 cup")
        >>> ingredient.thumbnail_url
        'https://www.themealdb.com/images/ingredients/soy%20sauce.png'
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Ingredient name")
    measurement: str = Field(..., min_length=1, description="Quantity, free text")

    @property
    def thumbnail_url(self) -> str:
        """URL of TheMealDB image for this ingredient."""
        return f"{INGREDIENT_IMAGE_BASE_URL}/{quote(self.name)}.png"


class Meal(BaseModel):
    """
    Full meal detail.

    Built by ``MealDBMapper.parse_meal``; the numbered ingredient
    fields of the wire format are not kept, only the ordered tuple.

    Attributes:
        id: Meal ID on TheMealDB
        name: Meal name
        thumbnail_url: Meal image URL
        category: Category name, eg "Dessert"
        area: Region of origin, eg "British"
        instructions: Preparation text
        tags: Tags, None when the meal has none
        video_url: YouTube URL, None when absent or malformed
        ingredients: Ingredients in source order
        source_url: Recipe source URL, None when absent or malformed
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    thumbnail_url: str
    category: str
    area: str
    instructions: str
    tags: Optional[tuple[str, ...]] = None
    video_url: Optional[str] = None
    ingredients: tuple[Ingredient, ...] = Field(default_factory=tuple, max_length=MAX_INGREDIENTS)
    source_url: Optional[str] = None

    def summary(self) -> MealSummary:
        """Return the category-list view of this meal."""
        return MealSummary(id=self.id, name=self.name, thumbnail_url=self.thumbnail_url)
