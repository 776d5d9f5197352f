"""
TheMealDB data mapper.

Transforms TheMealDB API responses to domain models.

TheMealDB flattens a meal's ingredients into twenty parallel
``strIngredientN`` / ``strMeasureN`` string fields. The mapper reshapes
them into an ordered tuple of ``Ingredient`` records, dropping blank
slots.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping, Optional, TypeVar
from urllib.parse import urlparse

from recipe_book.domain.meal.models import (
    MAX_INGREDIENTS,
    Ingredient,
    Meal,
    MealSummary,
)
from recipe_book.domain.shared.errors import (
    DecodeError,
    MissingFieldError,
    TypeMismatchError,
)

T = TypeVar("T")

# Wire field names
NAME = "strMeal"
THUMBNAIL = "strMealThumb"
ID = "idMeal"
CATEGORY = "strCategory"
AREA = "strArea"
INSTRUCTIONS = "strInstructions"
TAGS = "strTags"
VIDEO = "strYoutube"
SOURCE = "strSource"
ENVELOPE = "meals"

INGREDIENT_FIELD_PAIRS: tuple[tuple[str, str], ...] = tuple(
    (f"strIngredient{i}", f"strMeasure{i}") for i in range(1, MAX_INGREDIENTS + 1)
)


def _required_string(raw: Mapping[str, Any], key: str, field: str) -> str:
    if key not in raw or raw[key] is None:
        raise MissingFieldError(field, key=key)
    value = raw[key]
    if not isinstance(value, str):
        raise TypeMismatchError(field, key=key)
    return value


def _parse_url(value: Any) -> Optional[str]:
    """Return value if it is an absolute http(s) URL, else None."""
    if not isinstance(value, str) or not value:
        return None
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return None
    return value


def _parse_tags(value: Any) -> Optional[tuple[str, ...]]:
    if not isinstance(value, str) or value == "":
        return None
    return tuple(value.split(","))


class MealDBMapper:
    """Maps TheMealDB API data to domain models."""

    @staticmethod
    def decode_json(body: bytes) -> Any:
        """Decode a raw response body.

        Raises:
            DecodeError: If body is not valid JSON
        """
        try:
            return json.loads(body)
        except (UnicodeDecodeError, ValueError) as e:
            raise DecodeError(f"Response body is not valid JSON: {e}") from e

    @staticmethod
    def parse_ingredients(raw: Mapping[str, Any]) -> tuple[Ingredient, ...]:
        """Collect populated ingredient/measurement pairs.

        A pair is kept only when both values are non-empty strings.
        Whitespace is not trimmed, so ``" "`` counts as populated.

        Example:
            >>> MealDBMapper.parse_ingredients({
            ...     "strIngredient1": "Eggs", "strMeasure1": "2",
            ...     "strIngredient2": "Salt", "strMeasure2": "",
            ... })
            (Ingredient(name='Eggs', measurement='2'),)
        """
        ingredients = []
        for ingredient_key, measurement_key in INGREDIENT_FIELD_PAIRS:
            name = raw.get(ingredient_key)
            measurement = raw.get(measurement_key)
            if not isinstance(name, str) or not isinstance(measurement, str):
                continue
            if name == "" or measurement == "":
                continue
            ingredients.append(Ingredient(name=name, measurement=measurement))
        return tuple(ingredients)

    @staticmethod
    def parse_meal(raw: Mapping[str, Any]) -> Meal:
        """Parse one full meal object.

        Args:
            raw: Element of the ``meals`` array of a lookup response

        Returns:
            Decoded Meal

        Raises:
            MissingFieldError: Required field absent or null
            TypeMismatchError: Required field not a string, or
                thumbnail not a URL

        Example:
            >>> meal = MealDBMapper.parse_meal({
            ...     "idMeal": "52772",
            ...     "strMeal": "Teriyaki Chicken Casserole",
            ...     "strMealThumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
            ...     "strCategory": "Chicken",
            ...     "strArea": "Japanese",
            ...     "strInstructions": "Preheat oven to 350.",
            ...     "strTags": "Meat,Casserole",
            ...     "strIngredient1": "soy sauce",
            ...     "strMeasure1": "3/4 cup",
            ... })
            >>> assert meal.tags == ("Meat", "Casserole")
            >>> assert meal.ingredients[0].name == "soy sauce"
        """
        name = _required_string(raw, NAME, "name")
        thumbnail = _required_string(raw, THUMBNAIL, "thumbnail")
        thumbnail_url = _parse_url(thumbnail)
        if thumbnail_url is None:
            raise TypeMismatchError("thumbnail", expected="URL", key=THUMBNAIL)
        meal_id = _required_string(raw, ID, "id")
        category = _required_string(raw, CATEGORY, "category")
        area = _required_string(raw, AREA, "area")
        instructions = _required_string(raw, INSTRUCTIONS, "instructions")

        return Meal(
            id=meal_id,
            name=name,
            thumbnail_url=thumbnail_url,
            category=category,
            area=area,
            instructions=instructions,
            tags=_parse_tags(raw.get(TAGS)),
            video_url=_parse_url(raw.get(VIDEO)),
            ingredients=MealDBMapper.parse_ingredients(raw),
            source_url=_parse_url(raw.get(SOURCE)),
        )

    @staticmethod
    def parse_summary(raw: Mapping[str, Any]) -> MealSummary:
        """Parse one element of a category listing.

        Only name, thumbnail and id are read.
        """
        name = _required_string(raw, NAME, "name")
        meal_id = _required_string(raw, ID, "id")
        return MealSummary(
            id=meal_id,
            name=name,
            thumbnail_url=_parse_url(raw.get(THUMBNAIL)),
        )

    @staticmethod
    def parse_envelope(
        payload: Any,
        item_parser: Callable[[Mapping[str, Any]], T],
    ) -> list[T]:
        """Parse the ``{"meals": [...]}`` envelope.

        A missing or null ``meals`` array decodes to an empty list.

        Args:
            payload: Decoded JSON body
            item_parser: Parser applied to each element

        Returns:
            Parsed elements, in response order

        Raises:
            DecodeError: If payload is not a JSON object
            TypeMismatchError: If ``meals`` is not an array of objects

        Example:
            >>> MealDBMapper.parse_envelope({"meals": None}, MealDBMapper.parse_summary)
            []
        """
        if not isinstance(payload, Mapping):
            raise DecodeError("Response body is not a JSON object")

        items = payload.get(ENVELOPE)
        if items is None:
            return []
        if not isinstance(items, list):
            raise TypeMismatchError(ENVELOPE, expected="array")

        results = []
        for item in items:
            if not isinstance(item, Mapping):
                raise TypeMismatchError(ENVELOPE, expected="array of objects")
            results.append(item_parser(item))
        return results
