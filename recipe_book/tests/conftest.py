"""
Shared fixtures for recipe book tests.

Provides raw TheMealDB payloads, decoded models and in-memory
implementations of the MealDBService port.
"""

import json
from pathlib import Path
from typing import Any, Callable, Generator, Optional
from unittest.mock import AsyncMock

import pytest

from recipe_book.config import get_settings
from recipe_book.domain.meal.mealdb_mapper import MealDBMapper
from recipe_book.domain.meal.models import Meal, MealSummary
from recipe_book.domain.shared.errors import TransportError
from recipe_book.infrastructure.mealdb.api_client import MealDBClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> Any:
    """Load a JSON fixture by file stem."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


# ═══════════════════════════════════════════════════════════
# FAKE SERVICES
# ═══════════════════════════════════════════════════════════


class FixtureMealDBService:
    """Serves ``meals.json`` for any category and ``<id>.json`` per meal.

    Unknown ids resolve to None.
    """

    def __init__(self) -> None:
        self.meal_calls: list[str] = []

    async def get_category(self, name: str) -> list[MealSummary]:
        return MealDBMapper.parse_envelope(load_fixture("meals"), MealDBMapper.parse_summary)

    async def get_meal(self, meal_id: str) -> Optional[Meal]:
        self.meal_calls.append(meal_id)
        if not (FIXTURES_DIR / f"{meal_id}.json").exists():
            return None
        meals = MealDBMapper.parse_envelope(load_fixture(meal_id), MealDBMapper.parse_meal)
        return meals[0] if meals else None


class FailingMealDBService:
    """Every call fails with a transport error."""

    async def get_category(self, name: str) -> list[MealSummary]:
        raise TransportError("TheMealDB API error: 404", status=404)

    async def get_meal(self, meal_id: str) -> Optional[Meal]:
        raise TransportError("TheMealDB API error: 404", status=404)


class EmptyMealDBService:
    """Every category is empty and every id unknown."""

    async def get_category(self, name: str) -> list[MealSummary]:
        return []

    async def get_meal(self, meal_id: str) -> Optional[Meal]:
        return None


@pytest.fixture
def fixture_service() -> FixtureMealDBService:
    return FixtureMealDBService()


@pytest.fixture
def failing_service() -> FailingMealDBService:
    return FailingMealDBService()


@pytest.fixture
def empty_service() -> EmptyMealDBService:
    return EmptyMealDBService()


@pytest.fixture
def mock_client() -> AsyncMock:
    """Mock TheMealDB client.

    Default behavior: empty category, unknown meal.
    Override in tests with specific return values.
    """
    client = AsyncMock(spec=MealDBClient)
    client.get_category.return_value = []
    client.get_meal.return_value = None
    return client


# ═══════════════════════════════════════════════════════════
# RAW PAYLOAD FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def raw_meal_factory() -> Callable[..., dict[str, Any]]:
    """Build a raw meal object with all 40 ingredient slots blank.

    Keyword arguments override or add wire fields.

    Example usage:
        def test_something(raw_meal_factory):
            raw = raw_meal_factory(strIngredient1="Eggs", strMeasure1="2")
    """

    def build(**overrides: Any) -> dict[str, Any]:
        raw: dict[str, Any] = {
            "idMeal": "52772",
            "strMeal": "Teriyaki Chicken Casserole",
            "strMealThumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
            "strCategory": "Chicken",
            "strArea": "Japanese",
            "strInstructions": "Preheat oven to 350° F.\r\nCombine soy sauce and water.",
            "strTags": "Meat,Casserole",
            "strYoutube": "https://www.youtube.com/watch?v=4aZr5hZXP_s",
            "strSource": None,
        }
        for i in range(1, 21):
            raw[f"strIngredient{i}"] = ""
            raw[f"strMeasure{i}"] = ""
        raw.update(overrides)
        return raw

    return build


@pytest.fixture
def bakewell_payload() -> dict[str, Any]:
    """Lookup response for Bakewell tart (id 52767)."""
    return load_fixture("52767")


@pytest.fixture
def category_payload() -> dict[str, Any]:
    """Dessert listing, in server order (unsorted)."""
    return load_fixture("meals")


@pytest.fixture
def sample_summaries() -> list[MealSummary]:
    return [
        MealSummary(id="2", name="Banana Bread"),
        MealSummary(id="1", name="Apple Pie"),
    ]


# ═══════════════════════════════════════════════════════════
# SETTINGS ISOLATION
# ═══════════════════════════════════════════════════════════


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings and MEALDB_* overrides around each test."""
    for var in ("MEALDB_BASE_URL", "MEALDB_USER_AGENT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
