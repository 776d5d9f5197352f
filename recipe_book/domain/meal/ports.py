"""
Ports (Interfaces) for meal lookups.

The application models depend on this protocol, not on the HTTP
client, so they can run against in-memory services in tests.

Design Pattern: Ports & Adapters (Hexagonal Architecture)
"""

from typing import Optional, Protocol, runtime_checkable

from recipe_book.domain.meal.models import Meal, MealSummary


@runtime_checkable
class MealDBService(Protocol):
    """
    Port for TheMealDB lookups.

    Implemented by ``MealDBClient``.
    """

    async def get_category(self, name: str) -> list[MealSummary]:
        """
        List the meals of a category, in response order.

        Raises:
            TransportError: Network failure or non-2xx status
            DecodeError: Malformed response
        """
        ...

    async def get_meal(self, meal_id: str) -> Optional[Meal]:
        """
        Look up a meal by id.

        Returns:
            The meal, or None if the id is unknown

        Raises:
            TransportError: Network failure or non-2xx status
            DecodeError: Malformed response
        """
        ...
