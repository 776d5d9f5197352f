"""
Meal detail model.

Fetches one meal and derives display-only fields from it.
"""

from __future__ import annotations

from typing import Callable, Optional

import structlog

from recipe_book.application.shared.state_container import (
    StateContainer,
    StateListener,
)
from recipe_book.domain.meal.models import Meal, MealSummary
from recipe_book.domain.meal.ports import MealDBService
from recipe_book.domain.meal.regions import flag_for_area
from recipe_book.domain.shared.errors import DomainError
from recipe_book.domain.shared.fetch_state import FetchState

logger = structlog.get_logger(__name__)

MealState = FetchState[Meal]


def format_instructions(instructions: str) -> str:
    """Drop empty lines and separate the rest with one blank line.

    Lines holding only spaces are kept.

    Example:
        >>> format_instructions("Step 1.\\n\\nStep 2.\\n")
        'Step 1.\\n\\nStep 2.'
    """
    return "\n\n".join(line for line in instructions.splitlines() if line)


class MealDetailModel:
    """State model behind a meal detail screen."""

    def __init__(self, summary: MealSummary, service: MealDBService) -> None:
        """Initialize model.

        Args:
            summary: Meal picked from the category list
            service: Meal lookup service
        """
        self.summary = summary
        self._service = service
        self._container: StateContainer[MealState] = StateContainer(FetchState.loading())
        self._generation = 0

    @property
    def state(self) -> MealState:
        return self._container.snapshot

    @property
    def meal(self) -> Optional[Meal]:
        """Loaded meal, or None in any other state."""
        return self.state.value if self.state.is_loaded else None

    @property
    def formatted_instructions(self) -> Optional[str]:
        meal = self.meal
        return format_instructions(meal.instructions) if meal else None

    @property
    def region_flag(self) -> Optional[str]:
        meal = self.meal
        return flag_for_area(meal.area) if meal else None

    def subscribe(self, listener: StateListener[MealState]) -> Callable[[], None]:
        """Be notified of every fetch state change."""
        return self._container.subscribe(listener)

    async def fetch_meal(self) -> None:
        """Fetch the meal and publish the resolved state.

        An unknown id resolves to EMPTY. A result that arrives after a
        newer fetch started is discarded.
        """
        self._generation += 1
        generation = self._generation
        self._container.update(FetchState.loading())

        result: MealState
        try:
            meal = await self._service.get_meal(self.summary.id)
        except DomainError as e:
            logger.warning("Meal fetch failed", meal_id=self.summary.id, error=str(e))
            result = FetchState.failed(str(e))
        else:
            result = FetchState.loaded(meal) if meal is not None else FetchState.empty()

        if generation != self._generation:
            logger.debug("Discarding stale meal result", meal_id=self.summary.id)
            return

        self._container.update(result)

    async def retry(self) -> None:
        await self.fetch_meal()
