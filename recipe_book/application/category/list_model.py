"""
Category list model.

Fetches the meals of one category, keeps them sorted by name and
filters them client-side against a search query.
"""

from __future__ import annotations

from typing import Callable, Iterable

import structlog

from recipe_book.application.shared.state_container import (
    StateContainer,
    StateListener,
)
from recipe_book.domain.meal.models import MealSummary
from recipe_book.domain.meal.ports import MealDBService
from recipe_book.domain.shared.errors import DomainError
from recipe_book.domain.shared.fetch_state import FetchState

logger = structlog.get_logger(__name__)

MIN_QUERY_LENGTH = 2

CategoryState = FetchState[tuple[MealSummary, ...]]


def sort_meals(meals: Iterable[MealSummary]) -> tuple[MealSummary, ...]:
    """Sort by name, ascending, case-insensitive first."""
    return tuple(sorted(meals, key=lambda meal: (meal.name.casefold(), meal.name)))


def display_state_for(state: CategoryState, query: str) -> CategoryState:
    """Derive what the list should show.

    Filtering applies only to a loaded list and only once the trimmed
    query has at least ``MIN_QUERY_LENGTH`` characters. A filter that
    matches nothing still yields a LOADED state with an empty tuple;
    EMPTY is reserved for a category the server returned no meals for.

    Example:
        >>> meals = (MealSummary(id="1", name="Apple Pie"),)
        >>> shown = display_state_for(FetchState.loaded(meals), "xyz")
        >>> assert shown.is_loaded and shown.value == ()
    """
    if not state.is_loaded or state.value is None:
        return state

    needle = query.strip().lower()
    if len(needle) < MIN_QUERY_LENGTH:
        return state

    return FetchState.loaded(tuple(meal for meal in state.value if needle in meal.name.lower()))


class CategoryListModel:
    """State model behind a category screen.

    Flow:
    1. Starts LOADING
    2. ``fetch_meals`` resolves to LOADED (sorted), EMPTY or FAILED
    3. ``display_state`` applies the current ``query``

    Example:
        >>> async def test(service):
        ...     model = CategoryListModel("Dessert", service)
        ...     await model.fetch_meals()
        ...     model.query = "pie"
        ...     return model.display_state
    """

    def __init__(self, category_name: str, service: MealDBService) -> None:
        """Initialize model.

        Args:
            category_name: Category to list, eg "Dessert"
            service: Meal lookup service
        """
        self.category_name = category_name
        self.query = ""
        self._service = service
        self._container: StateContainer[CategoryState] = StateContainer(FetchState.loading())
        self._generation = 0

    @property
    def state(self) -> CategoryState:
        """Raw fetch state, unfiltered."""
        return self._container.snapshot

    @property
    def display_state(self) -> CategoryState:
        """Fetch state with the search query applied."""
        return display_state_for(self.state, self.query)

    def subscribe(self, listener: StateListener[CategoryState]) -> Callable[[], None]:
        """Be notified of every fetch state change."""
        return self._container.subscribe(listener)

    async def fetch_meals(self) -> None:
        """Fetch the category and publish the resolved state.

        If another fetch starts before this one completes, this one's
        result is discarded.
        """
        self._generation += 1
        generation = self._generation
        self._container.update(FetchState.loading())

        result: CategoryState
        try:
            meals = await self._service.get_category(self.category_name)
        except DomainError as e:
            logger.warning(
                "Category fetch failed",
                category=self.category_name,
                error=str(e),
            )
            result = FetchState.failed(str(e))
        else:
            ordered = sort_meals(meals)
            result = FetchState.loaded(ordered) if ordered else FetchState.empty()

        if generation != self._generation:
            logger.debug(
                "Discarding stale category result",
                category=self.category_name,
                generation=generation,
            )
            return

        logger.debug(
            "Category state resolved",
            category=self.category_name,
            status=result.status.value,
        )
        self._container.update(result)

    async def retry(self) -> None:
        """Fetch again; the search query is kept."""
        await self.fetch_meals()
