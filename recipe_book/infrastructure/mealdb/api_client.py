"""
TheMealDB API client.

Handles HTTP requests to TheMealDB. One attempt per call: no retries,
no caching, default session timeout.
"""

import asyncio
from typing import Any, Optional
from urllib.parse import urlencode

import aiohttp
import structlog

from recipe_book.config import get_settings
from recipe_book.domain.meal.mealdb_mapper import MealDBMapper
from recipe_book.domain.meal.models import Meal, MealSummary
from recipe_book.domain.shared.errors import ExternalServiceError, TransportError

logger = structlog.get_logger(__name__)


class MealDBEndpoints:
    """Builds TheMealDB lookup URLs.

    Example:
        >>> endpoints = MealDBEndpoints("https://themealdb.com/api/json/v1/1/")
        >>> endpoints.category_url("Dessert")
        'https://themealdb.com/api/json/v1/1/filter.php?c=Dessert'
    """

    CATEGORY_PATH = "filter.php"
    MEAL_PATH = "lookup.php"

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"

    def category_url(self, name: str) -> str:
        return f"{self.base_url}{self.CATEGORY_PATH}?{urlencode({'c': name})}"

    def meal_url(self, meal_id: str) -> str:
        return f"{self.base_url}{self.MEAL_PATH}?{urlencode({'i': meal_id})}"


class MealDBClient:
    """TheMealDB API client."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        """Initialize API client.

        Args:
            base_url: API base URL (default from settings)
            user_agent: User-Agent header (default from settings)
        """
        settings = get_settings()
        self.endpoints = MealDBEndpoints(base_url or settings.mealdb_base_url)
        self.user_agent = user_agent or settings.user_agent
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "MealDBClient":
        """Async context manager entry."""
        self._session = aiohttp.ClientSession(headers={"User-Agent": self.user_agent})
        return self

    async def __aexit__(self, *args: object) -> None:
        """Async context manager exit."""
        if self._session:
            await self._session.close()
            self._session = None

    async def _get_json(self, url: str) -> Any:
        """GET a URL and decode the JSON body.

        Raises:
            ExternalServiceError: Called outside ``async with``
            TransportError: Network failure or non-2xx status
            DecodeError: Body is not JSON
        """
        if not self._session:
            raise ExternalServiceError("Client not initialized, use async with")

        logger.debug("TheMealDB request", url=url)
        try:
            async with self._session.get(url) as response:
                if not 200 <= response.status < 300:
                    logger.warning("TheMealDB error status", url=url, status=response.status)
                    raise TransportError(
                        f"TheMealDB API error: {response.status}",
                        status=response.status,
                    )
                body = await response.read()
        except asyncio.TimeoutError as e:
            logger.warning("TheMealDB timeout", url=url)
            raise TransportError("TheMealDB API timeout") from e
        except aiohttp.ClientError as e:
            logger.warning("TheMealDB client error", url=url, error=str(e))
            raise TransportError(f"TheMealDB API client error: {e}") from e

        return MealDBMapper.decode_json(body)

    async def fetch_by_category(self, name: str) -> list[MealSummary]:
        """List the meals in a category.

        Args:
            name: Category name, eg "Dessert"

        Returns:
            Meal summaries in response order (empty if none)

        Raises:
            TransportError: Network failure or non-2xx status
            DecodeError: Malformed response

        Example:
            >>> async def test():
            ...     async with MealDBClient() as client:
            ...         return await client.fetch_by_category("Dessert")
        """
        data = await self._get_json(self.endpoints.category_url(name))
        meals = MealDBMapper.parse_envelope(data, MealDBMapper.parse_summary)

        logger.info("Category fetched", category=name, count=len(meals))
        return meals

    async def fetch_by_id(self, meal_id: str) -> Optional[Meal]:
        """Look up one meal.

        Args:
            meal_id: TheMealDB meal id

        Returns:
            The first meal of the response, or None if not found

        Raises:
            TransportError: Network failure or non-2xx status
            DecodeError: Malformed response or invalid meal
        """
        data = await self._get_json(self.endpoints.meal_url(meal_id))
        meals = MealDBMapper.parse_envelope(data, MealDBMapper.parse_meal)

        if not meals:
            logger.info("Meal not found in TheMealDB", meal_id=meal_id)
            return None

        if len(meals) > 1:
            logger.debug("Lookup returned several meals", meal_id=meal_id, count=len(meals))

        return meals[0]

    async def get_category(self, name: str) -> list[MealSummary]:
        return await self.fetch_by_category(name)

    async def get_meal(self, meal_id: str) -> Optional[Meal]:
        return await self.fetch_by_id(meal_id)
