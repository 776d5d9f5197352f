"""
Category decode audit.

Fetches a category, then looks up and decodes every meal in it
concurrently. Used to check that a whole category decodes cleanly.
"""

import asyncio
import time
from typing import Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from recipe_book.domain.meal.models import Meal, MealSummary
from recipe_book.domain.meal.ports import MealDBService
from recipe_book.domain.shared.errors import DomainError

logger = structlog.get_logger(__name__)


class MealAuditResult(BaseModel):
    """Outcome of one meal lookup."""

    model_config = ConfigDict(frozen=True)

    summary: MealSummary
    meal: Optional[Meal] = None
    error: Optional[str] = Field(None, description="Failure message, None on success")

    @property
    def ok(self) -> bool:
        return self.error is None and self.meal is not None


class CategoryAuditReport(BaseModel):
    """Outcome of a category audit."""

    model_config = ConfigDict(frozen=True)

    category: str
    results: list[MealAuditResult] = Field(default_factory=list)

    @property
    def failures(self) -> list[MealAuditResult]:
        return [result for result in self.results if not result.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


class CategoryDecodeAudit:
    """Runs one independent lookup per meal of a category.

    Example:
        >>> async def test():
        ...     async with MealDBClient() as client:
        ...         report = await CategoryDecodeAudit(client).run("Dessert")
        ...         assert report.ok, report.failures
    """

    def __init__(self, service: MealDBService) -> None:
        self.service = service

    async def _check(self, summary: MealSummary) -> MealAuditResult:
        try:
            meal = await self.service.get_meal(summary.id)
        except DomainError as e:
            return MealAuditResult(summary=summary, error=f"{type(e).__name__}: {e}")

        if meal is None:
            return MealAuditResult(summary=summary, error="Meal not found")

        return MealAuditResult(summary=summary, meal=meal)

    async def run(self, category: str) -> CategoryAuditReport:
        """Audit every meal of a category.

        Args:
            category: Category name

        Returns:
            One result per listed meal, in listing order

        Raises:
            TransportError: If the category listing itself fails
            DecodeError: If the category listing is malformed
        """
        start_time = time.time()
        summaries = await self.service.get_category(category)

        results = await asyncio.gather(*(self._check(summary) for summary in summaries))
        report = CategoryAuditReport(category=category, results=list(results))

        logger.info(
            "Category audit complete",
            category=category,
            meals=len(report.results),
            failures=len(report.failures),
            time_ms=round((time.time() - start_time) * 1000, 2),
        )
        return report
