"""
Fetch state value object.

Shared by the category list and meal detail models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FetchStatus(str, Enum):
    """Lifecycle phase of a fetch."""

    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"  # Loaded, zero results
    FAILED = "failed"


@dataclass(frozen=True)
class FetchState(Generic[T]):
    """Immutable snapshot of a model's fetch.

    Build instances through the constructors below, not directly.

    Example:
        >>> state = FetchState.loaded(["Apple Pie"])
        >>> assert state.is_loaded
        >>> assert state.value == ["Apple Pie"]
        >>> assert FetchState.failed("offline").message == "offline"
    """

    status: FetchStatus
    value: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def loading(cls) -> FetchState[T]:
        return cls(status=FetchStatus.LOADING)

    @classmethod
    def loaded(cls, value: T) -> FetchState[T]:
        return cls(status=FetchStatus.LOADED, value=value)

    @classmethod
    def empty(cls) -> FetchState[T]:
        return cls(status=FetchStatus.EMPTY)

    @classmethod
    def failed(cls, message: str) -> FetchState[T]:
        return cls(status=FetchStatus.FAILED, message=message)

    @property
    def is_loading(self) -> bool:
        return self.status is FetchStatus.LOADING

    @property
    def is_loaded(self) -> bool:
        return self.status is FetchStatus.LOADED

    @property
    def is_empty(self) -> bool:
        return self.status is FetchStatus.EMPTY

    @property
    def is_failed(self) -> bool:
        return self.status is FetchStatus.FAILED
