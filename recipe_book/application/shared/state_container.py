"""
Observable state container.

Holds an immutable snapshot and notifies subscribers on every update.
UI layers subscribe with a callback or poll ``snapshot``.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

S = TypeVar("S")

StateListener = Callable[[S], None]


class StateContainer(Generic[S]):
    """Snapshot plus update method plus listeners.

    Example:
        >>> container = StateContainer(0)
        >>> seen = []
        >>> unsubscribe = container.subscribe(seen.append)
        >>> container.update(1)
        >>> unsubscribe()
        >>> container.update(2)
        >>> assert seen == [1]
        >>> assert container.snapshot == 2
    """

    def __init__(self, initial: S) -> None:
        self._snapshot = initial
        self._listeners: list[StateListener[S]] = []

    @property
    def snapshot(self) -> S:
        return self._snapshot

    def update(self, state: S) -> None:
        """Replace the snapshot and notify listeners in subscription order."""
        self._snapshot = state
        for listener in list(self._listeners):
            listener(state)

    def subscribe(self, listener: StateListener[S]) -> Callable[[], None]:
        """Register a listener.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
