"""Observable single-value holder.

``StateFlow`` keeps one current value and notifies subscribers on every write
that changes it. Owners keep the mutable ``StateFlow`` private and hand out
``as_read_only()`` to readers.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ReadOnlyStateFlow(Generic[T]):
    """Read side of a ``StateFlow``: current value plus subscription."""

    def __init__(self, source: StateFlow[T]) -> None:
        self._source = source

    @property
    def value(self) -> T:
        return self._source.value

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        return self._source.subscribe(callback)


class StateFlow(Generic[T]):
    """A mutable slot with notify-on-write semantics."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        # Held from a write through its notifications, so every subscriber
        # sees values in write order and the last one it sees is ``value``.
        # Reentrant so a callback may write or unsubscribe.
        self._lock = threading.RLock()
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new: T) -> None:
        with self._lock:
            # Equal values are conflated.
            if new == self._value:
                return
            self._value = new
            for callback in list(self._subscribers):
                # A callback wrote a newer value and already delivered it.
                if self._value is not new:
                    break
                self._notify(callback, new)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """
        Register ``callback`` and call it at once with the current value.

        Returns:
            A zero-argument function that removes the subscription.
        """
        with self._lock:
            self._subscribers.append(callback)
            self._notify(callback, self._value)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def as_read_only(self) -> ReadOnlyStateFlow[T]:
        return ReadOnlyStateFlow(self)

    @staticmethod
    def _notify(callback: Callable[[T], None], value: T) -> None:
        try:
            callback(value)
        except Exception:
            # Observer errors are logged, never raised into the writer.
            logger.exception("State subscriber %r raised", callback)
