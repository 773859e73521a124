"""Observable value holders.

A ``LiveData`` keeps the latest value it was given and pushes every new value
to its observers. Derived values are built with ``map`` and are re-evaluated
on each emission of their source, so observers of a derived value never need
to re-subscribe.

Usage:
    records = MutableLiveData[list[int]]()
    doubled = records.map(lambda items: [i * 2 for i in items])
    unsubscribe = doubled.observe(print)
    records.post([1, 2])  # prints [2, 4]
    unsubscribe()
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class LiveData(Generic[T]):
    """Read-only view of a value that changes over time."""

    def __init__(self) -> None:
        self._value: T | None = None
        self._has_value = False
        self._observers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T | None:
        """Latest value, or None before the first emission."""
        return self._value

    @property
    def has_value(self) -> bool:
        """Whether a value has been emitted yet."""
        return self._has_value

    def observe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register an observer.

        The callback receives the current value immediately (if there is one)
        and then every later value.

        Args:
            callback: Callable that accepts the new value

        Returns:
            Function that removes the observer when called
        """
        self._observers.append(callback)
        self._on_observer_added(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)
                self._on_observer_removed()

        return unsubscribe

    @property
    def observer_count(self) -> int:
        """Number of registered observers."""
        return len(self._observers)

    def map(self, fn: Callable[[T], U]) -> "LiveData[U]":
        """Derive a LiveData whose value is ``fn`` applied to this one's.

        Args:
            fn: Pure mapping function

        Returns:
            Derived LiveData, updated on every emission of this one while
            it has observers
        """
        return _MappedLiveData(self, fn)

    async def updates(self) -> AsyncIterator[T]:
        """Iterate over the current value and every later value.

        Yields:
            Each emitted value, in emission order
        """
        queue: asyncio.Queue[T] = asyncio.Queue()
        unsubscribe = self.observe(queue.put_nowait)
        try:
            while True:
                yield await queue.get()
        finally:
            unsubscribe()

    def _on_observer_added(self, callback: Callable[[T], None]) -> None:
        if self._has_value:
            self._notify(callback, self._value)  # type: ignore[arg-type]

    def _on_observer_removed(self) -> None:
        pass

    def _set_value(self, value: T) -> None:
        self._value = value
        self._has_value = True

        # Copy so observers may unsubscribe while being notified
        for callback in list(self._observers):
            self._notify(callback, value)

    @staticmethod
    def _notify(callback: Callable[[T], None], value: T) -> None:
        try:
            callback(value)
        except Exception as e:
            # A broken observer must not stop delivery to the others
            logger.error(
                "Error in observer %s: %s",
                getattr(callback, "__name__", repr(callback)),
                e,
                exc_info=True,
            )


class MutableLiveData(LiveData[T]):
    """LiveData that its owner can publish new values to."""

    def __init__(self, value: T | None = None) -> None:
        super().__init__()
        if value is not None:
            self._value = value
            self._has_value = True

    def post(self, value: T) -> None:
        """Publish a new value to all observers.

        Args:
            value: The new value
        """
        self._set_value(value)


class _MappedLiveData(LiveData[U]):
    """LiveData derived from another through a mapping function.

    It only observes its source while it has observers of its own, so a
    derived value that nobody watches does not keep a subscription alive.
    Without observers, ``value`` is computed from the source on access.
    """

    def __init__(self, source: LiveData[T], fn: Callable[[T], U]) -> None:
        super().__init__()
        self._source = source
        self._fn = fn
        self._source_unsubscribe: Callable[[], None] | None = None

    @property
    def value(self) -> U | None:
        if self._source_unsubscribe is not None:
            return self._value
        if not self._source.has_value:
            return None
        return self._fn(self._source.value)  # type: ignore[arg-type]

    @property
    def has_value(self) -> bool:
        if self._source_unsubscribe is not None:
            return self._has_value
        return self._source.has_value

    def _on_observer_added(self, callback: Callable[[U], None]) -> None:
        if self._source_unsubscribe is None:
            # Subscribing replays the source's current value to every observer
            self._source_unsubscribe = self._source.observe(self._on_source_value)
        else:
            super()._on_observer_added(callback)

    def _on_observer_removed(self) -> None:
        if not self._observers and self._source_unsubscribe is not None:
            self._source_unsubscribe()
            self._source_unsubscribe = None
            self._value = None
            self._has_value = False

    def _on_source_value(self, value: T) -> None:
        self._set_value(self._fn(value))
