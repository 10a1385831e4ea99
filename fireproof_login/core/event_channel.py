"""Single-Slot Channel: hot, replay-less holder for the latest notification.

Invariants:
    - Holds at most one value; publish() overwrites it (last value wins)
    - Observers are called synchronously, in subscription order, on publish
    - A late observer receives the current value once on subscribe, never a backlog
    - version increments on every publish, so callers can tell whether
      anything was published across an await
"""

from typing import Callable, Generic, TypeVar

T = TypeVar("T")



class SingleSlotChannel(Generic[T]):
    """Publish/subscribe value holder with capacity one."""

    def __init__(self) -> None:
        self._value: T | None = None
        self._version = 0
        self._observers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def version(self) -> int:
        return self._version

    def publish(self, value: T) -> None:
        self._value = value
        self._version += 1
        for observer in list(self._observers):
            observer(value)

    def observe(self, observer: Callable[[T], None]) -> Callable[[], None]:
        """Attach observer; returns a callable that detaches it."""
        self._observers.append(observer)
        if self._version:
            observer(self._value)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def published_since(self, version: int) -> T | None:
        """Latest value if anything was published after `version`, else None."""
        if self._version > version:
            return self._value
        return None
