"""Minimal reactive value cells used for axis state and overlay geometry."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

__all__ = ["Observable", "lift", "release_lift"]

T = TypeVar("T")
Listener = Callable[[Any], None]


class Observable(Generic[T]):
    """Value holder that notifies listeners whenever a new value is assigned."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._listeners: list[Listener] = []

    def __repr__(self) -> str:
        return f"Observable({self._value!r})"

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._value = new_value
        # copy so listeners can unsubscribe while being notified
        for listener in list(self._listeners):
            listener(new_value)

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def clear_listeners(self) -> None:
        """Drop every listener, severing all live links to this cell."""

        self._listeners.clear()


def lift(fn: Callable[..., T], *sources: Observable) -> Observable[T]:
    """Return a cell holding ``fn(*values)``, recomputed when any source changes."""

    derived: Observable[T] = Observable(fn(*(src.value for src in sources)))

    def _update(_value: Any) -> None:
        derived.value = fn(*(src.value for src in sources))

    for src in sources:
        src.subscribe(_update)
    derived._lift_links = [(src, _update) for src in sources]  # type: ignore[attr-defined]
    return derived


def release_lift(derived: Observable) -> None:
    """Detach a cell created by :func:`lift` from its sources."""

    for src, listener in getattr(derived, "_lift_links", ()):
        src.unsubscribe(listener)
    derived._lift_links = []  # type: ignore[attr-defined]
    derived.clear_listeners()
