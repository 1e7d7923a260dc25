"""Backend-agnostic input events consumed by interaction handlers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

__all__ = [
    "Key",
    "KeyBinding",
    "KeysEvent",
    "MouseButton",
    "MouseEvent",
    "MouseEventType",
    "ScrollEvent",
]


class Key(str, Enum):
    """Keyboard keys the default bindings refer to."""

    x = "x"
    y = "y"
    z = "z"
    a = "a"
    r = "r"
    left_control = "left_control"
    right_control = "right_control"
    left_shift = "left_shift"
    right_shift = "right_shift"
    left_alt = "left_alt"
    right_alt = "right_alt"
    left_super = "left_super"
    right_super = "right_super"
    space = "space"
    escape = "escape"


class MouseButton(str, Enum):
    left = "left"
    right = "right"
    middle = "middle"


# A binding is a single key/button, a tuple that must all be held, or None (never pressed).
KeyBinding = Union[Key, MouseButton, tuple, None]


class MouseEventType(str, Enum):
    """High-level mouse gesture kinds produced by the backends' mouse state machine."""

    leftclick = "leftclick"
    rightclick = "rightclick"
    middleclick = "middleclick"
    leftdoubleclick = "leftdoubleclick"
    rightdoubleclick = "rightdoubleclick"
    middledoubleclick = "middledoubleclick"
    leftdragstart = "leftdragstart"
    leftdrag = "leftdrag"
    leftdragstop = "leftdragstop"
    rightdragstart = "rightdragstart"
    rightdrag = "rightdrag"
    rightdragstop = "rightdragstop"
    middledragstart = "middledragstart"
    middledrag = "middledrag"
    middledragstop = "middledragstop"
    leftdown = "leftdown"
    rightdown = "rightdown"
    middledown = "middledown"
    leftup = "leftup"
    rightup = "rightup"
    middleup = "middleup"
    over = "over"
    enter = "enter"
    out = "out"

    @classmethod
    def for_button(cls, button: MouseButton, suffix: str) -> MouseEventType:
        """Return e.g. ``rightdragstart`` for ``(MouseButton.right, "dragstart")``."""

        return cls(f"{button.value}{suffix}")


@dataclass(frozen=True)
class MouseEvent:
    """Mouse gesture with data-space and pixel-space positions.

    ``prev_position``/``prev_pixel`` hold the previous pointer location; for a
    ``*dragstart`` they hold the location where the button was pressed.
    """

    type: MouseEventType
    position: tuple[float, float]
    prev_position: tuple[float, float]
    pixel: tuple[float, float]
    prev_pixel: tuple[float, float]


@dataclass(frozen=True)
class ScrollEvent:
    """Wheel scroll; ``y`` is positive when scrolling up/away from the user."""

    x: float
    y: float


@dataclass(frozen=True)
class KeysEvent:
    """Snapshot of the keys held after a key press or release."""

    keys: frozenset = field(default_factory=frozenset)

    @classmethod
    def of(cls, keys: Iterable[Key]) -> KeysEvent:
        return cls(frozenset(keys))

    def __contains__(self, key: object) -> bool:
        return key in self.keys
