"""In-memory backend with a linear camera, used for scripting and tests."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from plotnav.backends.abstract_backend import AxisBackend
from plotnav.backends.mouse_state import KeyTracker, MouseStateMachine
from plotnav.core.geometry import Rect
from plotnav.interactions.events import Key, MouseButton, ScrollEvent

__all__ = ["Drawable", "HeadlessBackend"]


@dataclass
class Drawable:
    kind: str
    data: Any
    style: dict[str, Any] = field(default_factory=dict)
    z: float = 0.0


class HeadlessBackend(AxisBackend):
    """Backend that keeps the scene in a dict and maps pixels linearly.

    The plotting area is ``size`` pixels wide/high with its origin at the
    bottom-left corner. Input can be fed through :meth:`press`, :meth:`move`,
    :meth:`release`, :meth:`scroll` and :meth:`key_down`/:meth:`key_up`.
    """

    def __init__(
        self,
        size: tuple[float, float] = (400.0, 300.0),
        tick_space: tuple[float, float] = (20.0, 40.0),
    ) -> None:
        super().__init__()
        self.size = (float(size[0]), float(size[1]))
        self.natural_tick_space = tick_space
        self.reserved_tick_space: tuple[Any, Any] = ("auto", "auto")
        self.drawables: dict[int, Drawable] = {}
        self.shown_limits: Rect | None = None
        self.bounds: Rect | None = None
        self._ids = itertools.count(1)
        self._mouse: tuple[float, float] = (0.0, 0.0)
        self.mouse = MouseStateMachine(self._dispatch, self.pixel_to_data)
        self.keys = KeyTracker(self._dispatch)

    # ------------------------------------------------------------------ input pump
    def _dispatch(self, event: Any) -> None:
        if self.axis is not None:
            self.axis.dispatch(event)

    def set_mouse_pixel(self, pixel: tuple[float, float]) -> None:
        self._mouse = (float(pixel[0]), float(pixel[1]))

    def press(self, button: MouseButton, pixel: tuple[float, float]) -> None:
        self.set_mouse_pixel(pixel)
        self.mouse.press(button, self._mouse)

    def move(self, pixel: tuple[float, float]) -> None:
        self.set_mouse_pixel(pixel)
        self.mouse.move(self._mouse)

    def release(self, button: MouseButton, pixel: tuple[float, float]) -> None:
        self.set_mouse_pixel(pixel)
        self.mouse.release(button, self._mouse)

    def scroll(self, dy: float, pixel: tuple[float, float] | None = None, dx: float = 0.0) -> None:
        if pixel is not None:
            self.set_mouse_pixel(pixel)
        self._dispatch(ScrollEvent(dx, dy))

    def key_down(self, key: Key) -> None:
        self.keys.press(key)

    def key_up(self, key: Key) -> None:
        self.keys.release(key)

    def data_to_pixel(self, point: tuple[float, float]) -> tuple[float, float]:
        lims = self._limits()
        fx = (point[0] - lims.origin[0]) / lims.widths[0]
        fy = (point[1] - lims.origin[1]) / lims.widths[1]
        if self._reversed(0):
            fx = 1.0 - fx
        if self._reversed(1):
            fy = 1.0 - fy
        return fx * self.size[0], fy * self.size[1]

    # ------------------------------------------------------------------ camera
    def pixel_to_fraction(self, pixel: tuple[float, float]) -> tuple[float, float]:
        return pixel[0] / self.size[0], pixel[1] / self.size[1]

    def pixel_to_data(self, pixel: tuple[float, float]) -> tuple[float, float]:
        fx, fy = self.pixel_to_fraction(pixel)
        if self._reversed(0):
            fx = 1.0 - fx
        if self._reversed(1):
            fy = 1.0 - fy
        lims = self._limits()
        return (
            lims.origin[0] + fx * lims.widths[0],
            lims.origin[1] + fy * lims.widths[1],
        )

    def mouse_pixel(self) -> tuple[float, float]:
        return self._mouse

    def is_pressed(self, key: Any) -> bool:
        if isinstance(key, MouseButton):
            return self.mouse.pressed is key
        return self.keys.is_pressed(key)

    # ------------------------------------------------------------------ scene
    def add_drawable(self, kind: str, data: Any, **style: Any) -> int:
        handle = next(self._ids)
        self.drawables[handle] = Drawable(kind, _copy(data), dict(style))
        return handle

    def update_drawable(self, handle: int, data: Any) -> None:
        self.drawables[handle].data = _copy(data)

    def remove_drawable(self, handle: int) -> None:
        del self.drawables[handle]

    def set_draw_order(self, handle: int, z: float) -> None:
        self.drawables[handle].z = float(z)

    # ------------------------------------------------------------------ layout / data
    def tick_label_space(self) -> tuple[float, float]:
        return self.natural_tick_space

    def set_tick_label_space(self, x: Any, y: Any) -> None:
        self.reserved_tick_space = (x, y)

    def data_bounds(self) -> Rect | None:
        return self.bounds

    def apply_limits(self, limits: Rect) -> None:
        self.shown_limits = limits

    # ------------------------------------------------------------------ helpers
    def _limits(self) -> Rect:
        if self.axis is not None:
            return self.axis.limits.value
        return self.shown_limits or Rect((0.0, 0.0), (1.0, 1.0))

    def _reversed(self, dim: int) -> bool:
        if self.axis is None:
            return False
        flag = self.axis.xreversed if dim == 0 else self.axis.yreversed
        return bool(flag.value)


def _copy(data: Any) -> Any:
    if isinstance(data, np.ndarray):
        return data.copy()
    if isinstance(data, tuple):
        return tuple(_copy(item) for item in data)
    return data
