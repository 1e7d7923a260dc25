"""Abstract interface between an Axis and the plotting toolkit that draws it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from plotnav.core.geometry import Rect

if TYPE_CHECKING:
    from plotnav.axis import Axis

__all__ = ["AxisBackend"]


class AxisBackend(ABC):
    """Scene, camera and input-state services an Axis needs from its host.

    Pixel coordinates are relative to the bottom-left corner of the axis'
    plotting area.
    """

    def __init__(self) -> None:
        self.axis: Axis | None = None

    def attach(self, axis: Axis) -> None:
        """Bind this backend to ``axis``; called by the Axis constructor."""

        self.axis = axis

    # ------------------------------------------------------------------ camera
    @abstractmethod
    def pixel_to_data(self, pixel: tuple[float, float]) -> tuple[float, float]:
        """Map an axis-relative pixel position to data coordinates."""

    @abstractmethod
    def pixel_to_fraction(self, pixel: tuple[float, float]) -> tuple[float, float]:
        """Map an axis-relative pixel position to [0, 1] x [0, 1] screen fractions."""

    @abstractmethod
    def mouse_pixel(self) -> tuple[float, float]:
        """Current pointer position in axis-relative pixels."""

    # ------------------------------------------------------------------ input state
    @abstractmethod
    def is_pressed(self, key: Any) -> bool:
        """Return whether a single key or mouse button is currently held."""

    # ------------------------------------------------------------------ scene
    @abstractmethod
    def add_drawable(self, kind: str, data: Any, **style: Any) -> Any:
        """Add an overlay drawable and return its handle.

        ``kind`` is ``"mesh"`` (data = ``(vertices, faces)``) or ``"wireframe"``
        (data = closed polyline vertices).
        """

    @abstractmethod
    def update_drawable(self, handle: Any, data: Any) -> None:
        """Replace the geometry of a drawable created by :meth:`add_drawable`."""

    @abstractmethod
    def remove_drawable(self, handle: Any) -> None:
        """Remove a drawable from the scene."""

    @abstractmethod
    def set_draw_order(self, handle: Any, z: float) -> None:
        """Place a drawable at depth ``z`` (higher draws on top)."""

    # ------------------------------------------------------------------ layout
    @abstractmethod
    def tick_label_space(self) -> tuple[float, float]:
        """Space currently taken by the (x, y) tick labels, in pixels."""

    @abstractmethod
    def set_tick_label_space(self, x: Any, y: Any) -> None:
        """Reserve fixed tick-label space, or ``"auto"`` for natural sizing."""

    # ------------------------------------------------------------------ data / view
    @abstractmethod
    def data_bounds(self) -> Rect | None:
        """Bounding box of the plotted data, or None when nothing is plotted."""

    @abstractmethod
    def apply_limits(self, limits: Rect) -> None:
        """Show ``limits`` (honouring the axis' reversal flags)."""
