"""Matplotlib-backed axis backend that feeds canvas events into an Axis."""

from __future__ import annotations

import contextlib
import logging
from typing import Any

import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import PolyCollection
from matplotlib.lines import Line2D

from plotnav.backends.abstract_backend import AxisBackend
from plotnav.backends.mouse_state import KeyTracker, MouseStateMachine
from plotnav.core.geometry import Rect
from plotnav.interactions.events import Key, MouseButton, ScrollEvent

log = logging.getLogger(__name__)

__all__ = ["MplAxisBackend"]

_KEY_MAP = {
    "control": Key.left_control,
    "ctrl": Key.left_control,
    "shift": Key.left_shift,
    "alt": Key.left_alt,
    "option": Key.left_alt,
    "super": Key.left_super,
    "cmd": Key.left_super,
    " ": Key.space,
    "escape": Key.escape,
}


class MplAxisBackend(AxisBackend):
    """Adapter between a Matplotlib ``Axes`` and an :class:`~plotnav.axis.Axis`."""

    def __init__(self, axes: Axes) -> None:
        super().__init__()
        self._axes = axes
        self._mouse_px: tuple[float, float] = (0.0, 0.0)
        self._saved_layout_engine: Any = None
        self._layout_pinned = False
        self.mouse = MouseStateMachine(self._dispatch, self.pixel_to_data)
        self.keys = KeyTracker(self._dispatch)
        self._connection_ids: list[int] = []
        self._connect_events()

    @property
    def axes(self) -> Axes:
        return self._axes

    @property
    def canvas(self) -> Any:
        return self._axes.figure.canvas

    def disconnect(self) -> None:
        """Disconnect all canvas callbacks."""
        mpl_disconnect = getattr(self.canvas, "mpl_disconnect", None)
        if mpl_disconnect is None:
            return
        for cid in self._connection_ids:
            with contextlib.suppress(Exception):
                mpl_disconnect(cid)
        self._connection_ids.clear()

    # ------------------------------------------------------------------ event wiring
    def _connect_events(self) -> None:
        mpl_connect = getattr(self.canvas, "mpl_connect", None)
        if mpl_connect is None:
            return
        self._connection_ids.extend(
            [
                mpl_connect("button_press_event", self._handle_press),
                mpl_connect("button_release_event", self._handle_release),
                mpl_connect("motion_notify_event", self._handle_motion),
                mpl_connect("scroll_event", self._handle_scroll),
                mpl_connect("key_press_event", self._handle_key_press),
                mpl_connect("key_release_event", self._handle_key_release),
                mpl_connect("axes_enter_event", self._handle_enter),
                mpl_connect("axes_leave_event", self._handle_leave),
                mpl_connect("figure_leave_event", self._handle_figure_leave),
            ]
        )

    def _dispatch(self, event: Any) -> None:
        if self.axis is not None:
            self.axis.dispatch(event)

    def _handle_press(self, event: Any) -> None:
        if getattr(event, "inaxes", None) is not self._axes:
            return
        button = self._button(getattr(event, "button", None))
        if button is None:
            return
        self._mouse_px = self._event_pixel(event)
        self.mouse.press(button, self._mouse_px)

    def _handle_release(self, event: Any) -> None:
        button = self._button(getattr(event, "button", None))
        if button is None or self.mouse.pressed is not button:
            return
        self._mouse_px = self._event_pixel(event)
        self.mouse.release(button, self._mouse_px)

    def _handle_motion(self, event: Any) -> None:
        if self.mouse.pressed is None and getattr(event, "inaxes", None) is not self._axes:
            return
        self._mouse_px = self._event_pixel(event)
        self.mouse.move(self._mouse_px)

    def _handle_scroll(self, event: Any) -> None:
        if getattr(event, "inaxes", None) is not self._axes:
            return
        self._mouse_px = self._event_pixel(event)
        self._dispatch(ScrollEvent(0.0, self._scroll_delta(event)))

    def _handle_key_press(self, event: Any) -> None:
        for key in self._keys_from_event(event):
            self.keys.press(key)

    def _handle_key_release(self, event: Any) -> None:
        for key in self._keys_from_event(event):
            self.keys.release(key)

    def _handle_enter(self, event: Any) -> None:
        if getattr(event, "inaxes", None) is self._axes:
            self.mouse.enter(self._event_pixel(event))

    def _handle_leave(self, event: Any) -> None:
        if getattr(event, "inaxes", None) is self._axes:
            self.mouse.leave(self._event_pixel(event))

    def _handle_figure_leave(self, _event: Any) -> None:
        # key releases outside the canvas are never delivered
        self.keys.clear()

    # ------------------------------------------------------------------ helpers
    def _event_pixel(self, event: Any) -> tuple[float, float]:
        bbox = self._axes.bbox
        x = float(getattr(event, "x", float("nan")))
        y = float(getattr(event, "y", float("nan")))
        return x - bbox.x0, y - bbox.y0

    def _button(self, raw_button: Any) -> MouseButton | None:
        if raw_button == 1 or raw_button == "left":
            return MouseButton.left
        if raw_button == 2 or raw_button == "middle":
            return MouseButton.middle
        if raw_button == 3 or raw_button == "right":
            return MouseButton.right
        return None

    def _scroll_delta(self, event: Any) -> float:
        step = getattr(event, "step", None)
        if step is not None:
            return float(step)
        button = getattr(event, "button", None)
        if button == "up":
            return 1.0
        if button == "down":
            return -1.0
        return 0.0

    def _keys_from_event(self, event: Any) -> list[Key]:
        raw = getattr(event, "key", None)
        if not raw:
            return []
        # "ctrl+x" arrives as a single key event; the modifier has its own press
        segment = str(raw).lower().split("+")[-1]
        key = _KEY_MAP.get(segment)
        if key is None:
            try:
                key = Key(segment)
            except ValueError:
                return []
        return [key]

    # ------------------------------------------------------------------ camera
    def pixel_to_data(self, pixel: tuple[float, float]) -> tuple[float, float]:
        bbox = self._axes.bbox
        display = (pixel[0] + bbox.x0, pixel[1] + bbox.y0)
        x, y = self._axes.transData.inverted().transform(display)
        return float(x), float(y)

    def pixel_to_fraction(self, pixel: tuple[float, float]) -> tuple[float, float]:
        bbox = self._axes.bbox
        width = bbox.width or 1.0
        height = bbox.height or 1.0
        return pixel[0] / width, pixel[1] / height

    def mouse_pixel(self) -> tuple[float, float]:
        return self._mouse_px

    def is_pressed(self, key: Any) -> bool:
        if isinstance(key, MouseButton):
            return self.mouse.pressed is key
        return self.keys.is_pressed(key)

    # ------------------------------------------------------------------ scene
    def add_drawable(self, kind: str, data: Any, **style: Any) -> Any:
        color = style.get("color", (0.0, 0.0, 0.0, 0.5))
        if kind == "mesh":
            vertices, faces = data
            artist = PolyCollection(
                np.asarray(vertices)[np.asarray(faces)],
                facecolors=[color],
                edgecolors="none",
                antialiased=False,
            )
        elif kind == "wireframe":
            outline = np.asarray(data)
            artist = Line2D(
                outline[:, 0],
                outline[:, 1],
                color=color,
                linewidth=style.get("linewidth", 1.0),
            )
        else:
            raise ValueError(f"Unsupported drawable kind: {kind!r}")
        self._axes.add_artist(artist)
        self.canvas.draw_idle()
        return artist

    def update_drawable(self, handle: Any, data: Any) -> None:
        if isinstance(handle, PolyCollection):
            vertices, faces = data
            handle.set_verts(np.asarray(vertices)[np.asarray(faces)])
        else:
            outline = np.asarray(data)
            handle.set_data(outline[:, 0], outline[:, 1])
        self.canvas.draw_idle()

    def remove_drawable(self, handle: Any) -> None:
        with contextlib.suppress(ValueError, NotImplementedError):
            handle.remove()
        self.canvas.draw_idle()

    def set_draw_order(self, handle: Any, z: float) -> None:
        handle.set_zorder(z)

    # ------------------------------------------------------------------ layout
    def tick_label_space(self) -> tuple[float, float]:
        get_renderer = getattr(self.canvas, "get_renderer", None)
        renderer = get_renderer() if get_renderer is not None else None
        if renderer is None:
            return 0.0, 0.0
        x_space = _max_extent(self._axes.get_xticklabels(), renderer, "height")
        y_space = _max_extent(self._axes.get_yticklabels(), renderer, "width")
        return x_space, y_space

    def set_tick_label_space(self, x: Any, y: Any) -> None:
        """Pinning tick-label space suspends the figure's layout engine until both are auto."""

        figure = self._axes.figure
        pin = x != "auto" or y != "auto"
        if pin and not self._layout_pinned:
            self._saved_layout_engine = figure.get_layout_engine()
            figure.set_layout_engine("none")
            self._layout_pinned = True
            log.debug("Suspended layout engine %r", self._saved_layout_engine)
        elif not pin and self._layout_pinned:
            figure.set_layout_engine(self._saved_layout_engine)
            self._saved_layout_engine = None
            self._layout_pinned = False
            self.canvas.draw_idle()

    # ------------------------------------------------------------------ data / view
    def data_bounds(self) -> Rect | None:
        lim = self._axes.dataLim
        values = np.array([lim.x0, lim.y0, lim.x1, lim.y1], dtype=float)
        if not np.isfinite(values).all():
            return None
        return Rect.from_xywh(lim.x0, lim.y0, lim.width, lim.height)

    def apply_limits(self, limits: Rect) -> None:
        x0, y0 = limits.origin
        x1, y1 = x0 + limits.widths[0], y0 + limits.widths[1]
        axis = self.axis
        if axis is not None and axis.xreversed.value:
            x0, x1 = x1, x0
        if axis is not None and axis.yreversed.value:
            y0, y1 = y1, y0
        self._axes.set_xlim(x0, x1, auto=False)
        self._axes.set_ylim(y0, y1, auto=False)
        self.canvas.draw_idle()


def _max_extent(labels: Any, renderer: Any, attr: str) -> float:
    sizes = [
        float(getattr(label.get_window_extent(renderer=renderer), attr))
        for label in labels
        if label.get_visible() and label.get_text()
    ]
    return max(sizes, default=0.0)
