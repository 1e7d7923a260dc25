"""PyQtGraph axis backend: a ViewBox that forwards raw input instead of handling it."""

from __future__ import annotations

import contextlib
import logging
from typing import Any

import numpy as np
import pyqtgraph as pg
from PyQt5.QtCore import QEvent, QObject, QPointF, Qt
from PyQt5.QtGui import QColor, QPainterPath, QPolygonF
from PyQt5.QtWidgets import QGraphicsPathItem

from plotnav.backends.abstract_backend import AxisBackend
from plotnav.backends.mouse_state import KeyTracker, MouseStateMachine
from plotnav.core.geometry import Rect
from plotnav.interactions.events import Key, MouseButton, ScrollEvent

log = logging.getLogger(__name__)

__all__ = ["InteractionViewBox", "PgAxisBackend"]

_QT_BUTTONS = {
    Qt.LeftButton: MouseButton.left,
    Qt.RightButton: MouseButton.right,
    Qt.MiddleButton: MouseButton.middle,
}

_QT_KEYS = {
    Qt.Key_X: Key.x,
    Qt.Key_Y: Key.y,
    Qt.Key_Z: Key.z,
    Qt.Key_A: Key.a,
    Qt.Key_R: Key.r,
    Qt.Key_Control: Key.left_control,
    Qt.Key_Shift: Key.left_shift,
    Qt.Key_Alt: Key.left_alt,
    Qt.Key_Meta: Key.left_super,
    Qt.Key_Space: Key.space,
    Qt.Key_Escape: Key.escape,
}

# one wheel notch
_WHEEL_STEP = 120.0


def _qcolor(rgba: Any) -> QColor:
    if isinstance(rgba, QColor):
        return rgba
    r, g, b, a = (tuple(rgba) + (1.0,))[:4]
    return QColor.fromRgbF(float(r), float(g), float(b), float(a))


def _mesh_path(vertices: Any, faces: Any) -> QPainterPath:
    path = QPainterPath()
    verts = np.asarray(vertices, dtype=float)
    for tri in np.asarray(faces, dtype=int):
        path.addPolygon(QPolygonF([QPointF(*verts[i]) for i in (*tri, tri[0])]))
    return path


class InteractionViewBox(pg.ViewBox):
    """ViewBox whose mouse handling is replaced by forwarding to a backend.

    Built-in pan/zoom/menu behavior is disabled; the registered interactions
    decide what input does.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("enableMenu", False)
        super().__init__(*args, **kwargs)
        self.enableAutoRange(x=False, y=False)
        self._backend: PgAxisBackend | None = None

    def set_backend(self, backend: PgAxisBackend | None) -> None:
        self._backend = backend

    def local_pixel(self, pos: Any) -> tuple[float, float]:
        """Convert a ViewBox-local position (y down) to axis pixels (y up)."""

        return float(pos.x()), float(self.height() - pos.y())

    def mouseDragEvent(self, ev, axis=None) -> None:
        backend = self._backend
        button = _QT_BUTTONS.get(ev.button())
        if backend is None or button is None:
            ev.ignore()
            return
        ev.accept()
        if ev.isStart():
            backend.feed_press(button, self.local_pixel(ev.buttonDownPos()))
        backend.feed_move(self.local_pixel(ev.pos()))
        if ev.isFinish():
            backend.feed_release(button, self.local_pixel(ev.pos()))

    def mouseClickEvent(self, ev) -> None:
        backend = self._backend
        button = _QT_BUTTONS.get(ev.button())
        if backend is None or button is None:
            ev.ignore()
            return
        ev.accept()
        pixel = self.local_pixel(ev.pos())
        backend.feed_press(button, pixel)
        backend.feed_release(button, pixel)

    def hoverEvent(self, ev) -> None:
        backend = self._backend
        if backend is None or ev.isExit():
            return
        backend.feed_move(self.local_pixel(ev.pos()))

    def wheelEvent(self, ev, axis=None) -> None:
        backend = self._backend
        if backend is None:
            ev.ignore()
            return
        try:
            delta = ev.delta()
        except AttributeError:
            delta = ev.angleDelta().y()
        backend.feed_scroll(delta / _WHEEL_STEP, self.local_pixel(ev.pos()))
        ev.accept()


class _KeyFilter(QObject):
    """Event filter translating Qt key presses into KeyTracker updates."""

    def __init__(self, keys: KeyTracker) -> None:
        super().__init__()
        self._keys = keys

    def eventFilter(self, obj: QObject, ev: QEvent) -> bool:
        etype = ev.type()
        if etype in (QEvent.KeyPress, QEvent.KeyRelease):
            if ev.isAutoRepeat():
                return False
            key = _QT_KEYS.get(ev.key())
            if etype == QEvent.KeyPress:
                self._keys.press(key)
            else:
                self._keys.release(key)
        elif etype == QEvent.FocusOut:
            self._keys.clear()
        return False


class PgAxisBackend(AxisBackend):
    """Adapter between a ``pg.PlotItem`` using :class:`InteractionViewBox` and an Axis."""

    def __init__(self, plot_item: pg.PlotItem, key_source: QObject | None = None) -> None:
        super().__init__()
        view_box = plot_item.getViewBox()
        if not isinstance(view_box, InteractionViewBox):
            raise TypeError("PgAxisBackend requires a PlotItem created with InteractionViewBox")
        self._plot_item = plot_item
        self._view_box = view_box
        self._mouse_px: tuple[float, float] = (0.0, 0.0)
        self.mouse = MouseStateMachine(self._dispatch, self.pixel_to_data)
        self.keys = KeyTracker(self._dispatch)
        self._key_filter = _KeyFilter(self.keys)
        self._key_source = key_source
        if key_source is not None:
            key_source.installEventFilter(self._key_filter)
        view_box.set_backend(self)

    @classmethod
    def create_plot_widget(cls, **kwargs: Any) -> tuple[pg.PlotWidget, PgAxisBackend]:
        """Return a PlotWidget wired to a new backend (keys read from the widget)."""

        widget = pg.PlotWidget(viewBox=InteractionViewBox(), **kwargs)
        widget.setFocusPolicy(Qt.StrongFocus)
        return widget, cls(widget.getPlotItem(), key_source=widget)

    @property
    def view_box(self) -> InteractionViewBox:
        return self._view_box

    def disconnect(self) -> None:
        self._view_box.set_backend(None)
        if self._key_source is not None:
            with contextlib.suppress(RuntimeError):
                self._key_source.removeEventFilter(self._key_filter)
            self._key_source = None

    # ------------------------------------------------------------------ input pump
    def _dispatch(self, event: Any) -> None:
        if self.axis is not None:
            self.axis.dispatch(event)

    def feed_press(self, button: MouseButton, pixel: tuple[float, float]) -> None:
        self._mouse_px = pixel
        self.mouse.press(button, pixel)

    def feed_move(self, pixel: tuple[float, float]) -> None:
        self._mouse_px = pixel
        self.mouse.move(pixel)

    def feed_release(self, button: MouseButton, pixel: tuple[float, float]) -> None:
        self._mouse_px = pixel
        self.mouse.release(button, pixel)

    def feed_scroll(self, steps: float, pixel: tuple[float, float]) -> None:
        self._mouse_px = pixel
        self._dispatch(ScrollEvent(0.0, float(steps)))

    # ------------------------------------------------------------------ camera
    def pixel_to_data(self, pixel: tuple[float, float]) -> tuple[float, float]:
        vb = self._view_box
        point = vb.mapToView(QPointF(pixel[0], vb.height() - pixel[1]))
        return float(point.x()), float(point.y())

    def pixel_to_fraction(self, pixel: tuple[float, float]) -> tuple[float, float]:
        vb = self._view_box
        width = vb.width() or 1.0
        height = vb.height() or 1.0
        return pixel[0] / width, pixel[1] / height

    def mouse_pixel(self) -> tuple[float, float]:
        return self._mouse_px

    def is_pressed(self, key: Any) -> bool:
        if isinstance(key, MouseButton):
            return self.mouse.pressed is key
        return self.keys.is_pressed(key)

    # ------------------------------------------------------------------ scene
    def add_drawable(self, kind: str, data: Any, **style: Any) -> Any:
        color = _qcolor(style.get("color", (0.0, 0.0, 0.0, 0.5)))
        if kind == "mesh":
            vertices, faces = data
            item = QGraphicsPathItem(_mesh_path(vertices, faces))
            item.setBrush(pg.mkBrush(color))
            item.setPen(pg.mkPen(None))
        elif kind == "wireframe":
            outline = np.asarray(data, dtype=float)
            item = pg.PlotCurveItem(
                outline[:, 0],
                outline[:, 1],
                pen=pg.mkPen(color=color, width=style.get("linewidth", 1.0)),
            )
        else:
            raise ValueError(f"Unsupported drawable kind: {kind!r}")
        self._view_box.addItem(item, ignoreBounds=True)
        return item

    def update_drawable(self, handle: Any, data: Any) -> None:
        with contextlib.suppress(RuntimeError):
            if isinstance(handle, QGraphicsPathItem):
                vertices, faces = data
                handle.setPath(_mesh_path(vertices, faces))
            else:
                outline = np.asarray(data, dtype=float)
                handle.setData(outline[:, 0], outline[:, 1])

    def remove_drawable(self, handle: Any) -> None:
        # safely handle deleted Qt objects
        with contextlib.suppress(RuntimeError):
            self._view_box.removeItem(handle)

    def set_draw_order(self, handle: Any, z: float) -> None:
        with contextlib.suppress(RuntimeError):
            handle.setZValue(z)

    # ------------------------------------------------------------------ layout
    def tick_label_space(self) -> tuple[float, float]:
        bottom = self._plot_item.getAxis("bottom")
        left = self._plot_item.getAxis("left")
        return float(bottom.height()), float(left.width())

    def set_tick_label_space(self, x: Any, y: Any) -> None:
        bottom = self._plot_item.getAxis("bottom")
        left = self._plot_item.getAxis("left")
        bottom.setHeight(None if x == "auto" else float(x))
        left.setWidth(None if y == "auto" else float(y))

    # ------------------------------------------------------------------ data / view
    def data_bounds(self) -> Rect | None:
        (xmin, xmax), (ymin, ymax) = _bounds_or_none(self._view_box.childrenBounds())
        if None in (xmin, xmax, ymin, ymax):
            return None
        return Rect.from_xywh(xmin, ymin, xmax - xmin, ymax - ymin)

    def apply_limits(self, limits: Rect) -> None:
        vb = self._view_box
        axis = self.axis
        if axis is not None:
            vb.invertX(bool(axis.xreversed.value))
            vb.invertY(bool(axis.yreversed.value))
        x0, y0 = limits.origin
        vb.setRange(
            xRange=(x0, x0 + limits.widths[0]),
            yRange=(y0, y0 + limits.widths[1]),
            padding=0.0,
        )


def _bounds_or_none(bounds: Any) -> tuple[tuple[Any, Any], tuple[Any, Any]]:
    xr, yr = bounds
    xr = tuple(xr) if xr is not None else (None, None)
    yr = tuple(yr) if yr is not None else (None, None)
    return (xr[0], xr[1]), (yr[0], yr[1])
