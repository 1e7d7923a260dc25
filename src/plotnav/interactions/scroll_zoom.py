"""Mouse-wheel zoom anchored at the cursor position."""

from __future__ import annotations

import logging
from functools import singledispatchmethod
from typing import Any

from plotnav.core.geometry import Rect
from plotnav.interactions.dispatch import Interaction
from plotnav.interactions.events import ScrollEvent
from plotnav.interactions.ticklabel_reset import TickLabelSpaceReset, TimerFactory

log = logging.getLogger(__name__)

__all__ = ["ScrollZoom", "cursor_fraction", "zoom_factor"]

MIN_ZOOM_FACTOR = 0.1


def zoom_factor(zoom: float, speed: float) -> float:
    """Width multiplier for a wheel step; zooming in and out by ``|zoom|`` cancel out."""

    # don't let z go negative
    z = max(MIN_ZOOM_FACTOR, 1.0 - abs(zoom) * speed)
    if zoom > 0:
        # the old width becomes a fraction of the new one
        z = 1.0 / z
    return z


def cursor_fraction(
    fraction: tuple[float, float], xreversed: bool, yreversed: bool
) -> tuple[float, float]:
    """Axis fraction under the cursor, flipped about 0.5 on reversed axes."""

    fx, fy = fraction
    if xreversed:
        fx = 1.0 - fx
    if yreversed:
        fy = 1.0 - fy
    return fx, fy


class ScrollZoom(Interaction):
    def __init__(
        self,
        speed: float = 0.1,
        reset_delay: float = 0.2,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self.speed = float(speed)
        self.reset = TickLabelSpaceReset(reset_delay, timer_factory)

    def __repr__(self) -> str:
        return f"ScrollZoom(speed={self.speed}, reset_delay={self.reset_delay})"

    @property
    def reset_delay(self) -> float:
        return self.reset.reset_delay

    @singledispatchmethod
    def process_interaction(self, event: Any, parent: Any) -> None:
        return None

    @process_interaction.register(ScrollEvent)
    def _process_scroll(self, event: ScrollEvent, ax: Any) -> None:
        # use vertical zoom
        zoom = event.y
        if zoom == 0:
            return

        z = zoom_factor(zoom, self.speed)
        scene = ax.scene
        fx, fy = cursor_fraction(
            scene.pixel_to_fraction(scene.mouse_pixel()),
            bool(ax.xreversed.value),
            bool(ax.yreversed.value),
        )

        tlimits = ax.targetlimits.value
        xorigin, yorigin = tlimits.origin
        xwidth, ywidth = tlimits.widths
        xzoomlock = bool(ax.xzoomlock.value)
        yzoomlock = bool(ax.yzoomlock.value)

        newxwidth = xwidth if xzoomlock else xwidth * z
        newywidth = ywidth if yzoomlock else ywidth * z
        newxorigin = xorigin if xzoomlock else xorigin + fx * (xwidth - newxwidth)
        newyorigin = yorigin if yzoomlock else yorigin + fy * (ywidth - newywidth)

        self.reset.trigger(ax)

        if ax.is_pressed(ax.xzoomkey.value):
            newlims = Rect((newxorigin, yorigin), (newxwidth, ywidth))
        elif ax.is_pressed(ax.yzoomkey.value):
            newlims = Rect((xorigin, newyorigin), (xwidth, newywidth))
        else:
            newlims = Rect((newxorigin, newyorigin), (newxwidth, newywidth))
        log.debug("Scroll zoom z=%.4f at fraction (%.3f, %.3f) -> %s", z, fx, fy, newlims)
        ax.targetlimits.value = newlims

    def deregistration_cleanup(self, parent: Any) -> None:
        self.reset.cancel(restore=True)
