"""Drag panning of the axis limits with the pan button (right by default)."""

from __future__ import annotations

import logging
from functools import singledispatchmethod
from typing import Any

from plotnav.core.geometry import Rect
from plotnav.interactions.dispatch import Interaction
from plotnav.interactions.events import MouseButton, MouseEvent, MouseEventType
from plotnav.interactions.ticklabel_reset import TickLabelSpaceReset, TimerFactory

log = logging.getLogger(__name__)

__all__ = ["DragPan"]


class DragPan(Interaction):
    """Moves the target limits along with the pointer; widths never change.

    Pans on drags of the axis' ``panbutton`` (right button by default).
    """

    def __init__(self, reset_delay: float = 0.2, timer_factory: TimerFactory | None = None) -> None:
        self.reset = TickLabelSpaceReset(reset_delay, timer_factory)

    def __repr__(self) -> str:
        return f"DragPan(reset_delay={self.reset_delay})"

    @property
    def reset_delay(self) -> float:
        return self.reset.reset_delay

    @singledispatchmethod
    def process_interaction(self, event: Any, parent: Any) -> None:
        return None

    @process_interaction.register(MouseEvent)
    def _process_mouse(self, event: MouseEvent, ax: Any) -> None:
        if event.type is not _drag_type(ax.panbutton.value):
            return

        scene = ax.scene
        cur = scene.pixel_to_data(event.pixel)
        prev = scene.pixel_to_data(event.prev_pixel)
        movement = (cur[0] - prev[0], cur[1] - prev[1])

        tlimits = ax.targetlimits.value
        xori = tlimits.origin[0] - movement[0]
        yori = tlimits.origin[1] - movement[1]

        if ax.xpanlock.value or ax.is_pressed(ax.ypankey.value):
            xori = tlimits.origin[0]
        if ax.ypanlock.value or ax.is_pressed(ax.xpankey.value):
            yori = tlimits.origin[1]

        self.reset.trigger(ax)

        ax.targetlimits.value = Rect((xori, yori), tlimits.widths)

    def deregistration_cleanup(self, parent: Any) -> None:
        self.reset.cancel(restore=True)


def _drag_type(button: Any) -> MouseEventType | None:
    if not isinstance(button, MouseButton):
        return None
    return MouseEventType.for_button(button, "drag")
