# PlotNav
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Left-drag rectangle selection that zooms the axis into the selected box."""

from __future__ import annotations

import logging
from functools import singledispatchmethod
from typing import Any

from plotnav.core.geometry import (
    SELECTION_FACES,
    Rect,
    positivize,
    rect_outline,
    selection_vertices,
)
from plotnav.core.observable import Observable, lift, release_lift
from plotnav.interactions.dispatch import Interaction
from plotnav.interactions.events import Key, KeysEvent, MouseEvent, MouseEventType

log = logging.getLogger(__name__)

__all__ = ["RectangleZoom", "chosen_limits"]

SELECTION_COLOR = (0.0, 0.0, 0.0, 0.33)
OUTLINE_COLOR = (0.0, 0.0, 0.0, 0.66)
OUTLINE_WIDTH = 2.0
# above any data content
SELECTION_Z = 100
OUTLINE_Z = 110


def chosen_limits(
    start: tuple[float, float],
    end: tuple[float, float],
    limits: Rect,
    *,
    xrectzoom: bool = True,
    yrectzoom: bool = True,
    restrict_x: bool = False,
    restrict_y: bool = False,
) -> Rect:
    """Rectangle the drag from ``start`` to ``end`` would zoom into.

    ``restrict_x`` (or an axis that disallows rectangle zoom in x) freezes the
    x-extent to the current limits, so only y changes; ``restrict_y`` likewise
    freezes y.
    """

    rect = positivize(Rect.from_corners(start, end))
    if restrict_x or not xrectzoom:
        rect = rect.with_x(limits.origin[0], limits.widths[0])
    if restrict_y or not yrectzoom:
        rect = rect.with_y(limits.origin[1], limits.widths[1])
    return rect


class RectangleZoom(Interaction):
    """Drag-to-zoom state machine: idle -> dragging -> idle.

    The overlay (a translucent mesh over the excluded area plus an outline of
    the selection) only exists between drag start and drag stop.
    """

    def __init__(self) -> None:
        self.from_: tuple[float, float] = (0.0, 0.0)
        self.to: tuple[float, float] = (0.0, 0.0)
        self.restrict_x = False
        self.restrict_y = False
        self.active = False
        self.rectnode: Observable[Rect] = Observable(Rect((0.0, 0.0), (1.0, 1.0)))
        self.plots: list[Any] = []
        self._vertices: Observable | None = None

    def __repr__(self) -> str:
        return f"RectangleZoom(active={self.active}, from_={self.from_}, to={self.to})"

    @singledispatchmethod
    def process_interaction(self, event: Any, parent: Any) -> None:
        return None

    @process_interaction.register(MouseEvent)
    def _process_mouse(self, event: MouseEvent, ax: Any) -> None:
        if event.type is MouseEventType.leftdragstart:
            if self.active or self.plots or self._vertices is not None:
                # the previous gesture never saw its drag stop
                self._teardown(ax)
            self.from_ = event.prev_position
            self.to = event.position
            self.rectnode.value = self._chosen(ax)
            self._create_overlay(ax)
            self.active = True
            log.debug("Rectangle zoom started at %s", self.from_)

        elif not self.active:
            # drag started while this handler was deactivated
            return

        elif event.type is MouseEventType.leftdrag:
            self.to = event.position
            self.rectnode.value = self._chosen(ax)

        elif event.type is MouseEventType.leftdragstop:
            newlims = self.rectnode.value
            if not newlims.has_zero_width():
                ax.targetlimits.value = newlims
                log.debug("Rectangle zoom committed %s", newlims)
            else:
                log.debug("Rectangle zoom discarded, zero-width selection %s", newlims)
            self._teardown(ax)

    @process_interaction.register(KeysEvent)
    def _process_keys(self, event: KeysEvent, ax: Any) -> None:
        self.restrict_y = Key.x in event.keys
        self.restrict_x = Key.y in event.keys
        if not self.active:
            return
        self.rectnode.value = self._chosen(ax)

    def deregistration_cleanup(self, parent: Any) -> None:
        if self.active or self.plots:
            self._teardown(parent)

    # ------------------------------------------------------------------ internals
    def _chosen(self, ax: Any) -> Rect:
        return chosen_limits(
            self.from_,
            self.to,
            ax.limits.value,
            xrectzoom=bool(ax.xrectzoom.value),
            yrectzoom=bool(ax.yrectzoom.value),
            restrict_x=self.restrict_x,
            restrict_y=self.restrict_y,
        )

    def _create_overlay(self, ax: Any) -> None:
        scene = ax.scene
        vertices = lift(selection_vertices, ax.limits, self.rectnode)
        self._vertices = vertices

        mesh = scene.add_drawable("mesh", (vertices.value, SELECTION_FACES), color=SELECTION_COLOR)
        wireframe = scene.add_drawable(
            "wireframe",
            rect_outline(self.rectnode.value),
            color=OUTLINE_COLOR,
            linewidth=OUTLINE_WIDTH,
        )
        scene.set_draw_order(mesh, SELECTION_Z)
        scene.set_draw_order(wireframe, OUTLINE_Z)

        vertices.subscribe(lambda verts: scene.update_drawable(mesh, (verts, SELECTION_FACES)))
        self.rectnode.subscribe(lambda rect: scene.update_drawable(wireframe, rect_outline(rect)))
        self.plots.extend([mesh, wireframe])

    def _teardown(self, ax: Any) -> None:
        scene = ax.scene
        while self.plots:
            scene.remove_drawable(self.plots.pop(0))
        # sever the live links before the overlay data goes away
        self.rectnode.clear_listeners()
        if self._vertices is not None:
            release_lift(self._vertices)
            self._vertices = None
        self.active = False
