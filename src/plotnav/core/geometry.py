# PlotNav
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Axis-aligned rectangles and the selection overlay geometry built from them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

__all__ = [
    "Rect",
    "SELECTION_FACES",
    "bottomleft",
    "bottomright",
    "clamp_point",
    "positivize",
    "rect_outline",
    "selection_vertices",
    "topleft",
    "topright",
]

Point = tuple[float, float]

# Rectangle with a rectangular hole: outer corners 0..3, inner corners 4..7.
SELECTION_FACES = np.array(
    [
        [0, 1, 4],
        [4, 1, 5],
        [1, 2, 5],
        [5, 2, 6],
        [2, 3, 6],
        [6, 3, 7],
        [3, 0, 7],
        [7, 0, 4],
    ],
    dtype=int,
)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box described by its origin and (possibly negative) widths."""

    origin: Point
    widths: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", (float(self.origin[0]), float(self.origin[1])))
        object.__setattr__(self, "widths", (float(self.widths[0]), float(self.widths[1])))

    @classmethod
    def from_xywh(cls, x: float, y: float, w: float, h: float) -> Rect:
        return cls((x, y), (w, h))

    @classmethod
    def from_corners(cls, start: Sequence[float], end: Sequence[float]) -> Rect:
        """Return the raw rectangle spanning ``start`` -> ``end`` (widths may be negative)."""

        return cls((start[0], start[1]), (end[0] - start[0], end[1] - start[1]))

    @property
    def x(self) -> float:
        return self.origin[0]

    @property
    def y(self) -> float:
        return self.origin[1]

    @property
    def width(self) -> float:
        return self.widths[0]

    @property
    def height(self) -> float:
        return self.widths[1]

    def has_zero_width(self) -> bool:
        return self.widths[0] == 0 or self.widths[1] == 0

    def with_x(self, origin: float, width: float) -> Rect:
        return Rect((origin, self.origin[1]), (width, self.widths[1]))

    def with_y(self, origin: float, width: float) -> Rect:
        return Rect((self.origin[0], origin), (self.widths[0], width))


def positivize(rect: Rect) -> Rect:
    """Flip negative widths so the origin becomes the minimum corner."""

    origin = list(rect.origin)
    widths = list(rect.widths)
    for i in range(2):
        if widths[i] < 0:
            origin[i] += widths[i]
            widths[i] = -widths[i]
    return Rect((origin[0], origin[1]), (widths[0], widths[1]))


def bottomleft(rect: Rect) -> Point:
    return rect.origin


def bottomright(rect: Rect) -> Point:
    return (rect.origin[0] + rect.widths[0], rect.origin[1])


def topleft(rect: Rect) -> Point:
    return (rect.origin[0], rect.origin[1] + rect.widths[1])


def topright(rect: Rect) -> Point:
    return (rect.origin[0] + rect.widths[0], rect.origin[1] + rect.widths[1])


def clamp_point(point: Sequence[float], low: Sequence[float], high: Sequence[float]) -> Point:
    return (
        min(max(point[0], low[0]), high[0]),
        min(max(point[1], low[1]), high[1]),
    )


def selection_vertices(outer: Rect, inner: Rect) -> np.ndarray:
    """Return the 8 mesh vertices for the excluded region around ``inner``.

    The inner corners are clamped into ``outer`` so the hole never extends past
    the displayed area.
    """

    outer = positivize(outer)
    inner = positivize(inner)

    obl = bottomleft(outer)
    otr = topright(outer)

    points = [
        obl,
        bottomright(outer),
        otr,
        topleft(outer),
        clamp_point(bottomleft(inner), obl, otr),
        clamp_point(bottomright(inner), obl, otr),
        clamp_point(topright(inner), obl, otr),
        clamp_point(topleft(inner), obl, otr),
    ]
    return np.asarray(points, dtype=float)


def rect_outline(rect: Rect) -> np.ndarray:
    """Closed polyline around ``rect`` (first point repeated at the end)."""

    return np.asarray(
        [bottomleft(rect), bottomright(rect), topright(rect), topleft(rect), bottomleft(rect)],
        dtype=float,
    )
