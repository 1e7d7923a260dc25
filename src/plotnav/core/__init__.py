"""Geometry, reactive cells and logging setup shared across PlotNav."""

from plotnav.core.geometry import (
    SELECTION_FACES,
    Rect,
    positivize,
    rect_outline,
    selection_vertices,
)
from plotnav.core.observable import Observable, lift, release_lift

__all__ = [
    "SELECTION_FACES",
    "Observable",
    "Rect",
    "lift",
    "positivize",
    "rect_outline",
    "release_lift",
    "selection_vertices",
]
