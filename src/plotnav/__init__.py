# PlotNav
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Public package interface for PlotNav, the 2-D plot viewport interaction layer."""

from plotnav.axis import DEFAULT_LIMITS, Axis, add_default_interactions
from plotnav.core.geometry import Rect, positivize
from plotnav.core.observable import Observable
from plotnav.interactions import (
    DragPan,
    DuplicateNameError,
    Interaction,
    InteractionError,
    Key,
    KeysEvent,
    LimitReset,
    MouseButton,
    MouseEvent,
    MouseEventType,
    RectangleZoom,
    ScrollEvent,
    ScrollZoom,
    UnknownNameError,
    accepts,
    activate_interaction,
    deactivate_interaction,
    deregister_interaction,
    dispatch,
    interactions,
    process_interaction,
    register_callable_interaction,
    register_interaction,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_LIMITS",
    "Axis",
    "DragPan",
    "DuplicateNameError",
    "Interaction",
    "InteractionError",
    "Key",
    "KeysEvent",
    "LimitReset",
    "MouseButton",
    "MouseEvent",
    "MouseEventType",
    "Observable",
    "Rect",
    "RectangleZoom",
    "ScrollEvent",
    "ScrollZoom",
    "UnknownNameError",
    "accepts",
    "activate_interaction",
    "add_default_interactions",
    "deactivate_interaction",
    "deregister_interaction",
    "dispatch",
    "interactions",
    "positivize",
    "process_interaction",
    "register_callable_interaction",
    "register_interaction",
]
