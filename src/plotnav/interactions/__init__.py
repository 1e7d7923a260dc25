"""Interaction registry, dispatch protocol and the built-in viewport handlers."""

from plotnav.interactions.dispatch import (
    Interaction,
    accepts,
    dispatch,
    is_applicable,
    process_interaction,
)
from plotnav.interactions.drag_pan import DragPan
from plotnav.interactions.events import (
    Key,
    KeysEvent,
    MouseButton,
    MouseEvent,
    MouseEventType,
    ScrollEvent,
)
from plotnav.interactions.limit_reset import LimitReset
from plotnav.interactions.rectangle_zoom import RectangleZoom, chosen_limits
from plotnav.interactions.registry import (
    DuplicateNameError,
    InteractionError,
    InteractionRegistry,
    RegisteredInteraction,
    UnknownNameError,
    activate_interaction,
    deactivate_interaction,
    deregister_interaction,
    interactions,
    register_callable_interaction,
    register_interaction,
)
from plotnav.interactions.scroll_zoom import ScrollZoom
from plotnav.interactions.ticklabel_reset import TickLabelSpaceReset

__all__ = [
    "DragPan",
    "DuplicateNameError",
    "Interaction",
    "InteractionError",
    "InteractionRegistry",
    "Key",
    "KeysEvent",
    "LimitReset",
    "MouseButton",
    "MouseEvent",
    "MouseEventType",
    "RectangleZoom",
    "RegisteredInteraction",
    "ScrollEvent",
    "ScrollZoom",
    "TickLabelSpaceReset",
    "UnknownNameError",
    "accepts",
    "activate_interaction",
    "chosen_limits",
    "deactivate_interaction",
    "deregister_interaction",
    "dispatch",
    "interactions",
    "is_applicable",
    "process_interaction",
    "register_callable_interaction",
    "register_interaction",
]
