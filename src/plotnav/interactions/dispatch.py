"""Route input events to every active interaction registered on a parent."""

from __future__ import annotations

import inspect
import logging
import types
import typing
from collections.abc import Callable
from functools import singledispatchmethod
from typing import Any

from plotnav.interactions.registry import interactions

log = logging.getLogger(__name__)

__all__ = ["Interaction", "accepts", "dispatch", "is_applicable", "process_interaction"]

_UNION_TYPES = (typing.Union, getattr(types, "UnionType", typing.Union))


class Interaction:
    """Base class for stateful interaction handlers.

    Subclasses override :meth:`process_interaction` with their own
    ``singledispatchmethod`` and register one overload per event type they
    handle. Unhandled event types fall through to the no-op default.
    """

    @singledispatchmethod
    def process_interaction(self, event: Any, parent: Any) -> None:
        return None

    def registration_setup(self, parent: Any) -> None:
        """Called once when the handler is registered on ``parent``."""

    def deregistration_cleanup(self, parent: Any) -> None:
        """Called once before the handler is removed from ``parent``."""


def accepts(*event_types: type) -> Callable[[Callable], Callable]:
    """Declare which event types a plain-function interaction handles."""

    def decorator(func: Callable) -> Callable:
        func.__accepted_events__ = tuple(event_types)  # type: ignore[attr-defined]
        return func

    return decorator


def _annotated_event_types(func: Callable) -> tuple[type, ...] | None:
    target = func
    if not inspect.isroutine(func) and hasattr(func, "__call__"):
        target = func.__call__
    try:
        params = [
            p
            for p in inspect.signature(target).parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ]
        hints = typing.get_type_hints(target)
    except (TypeError, ValueError, NameError):
        return None
    if not params or params[0].name not in hints:
        return None

    hint = hints[params[0].name]
    if isinstance(hint, type) and hint is not object:
        return (hint,)
    if typing.get_origin(hint) in _UNION_TYPES:
        classes = tuple(arg for arg in typing.get_args(hint) if isinstance(arg, type))
        return classes or None
    return None


def is_applicable(func: Callable, event: Any, parent: Any) -> bool:
    """Return whether ``func(event, parent)`` is defined for this event."""

    declared = getattr(func, "__accepted_events__", None)
    if declared is None:
        declared = _annotated_event_types(func)
    if declared and not isinstance(event, declared):
        return False
    try:
        inspect.signature(func).bind(event, parent)
    except TypeError:
        return False
    except ValueError:
        # no introspectable signature (some builtins); assume it applies
        return True
    return True


def process_interaction(interaction: Any, event: Any, parent: Any) -> None:
    """Deliver ``event`` to a single interaction.

    Handler objects get their event-specific overload; plain callables are
    called only when applicable, so a function can be registered without
    defining a new type. Anything else is ignored.
    """

    method = getattr(interaction, "process_interaction", None)
    if method is not None and not isinstance(interaction, type):
        method(event, parent)
    elif callable(interaction):
        if is_applicable(interaction, event, parent):
            interaction(event, parent)
    return None


def dispatch(parent: Any, event: Any) -> None:
    """Send ``event`` to every active interaction of ``parent``.

    Exceptions raised by handlers propagate to the caller; mutations made by
    earlier handlers in the same pass are not rolled back.
    """

    for interaction in interactions(parent).active_handlers():
        process_interaction(interaction, event, parent)
