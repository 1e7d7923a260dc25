# PlotNav
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Named, toggleable interaction registry attached to a parent (usually an Axis).

The parent calls ``process_interaction(interaction, event, parent)`` for every
active entry whenever suitable events happen (see ``dispatch``). Entries can be
removed with :func:`deregister_interaction` or temporarily toggled with
:func:`activate_interaction` / :func:`deactivate_interaction`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from functools import singledispatch
from typing import Any, NamedTuple

log = logging.getLogger(__name__)

__all__ = [
    "DuplicateNameError",
    "InteractionError",
    "InteractionRegistry",
    "RegisteredInteraction",
    "UnknownNameError",
    "activate_interaction",
    "deactivate_interaction",
    "deregister_interaction",
    "deregistration_cleanup",
    "interactions",
    "register_callable_interaction",
    "register_interaction",
    "registration_setup",
]


class InteractionError(Exception):
    """Base class for registry misuse."""


class DuplicateNameError(InteractionError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Interaction {name!r} already exists.")
        self.name = name


class UnknownNameError(InteractionError, KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Interaction {name!r} does not exist.")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class RegisteredInteraction(NamedTuple):
    active: bool
    handler: Any


class InteractionRegistry(Mapping):
    """Insertion-ordered mapping of name -> :class:`RegisteredInteraction`.

    Read-only as a mapping; mutate through the module-level registry functions.
    """

    def __init__(self) -> None:
        self._entries: dict[str, RegisteredInteraction] = {}

    def __getitem__(self, name: str) -> RegisteredInteraction:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        states = ", ".join(
            f"{name}={'on' if entry.active else 'off'}" for name, entry in self._entries.items()
        )
        return f"InteractionRegistry({states})"

    def active_handlers(self) -> list[Any]:
        """Snapshot of the handlers whose entries are active, in insertion order."""

        return [entry.handler for entry in self._entries.values() if entry.active]

    def _insert(self, name: str, entry: RegisteredInteraction) -> None:
        self._entries[name] = entry

    def _remove(self, name: str) -> RegisteredInteraction:
        return self._entries.pop(name)


# overloadable for other parent types that want to offer similar interactions
@singledispatch
def interactions(parent: Any) -> InteractionRegistry:
    """Return the registry owned by ``parent``."""

    return parent.interactions


def registration_setup(parent: Any, interaction: Any) -> None:
    """Run the handler's setup hook, if it defines one."""

    hook = getattr(interaction, "registration_setup", None)
    if hook is not None and not isinstance(interaction, type):
        hook(parent)


def deregistration_cleanup(parent: Any, interaction: Any) -> None:
    """Run the handler's cleanup hook, if it defines one."""

    hook = getattr(interaction, "deregistration_cleanup", None)
    if hook is not None and not isinstance(interaction, type):
        hook(parent)


def register_interaction(parent: Any, name: str, interaction: Any = None) -> Any:
    """Register ``interaction`` with ``parent`` under ``name``.

    When ``interaction`` is omitted a decorator is returned, so a plain
    function can be registered inline::

        @register_interaction(ax, "print_clicks")
        def print_clicks(event: MouseEvent, axis):
            ...
    """

    if interaction is None:

        def decorator(func: Callable) -> Callable:
            return register_callable_interaction(func, parent, name)

        return decorator

    registry = interactions(parent)
    if name in registry:
        raise DuplicateNameError(name)
    registration_setup(parent, interaction)
    registry._insert(name, RegisteredInteraction(True, interaction))
    log.debug("Registered interaction %r (%s)", name, type(interaction).__name__)
    return interaction


def register_callable_interaction(func: Callable, parent: Any, name: str) -> Callable:
    """Callable-first form of :func:`register_interaction`."""

    if not callable(func):
        raise TypeError(f"Interaction {name!r} must be callable, got {type(func).__name__}")
    return register_interaction(parent, name, func)


def deregister_interaction(parent: Any, name: str) -> Any:
    """Remove the interaction named ``name`` and return its handler."""

    registry = interactions(parent)
    if name not in registry:
        raise UnknownNameError(name)
    _, interaction = registry[name]

    deregistration_cleanup(parent, interaction)
    registry._remove(name)
    log.debug("Deregistered interaction %r", name)
    return interaction


def activate_interaction(parent: Any, name: str) -> None:
    """Activate the interaction named ``name``."""

    _set_active(parent, name, True)


def deactivate_interaction(parent: Any, name: str) -> None:
    """Deactivate the interaction named ``name``; its internal state is kept."""

    _set_active(parent, name, False)


def _set_active(parent: Any, name: str, active: bool) -> None:
    registry = interactions(parent)
    if name not in registry:
        raise UnknownNameError(name)
    registry._insert(name, RegisteredInteraction(active, registry[name].handler))
    log.debug("Interaction %r %s", name, "activated" if active else "deactivated")
