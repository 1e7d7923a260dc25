"""Ctrl+click resets the axis to limits that fit all data."""

from __future__ import annotations

import logging
from functools import singledispatchmethod
from typing import Any

from plotnav.interactions.dispatch import Interaction
from plotnav.interactions.events import Key, MouseEvent, MouseEventType

log = logging.getLogger(__name__)

__all__ = ["LimitReset"]


class LimitReset(Interaction):
    def __init__(self, modifier: Any = Key.left_control) -> None:
        self.modifier = modifier

    def __repr__(self) -> str:
        return f"LimitReset(modifier={self.modifier!r})"

    @singledispatchmethod
    def process_interaction(self, event: Any, parent: Any) -> None:
        return None

    @process_interaction.register(MouseEvent)
    def _process_mouse(self, event: MouseEvent, ax: Any) -> None:
        if event.type is MouseEventType.leftclick and ax.is_pressed(self.modifier):
            log.debug("Resetting limits to fit data")
            ax.autolimits()
