# PlotNav
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Axis state shared by the interaction handlers.

``targetlimits`` is the single mutation point for all handlers; ``limits``
follows it and is what the backend displays.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from plotnav.app import flags
from plotnav.app.settings import InteractionSettings
from plotnav.backends.abstract_backend import AxisBackend
from plotnav.core.geometry import Rect
from plotnav.core.observable import Observable
from plotnav.interactions import registry
from plotnav.interactions.dispatch import dispatch
from plotnav.interactions.drag_pan import DragPan
from plotnav.interactions.limit_reset import LimitReset
from plotnav.interactions.rectangle_zoom import RectangleZoom
from plotnav.interactions.registry import InteractionRegistry
from plotnav.interactions.scroll_zoom import ScrollZoom
from plotnav.interactions.ticklabel_reset import TimerFactory

log = logging.getLogger(__name__)

__all__ = ["DEFAULT_LIMITS", "Axis", "add_default_interactions"]

DEFAULT_LIMITS = Rect((0.0, 0.0), (10.0, 10.0))

DEFAULT_INTERACTIONS = ("rectanglezoom", "limitreset", "scrollzoom", "dragpan")


class Axis:
    """2-D axis model: reactive limits, locks, key bindings and interactions."""

    def __init__(
        self,
        backend: AxisBackend,
        *,
        settings: InteractionSettings | None = None,
        limits: Rect = DEFAULT_LIMITS,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self.settings = settings or InteractionSettings()
        self.timer_factory = timer_factory
        s = self.settings

        self.targetlimits: Observable[Rect] = Observable(limits)
        self.limits: Observable[Rect] = Observable(limits)

        self.xreversed = Observable(False)
        self.yreversed = Observable(False)
        self.xzoomlock = Observable(False)
        self.yzoomlock = Observable(False)
        self.xpanlock = Observable(False)
        self.ypanlock = Observable(False)
        self.xrectzoom = Observable(s.xrectzoom)
        self.yrectzoom = Observable(s.yrectzoom)

        self.xzoomkey = Observable(s.xzoomkey)
        self.yzoomkey = Observable(s.yzoomkey)
        self.xpankey = Observable(s.xpankey)
        self.ypankey = Observable(s.ypankey)
        self.panbutton = Observable(s.panbutton)

        self.xticklabelspace: Observable[Any] = Observable("auto")
        self.yticklabelspace: Observable[Any] = Observable("auto")

        self.interactions = InteractionRegistry()

        self.scene = backend
        backend.attach(self)

        self.targetlimits.subscribe(self._on_targetlimits)
        self.limits.subscribe(backend.apply_limits)
        self.xreversed.subscribe(self._reapply_limits)
        self.yreversed.subscribe(self._reapply_limits)
        self.xticklabelspace.subscribe(self._on_ticklabelspace)
        self.yticklabelspace.subscribe(self._on_ticklabelspace)
        backend.apply_limits(self.limits.value)

    def __repr__(self) -> str:
        return f"Axis(limits={self.limits.value}, interactions={list(self.interactions)})"

    # ------------------------------------------------------------------ interactions
    def register_interaction(self, name: str, interaction: Any = None) -> Any:
        return registry.register_interaction(self, name, interaction)

    def deregister_interaction(self, name: str) -> Any:
        return registry.deregister_interaction(self, name)

    def activate_interaction(self, name: str) -> None:
        registry.activate_interaction(self, name)

    def deactivate_interaction(self, name: str) -> None:
        registry.deactivate_interaction(self, name)

    def dispatch(self, event: Any) -> None:
        """Entry point for the backend's input pump."""

        dispatch(self, event)

    # ------------------------------------------------------------------ queries
    def is_pressed(self, binding: Any) -> bool:
        """Return whether ``binding`` (key, button, tuple of them, or None) is held."""

        if binding is None or binding is False:
            return False
        if isinstance(binding, (tuple, list, set, frozenset)):
            return bool(binding) and all(self.scene.is_pressed(k) for k in binding)
        return bool(self.scene.is_pressed(binding))

    def tick_label_space(self) -> tuple[float, float]:
        return self.scene.tick_label_space()

    # ------------------------------------------------------------------ limits
    def autolimits(self) -> None:
        """Fit the target limits to the plotted data plus the autolimit margin."""

        bounds = self.scene.data_bounds()
        if bounds is None:
            self.targetlimits.value = DEFAULT_LIMITS
            return

        mx, my = self.settings.autolimit_margin
        x, w = _expand(bounds.origin[0], bounds.widths[0], mx)
        y, h = _expand(bounds.origin[1], bounds.widths[1], my)
        self.targetlimits.value = Rect((x, y), (w, h))
        log.debug("Autolimits -> %s", self.targetlimits.value)

    def reset_limits(self, limits: Rect) -> None:
        self.targetlimits.value = limits

    def _on_targetlimits(self, rect: Rect) -> None:
        self.limits.value = rect

    def _reapply_limits(self, _value: Any) -> None:
        self.scene.apply_limits(self.limits.value)

    def _on_ticklabelspace(self, _value: Any) -> None:
        self.scene.set_tick_label_space(self.xticklabelspace.value, self.yticklabelspace.value)


def _expand(origin: float, width: float, margin: float) -> tuple[float, float]:
    if width == 0:
        return origin - 0.5, 1.0
    pad = width * margin
    return origin - pad, width + 2 * pad


def add_default_interactions(
    axis: Axis, is_enabled: Callable[..., bool] = flags.is_enabled
) -> dict[str, Any]:
    """Register the built-in interactions that are not switched off by feature flags."""

    s = axis.settings
    factories = {
        "rectanglezoom": lambda: RectangleZoom(),
        "limitreset": lambda: LimitReset(s.limit_reset_modifier),
        "scrollzoom": lambda: ScrollZoom(s.scroll_speed, s.reset_delay, axis.timer_factory),
        "dragpan": lambda: DragPan(s.reset_delay, axis.timer_factory),
    }
    registered: dict[str, Any] = {}
    for name in DEFAULT_INTERACTIONS:
        if not is_enabled(name, default=True):
            log.info("Default interaction %r disabled by feature flag", name)
            continue
        registered[name] = axis.register_interaction(name, factories[name]())
    return registered
