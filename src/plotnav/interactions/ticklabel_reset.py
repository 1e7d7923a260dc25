"""Debounced restore of an axis' tick-label space after zoom/pan gestures.

While the user scrolls or drags, the reserved tick-label space is pinned to its
current size so the layout does not jitter as tick labels change width. Once no
further zoom/pan happened for ``reset_delay`` seconds, the previous setting
(usually ``"auto"``) is restored, exactly once per quiet period.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from PyQt5.QtCore import QTimer

log = logging.getLogger(__name__)

__all__ = ["ResetTimer", "TickLabelSpaceReset", "qt_timer_factory"]


class ResetTimer(Protocol):
    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...


TimerFactory = Callable[[float, Callable[[], None]], ResetTimer]


def qt_timer_factory(delay_s: float, callback: Callable[[], None]) -> QTimer:
    """Single-shot QTimer calling ``callback`` after ``delay_s`` seconds."""

    timer = QTimer()
    timer.setSingleShot(True)
    timer.setInterval(max(int(delay_s * 1000), 0))
    timer.timeout.connect(callback)
    return timer


class TickLabelSpaceReset:
    """Owns the pending reset timer and the tick-label space snapshot."""

    def __init__(self, reset_delay: float = 0.2, timer_factory: TimerFactory | None = None) -> None:
        self.reset_delay = float(reset_delay)
        self.timer_factory: TimerFactory | None = timer_factory
        self.reset_timer: ResetTimer | None = None
        self.prev_xticklabelspace: Any = None
        self.prev_yticklabelspace: Any = None
        self._axis: Any = None

    @property
    def pending(self) -> bool:
        return self.reset_timer is not None

    def trigger(self, axis: Any) -> None:
        """Pin the tick-label space (first call of a gesture) and (re)start the timer."""

        if self.reset_timer is not None:
            self._discard_timer()
        else:
            self.prev_xticklabelspace = axis.xticklabelspace.value
            self.prev_yticklabelspace = axis.yticklabelspace.value
            actual_x, actual_y = axis.tick_label_space()
            axis.xticklabelspace.value = float(actual_x)
            axis.yticklabelspace.value = float(actual_y)
            log.debug("Pinned tick label space to (%.1f, %.1f)", actual_x, actual_y)

        self._axis = axis
        self.reset_timer = self._factory_for(axis)(self.reset_delay, self._on_timeout)
        self.reset_timer.start()

    def cancel(self, restore: bool = True) -> None:
        """Stop a pending reset, restoring the snapshot now when ``restore`` is set."""

        if self.reset_timer is None:
            return
        self._discard_timer()
        if restore:
            self._restore()
        self._axis = None

    def _factory_for(self, axis: Any) -> TimerFactory:
        # an explicit factory wins, then the axis' one, then a real QTimer
        return self.timer_factory or getattr(axis, "timer_factory", None) or qt_timer_factory

    def _on_timeout(self) -> None:
        if self.reset_timer is None:
            return
        self._discard_timer()
        self._restore()
        self._axis = None

    def _restore(self) -> None:
        axis = self._axis
        if axis is None:
            return
        axis.xticklabelspace.value = self.prev_xticklabelspace
        axis.yticklabelspace.value = self.prev_yticklabelspace
        log.debug(
            "Restored tick label space to (%r, %r)",
            self.prev_xticklabelspace,
            self.prev_yticklabelspace,
        )

    def _discard_timer(self) -> None:
        timer, self.reset_timer = self.reset_timer, None
        if timer is None:
            return
        timer.stop()
        delete_later = getattr(timer, "deleteLater", None)
        if delete_later is not None:
            delete_later()
