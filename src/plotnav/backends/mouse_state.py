"""Turn raw button/motion/key input into the high-level events handlers consume."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from plotnav.interactions.events import Key, KeysEvent, MouseButton, MouseEvent, MouseEventType

log = logging.getLogger(__name__)

__all__ = ["DOUBLE_CLICK_INTERVAL", "KeyTracker", "MouseStateMachine"]

DOUBLE_CLICK_INTERVAL = 0.2

Pixel = tuple[float, float]


class MouseStateMachine:
    """Classify presses, moves and releases into clicks and drags.

    A drag starts on the first move while a button is held; its
    ``prev_position`` is where the button went down. Releasing without a drag
    yields a click, or a double click when it follows the previous click of the
    same button within ``double_click_interval`` seconds. Only one button is
    tracked at a time; presses of other buttons during a gesture are ignored.
    """

    def __init__(
        self,
        emit: Callable[[MouseEvent], None],
        to_data: Callable[[Pixel], tuple[float, float]],
        *,
        double_click_interval: float = DOUBLE_CLICK_INTERVAL,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._emit = emit
        self._to_data = to_data
        self.double_click_interval = double_click_interval
        self._clock = clock

        self.pressed: MouseButton | None = None
        self.dragging = False
        self._last_pixel: Pixel = (0.0, 0.0)
        self._last_data: tuple[float, float] = (0.0, 0.0)
        self._last_click: dict[MouseButton, float] = {}

    @property
    def last_pixel(self) -> Pixel:
        return self._last_pixel

    def press(self, button: MouseButton, pixel: Pixel) -> None:
        if self.pressed is not None:
            return
        data = self._to_data(pixel)
        self.pressed = button
        self.dragging = False
        self._send(MouseEventType.for_button(button, "down"), pixel, data)

    def move(self, pixel: Pixel) -> None:
        data = self._to_data(pixel)
        button = self.pressed
        if button is None:
            self._send(MouseEventType.over, pixel, data)
        elif not self.dragging:
            self.dragging = True
            log.debug("%s drag started at %s", button.value, pixel)
            self._send(MouseEventType.for_button(button, "dragstart"), pixel, data)
        else:
            self._send(MouseEventType.for_button(button, "drag"), pixel, data)

    def release(self, button: MouseButton, pixel: Pixel) -> None:
        if button is not self.pressed:
            return
        data = self._to_data(pixel)
        if self.dragging:
            self._send(MouseEventType.for_button(button, "dragstop"), pixel, data)
        else:
            now = self._clock()
            last = self._last_click.get(button)
            if last is not None and now - last <= self.double_click_interval:
                self._last_click.pop(button, None)
                kind = "doubleclick"
            else:
                self._last_click[button] = now
                kind = "click"
            self._send(MouseEventType.for_button(button, kind), pixel, data)
        self._send(MouseEventType.for_button(button, "up"), pixel, data)
        self.pressed = None
        self.dragging = False

    def enter(self, pixel: Pixel) -> None:
        self._send(MouseEventType.enter, pixel, self._to_data(pixel))

    def leave(self, pixel: Pixel) -> None:
        self._send(MouseEventType.out, pixel, self._to_data(pixel))

    def _send(self, kind: MouseEventType, pixel: Pixel, data: tuple[float, float]) -> None:
        event = MouseEvent(
            type=kind,
            position=data,
            prev_position=self._last_data,
            pixel=pixel,
            prev_pixel=self._last_pixel,
        )
        self._last_pixel = pixel
        self._last_data = data
        self._emit(event)


class KeyTracker:
    """Track held keys and emit a :class:`KeysEvent` whenever the set changes."""

    def __init__(self, emit: Callable[[KeysEvent], None]) -> None:
        self._emit = emit
        self._held: set[Key] = set()

    @property
    def held(self) -> frozenset:
        return frozenset(self._held)

    def is_pressed(self, key: Any) -> bool:
        return key in self._held

    def press(self, key: Key | None) -> None:
        if key is None or key in self._held:
            return
        self._held.add(key)
        self._emit(KeysEvent(self.held))

    def release(self, key: Key | None) -> None:
        if key is None or key not in self._held:
            return
        self._held.discard(key)
        self._emit(KeysEvent(self.held))

    def clear(self) -> None:
        """Forget all held keys (e.g. when the canvas loses focus)."""

        if self._held:
            self._held.clear()
            self._emit(KeysEvent(self.held))
