import pytest

from plotnav.axis import DEFAULT_LIMITS
from plotnav.core.geometry import Rect
from plotnav.interactions.events import Key, MouseButton
from plotnav.interactions.limit_reset import LimitReset


def _click(backend, pixel=(50, 50)):
    backend.press(MouseButton.left, pixel)
    backend.release(MouseButton.left, pixel)


def test_ctrl_click_fits_data_with_margin(axis, backend):
    backend.bounds = Rect((0.0, -1.0), (20.0, 2.0))
    axis.register_interaction("limitreset", LimitReset())

    backend.key_down(Key.left_control)
    _click(backend)

    lims = axis.targetlimits.value
    assert lims.origin == pytest.approx((-1.0, -1.1))
    assert lims.widths == pytest.approx((22.0, 2.2))


def test_plain_click_does_nothing(axis, backend):
    backend.bounds = Rect((0.0, 0.0), (20.0, 2.0))
    axis.register_interaction("limitreset", LimitReset())
    _click(backend)
    assert axis.targetlimits.value == Rect((0, 0), (10, 10))


def test_without_data_falls_back_to_default_limits(axis, backend):
    axis.targetlimits.value = Rect((3, 3), (1, 1))
    axis.register_interaction("limitreset", LimitReset())

    backend.key_down(Key.left_control)
    _click(backend)

    assert axis.targetlimits.value == DEFAULT_LIMITS


def test_custom_modifier(axis, backend):
    backend.bounds = Rect((0.0, 0.0), (1.0, 1.0))
    axis.register_interaction("limitreset", LimitReset(modifier=Key.left_shift))
    # no double clicks: every release counts as a single click
    backend.mouse.double_click_interval = -1.0

    backend.key_down(Key.left_control)
    _click(backend)
    assert axis.targetlimits.value == Rect((0, 0), (10, 10))

    backend.key_down(Key.left_shift)
    _click(backend, (10, 10))
    assert axis.targetlimits.value.widths == pytest.approx((1.1, 1.1))
