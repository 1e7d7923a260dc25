import pytest

from plotnav.interactions.ticklabel_reset import TickLabelSpaceReset


def test_first_trigger_pins_actual_space(axis, backend, timers):
    reset = TickLabelSpaceReset(0.2, timers)
    reset.trigger(axis)

    assert axis.xticklabelspace.value == 20.0
    assert axis.yticklabelspace.value == 40.0
    assert backend.reserved_tick_space == (20.0, 40.0)
    assert reset.pending
    assert timers.timers[0].delay == 0.2


def test_retrigger_replaces_timer_and_keeps_snapshot(axis, backend, timers):
    reset = TickLabelSpaceReset(0.2, timers)
    reset.trigger(axis)
    backend.natural_tick_space = (99.0, 99.0)
    reset.trigger(axis)

    first, second = timers.timers
    assert not first.running and first.deleted
    assert second.running
    # pinned values come from the first trigger only
    assert backend.reserved_tick_space == (20.0, 40.0)
    assert reset.prev_xticklabelspace == "auto"


def test_timeout_restores_previous_setting_once(axis, backend, timers):
    axis.yticklabelspace.value = 55.0
    reset = TickLabelSpaceReset(0.2, timers)
    reset.trigger(axis)
    reset.trigger(axis)
    assert backend.reserved_tick_space == (20.0, 40.0)

    timers.fire_all()

    assert backend.reserved_tick_space == ("auto", 55.0)
    assert not reset.pending
    assert timers.running == []


def test_new_gesture_after_quiet_period_takes_fresh_snapshot(axis, backend, timers):
    reset = TickLabelSpaceReset(0.2, timers)
    reset.trigger(axis)
    timers.fire_all()

    axis.xticklabelspace.value = 12.0
    reset.trigger(axis)
    timers.fire_all()
    assert axis.xticklabelspace.value == 12.0


@pytest.mark.parametrize("restore", [True, False])
def test_cancel_stops_pending_timer(axis, backend, timers, restore):
    reset = TickLabelSpaceReset(0.2, timers)
    reset.trigger(axis)

    reset.cancel(restore=restore)

    assert not reset.pending
    assert timers.timers[0].deleted
    expected = ("auto", "auto") if restore else (20.0, 40.0)
    assert backend.reserved_tick_space == expected


def test_cancel_without_pending_timer_is_harmless(axis, backend):
    reset = TickLabelSpaceReset(0.2)
    reset.cancel()
    assert backend.reserved_tick_space == ("auto", "auto")


def test_falls_back_to_axis_timer_factory(axis, timers):
    reset = TickLabelSpaceReset(0.4)
    reset.trigger(axis)
    assert [t.delay for t in timers.timers] == [0.4]
