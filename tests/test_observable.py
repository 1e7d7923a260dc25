from plotnav.core.observable import Observable, lift, release_lift


def test_setting_value_notifies_listeners_in_order():
    cell = Observable(1)
    seen = []
    cell.subscribe(lambda v: seen.append(("a", v)))
    cell.subscribe(lambda v: seen.append(("b", v)))

    cell.value = 2

    assert seen == [("a", 2), ("b", 2)]
    assert cell.value == 2


def test_unsubscribe_and_clear():
    cell = Observable(0)
    seen = []
    listener = cell.subscribe(seen.append)
    cell.unsubscribe(listener)
    cell.unsubscribe(listener)  # unknown listener is ignored
    cell.value = 1
    assert seen == []

    cell.subscribe(seen.append)
    cell.clear_listeners()
    cell.value = 2
    assert seen == []
    assert cell.listeners == ()


def test_listener_may_unsubscribe_during_notification():
    cell = Observable(0)
    seen = []

    def once(value):
        seen.append(value)
        cell.unsubscribe(once)

    cell.subscribe(once)
    cell.value = 1
    cell.value = 2
    assert seen == [1]


def test_lift_tracks_sources_until_released():
    a = Observable(2)
    b = Observable(3)
    total = lift(lambda x, y: x + y, a, b)
    assert total.value == 5

    a.value = 10
    assert total.value == 13

    release_lift(total)
    assert a.listeners == ()
    assert b.listeners == ()
    b.value = 100
    assert total.value == 13
