from __future__ import annotations

from functools import partial, singledispatchmethod

import pytest

from plotnav.interactions.dispatch import Interaction, accepts, dispatch, process_interaction
from plotnav.interactions.events import KeysEvent, MouseEvent, MouseEventType, ScrollEvent
from plotnav.interactions.registry import (
    InteractionRegistry,
    activate_interaction,
    deactivate_interaction,
    deregister_interaction,
    register_interaction,
)


class Parent:
    def __init__(self):
        self.interactions = InteractionRegistry()


def _mouse(kind=MouseEventType.leftclick):
    return MouseEvent(kind, (1.0, 1.0), (0.0, 0.0), (10.0, 10.0), (0.0, 0.0))


class ScrollCounter(Interaction):
    def __init__(self):
        self.count = 0

    @singledispatchmethod
    def process_interaction(self, event, parent):
        return None

    @process_interaction.register(ScrollEvent)
    def _scroll(self, event, parent):
        self.count += 1


def test_typed_handler_ignores_event_kinds_without_overload():
    handler = ScrollCounter()
    process_interaction(handler, _mouse(), Parent())
    process_interaction(handler, KeysEvent(), Parent())
    assert handler.count == 0
    process_interaction(handler, ScrollEvent(0, 1), Parent())
    assert handler.count == 1


def test_annotated_callable_only_receives_matching_events():
    seen = []

    def on_scroll(event: ScrollEvent, parent):
        seen.append(event)

    process_interaction(on_scroll, _mouse(), Parent())
    process_interaction(on_scroll, ScrollEvent(0, 2), Parent())
    assert seen == [ScrollEvent(0, 2)]


def test_union_annotation_accepts_each_member():
    seen = []

    def on_input(event: MouseEvent | KeysEvent, parent):
        seen.append(type(event))

    for event in (_mouse(), KeysEvent(), ScrollEvent(0, 1)):
        process_interaction(on_input, event, Parent())
    assert seen == [MouseEvent, KeysEvent]


def test_accepts_decorator_overrides_annotations():
    seen = []

    @accepts(KeysEvent)
    def on_keys(event, parent):
        seen.append(event)

    process_interaction(on_keys, _mouse(), Parent())
    process_interaction(on_keys, KeysEvent(), Parent())
    assert seen == [KeysEvent()]


def test_callable_with_wrong_arity_is_skipped():
    calls = []

    def one_arg(event):
        calls.append(event)

    process_interaction(one_arg, _mouse(), Parent())
    assert calls == []


def test_unannotated_callable_and_partial_receive_everything():
    seen = []

    def record(tag, event, parent):
        seen.append((tag, type(event)))

    process_interaction(partial(record, "p"), _mouse(), Parent())
    process_interaction(lambda e, p: seen.append(("l", type(e))), ScrollEvent(0, 1), Parent())
    assert seen == [("p", MouseEvent), ("l", ScrollEvent)]


def test_non_callable_handler_is_ignored():
    assert process_interaction(object(), _mouse(), Parent()) is None


def test_dispatch_skips_inactive_and_restores_on_activate():
    parent = Parent()
    handler = register_interaction(parent, "scroll", ScrollCounter())

    deactivate_interaction(parent, "scroll")
    dispatch(parent, ScrollEvent(0, 1))
    assert handler.count == 0

    activate_interaction(parent, "scroll")
    dispatch(parent, ScrollEvent(0, 1))
    assert handler.count == 1


def test_dispatch_propagates_handler_errors_without_rollback():
    parent = Parent()
    first = register_interaction(parent, "first", ScrollCounter())

    def boom(event, p):
        raise RuntimeError("handler failed")

    register_interaction(parent, "boom", boom)
    with pytest.raises(RuntimeError, match="handler failed"):
        dispatch(parent, ScrollEvent(0, 1))
    assert first.count == 1


def test_handlers_may_deregister_during_dispatch():
    parent = Parent()
    seen = []

    def remove_self(event, p):
        seen.append("self")
        deregister_interaction(p, "remover")

    register_interaction(parent, "remover", remove_self)
    register_interaction(parent, "other", lambda e, p: seen.append("other"))

    dispatch(parent, _mouse())
    dispatch(parent, _mouse())
    assert seen == ["self", "other", "other"]
