import logging

import pytest

from minstore import (
    ReentrantDispatchError,
    apply_middleware,
    create_store,
    log_actions
)
from minstore.counter import Decrement, Increment, counter


def test_middleware_runs_outermost_first():
    calls = []

    def recording(label):
        def middleware(store, next_dispatch, action):
            calls.append(f"{label}:before")
            result = next_dispatch(action)
            calls.append(f"{label}:after")
            return result

        return middleware

    store = create_store(counter, middleware=[recording("a"), recording("b")])
    store.dispatch(Increment())

    assert calls == ["a:before", "b:before", "b:after", "a:after"]
    assert store.get_state() == 1


def test_middleware_not_applied_to_init_action():
    seen = []

    def recording(store, next_dispatch, action):
        seen.append(action.type)
        return next_dispatch(action)

    create_store(counter, middleware=[recording])

    assert seen == []


def test_middleware_can_rewrite_actions():
    def invert(store, next_dispatch, action):
        if isinstance(action, Increment):
            return next_dispatch(Decrement())

        return next_dispatch(action)

    store = create_store(counter, middleware=[invert])
    store.dispatch(Increment())

    assert store.get_state() == -1


def test_middleware_dispatch_reenters_chain():
    calls = []

    def doubling(store, next_dispatch, action):
        calls.append(action.type)
        result = next_dispatch(action)

        if len(calls) == 1:
            store.dispatch(action)

        return result

    store = create_store(counter, middleware=[doubling])
    store.dispatch(Increment())

    assert calls == ["INCREMENT", "INCREMENT"]
    assert store.get_state() == 2


def test_enhanced_store_shares_subscribers_and_state():
    store = create_store(counter, middleware=[log_actions])
    calls = []

    unsubscribe = store.subscribe(lambda: calls.append(store.get_state()))
    store.dispatch(Increment())
    unsubscribe()
    store.dispatch(Increment())

    assert calls == [1]
    assert store.get_state() == 2


def test_enhanced_store_rejects_reentrant_dispatch():
    store = create_store(counter, middleware=[log_actions])

    def listener():
        store.dispatch(Increment())

    store.subscribe(listener)

    with pytest.raises(ReentrantDispatchError):
        store.dispatch(Increment())

    assert not store.is_dispatching


def test_log_actions_logs_type_and_state(caplog):
    store = create_store(counter)
    enhanced = apply_middleware([log_actions])(store)

    with caplog.at_level(logging.DEBUG, logger="minstore._middleware"):
        enhanced.dispatch(Increment())

    assert "INCREMENT" in caplog.text
    assert "Next state: 1" in caplog.text
