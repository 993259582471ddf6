from __future__ import annotations

import logging

from typing import Callable, TypeVar

from ._action import Action
from ._registry import Subscriber, Unsubscribe
from ._store import Store


__all__ = (
    "Dispatch",
    "Middleware",

    "apply_middleware",
    "log_actions"
)


A = TypeVar("A", bound=Action)
S = TypeVar("S")


_logger = logging.getLogger(__name__)


Dispatch = Callable[[A], A]
Middleware = Callable[[Store[S, A], Dispatch, A], A]


def _chain(
    store: Store[S, A],
    middleware: Middleware,
    next_dispatch: Dispatch
) -> Dispatch:
    def dispatch(action: A) -> A:
        return middleware(store, next_dispatch, action)

    return dispatch


def apply_middleware(
    middleware: list[Middleware]
) -> Callable[[Store[S, A]], Store[S, A]]:
    """Return an enhancer wrapping a store's dispatch with ``middleware``.

    The first middleware in the list sees each action first. Middleware that
    dispatches through the store it is handed re-enters the whole chain.
    """
    def apply(original_store: Store[S, A]) -> Store[S, A]:
        class EnhancedStore(Store[S, A]):
            _dispatch: Dispatch

            def dispatch(self, action: A) -> A:
                return self._dispatch(action)

            def get_state(self) -> S:
                return original_store.get_state()

            def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
                return original_store.subscribe(subscriber)

            @property
            def is_dispatching(self) -> bool:
                return original_store.is_dispatching

        enhanced_store = EnhancedStore()
        enhanced_dispatch: Dispatch = original_store.dispatch

        for callable in reversed(middleware):
            enhanced_dispatch = _chain(enhanced_store, callable, enhanced_dispatch)

        enhanced_store._dispatch = enhanced_dispatch

        return enhanced_store

    return apply


def log_actions(store: Store[S, A], next_dispatch: Dispatch, action: A) -> A:
    _logger.debug("Action: %s", action.type)

    result = next_dispatch(action)

    _logger.debug("Next state: %r", store.get_state())

    return result
