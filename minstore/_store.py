from __future__ import annotations

import logging

from typing import Generic, Optional, Sequence, TypeVar

from ._action import Action, init_action
from ._errors import (
    InvalidActionError,
    ReducerContractError,
    ReentrantDispatchError
)
from ._reducer import Reducer
from ._registry import Subscriber, SubscriberRegistry, Unsubscribe


__all__ = (
    "Store",

    "create_store"
)


A = TypeVar("A", bound=Action)
S = TypeVar("S")


_logger = logging.getLogger(__name__)


class Store(Generic[S, A]):
    def dispatch(self, action: A) -> A:
        raise NotImplementedError

    def get_state(self) -> S:
        raise NotImplementedError

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        raise NotImplementedError

    @property
    def is_dispatching(self) -> bool:
        raise NotImplementedError


class _DefaultStore(Store[S, A]):
    _reducer: Reducer
    _state: S
    _subscribers: SubscriberRegistry
    _dispatching: bool

    def __init__(
        self,
        reducer: Reducer,
        preloaded_state: Optional[S] = None
    ) -> None:
        self._reducer = reducer
        self._subscribers = SubscriberRegistry()
        self._dispatching = False

        self._state = preloaded_state  # type: ignore[assignment]

        self.dispatch(init_action())  # type: ignore[arg-type]

    @property
    def is_dispatching(self) -> bool:
        return self._dispatching

    def _notify(self) -> None:
        for subscriber in self._subscribers.snapshot():
            try:
                subscriber()
            except Exception:
                _logger.debug("Subscriber %r failed", subscriber, exc_info=True)
                raise

    def dispatch(self, action: A) -> A:
        if self._dispatching:
            raise ReentrantDispatchError

        action_type = getattr(action, "type", None)

        if not isinstance(action_type, str):
            raise InvalidActionError(
                f"Actions must carry a string 'type', got {action!r}"
            )

        _logger.debug("Dispatching %s", action_type)

        self._dispatching = True

        try:
            next_state = self._reducer(self._state, action)

            if next_state is None:
                raise ReducerContractError(
                    f"Reducer returned None for action {action_type!r}"
                )

            self._state = next_state
            self._notify()
        finally:
            self._dispatching = False

        return action

    def get_state(self) -> S:
        return self._state

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        return self._subscribers.add(subscriber)


def create_store(
    reducer: Reducer,
    preloaded_state: Optional[S] = None,
    middleware: Sequence = ()
) -> Store[S, A]:
    """Create a store and initialize it with a private init action.

    The init action's type never collides with a real action, so every
    reducer falls through to its default state.
    """
    store: Store[S, A] = _DefaultStore(reducer, preloaded_state)

    if not middleware:
        return store

    from ._middleware import apply_middleware

    return apply_middleware(list(middleware))(store)
