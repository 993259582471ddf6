from ._action import Action
from ._errors import (
    InvalidActionError,
    ReducerContractError,
    ReentrantDispatchError,
    StoreError
)
from ._middleware import Dispatch, Middleware, apply_middleware, log_actions
from ._reducer import CombinedState, Reducer, ReducerMap, combine_reducers
from ._registry import Subscriber, SubscriberRegistry, Unsubscribe
from ._store import Store, create_store


__all__ = (
    "Action",
    "CombinedState",
    "Dispatch",
    "InvalidActionError",
    "Middleware",
    "Reducer",
    "ReducerContractError",
    "ReducerMap",
    "ReentrantDispatchError",
    "Store",
    "StoreError",
    "Subscriber",
    "SubscriberRegistry",
    "Unsubscribe",

    "apply_middleware",
    "combine_reducers",
    "create_store",
    "log_actions"
)
