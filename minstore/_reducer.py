from __future__ import annotations

import logging

from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Iterable,
    Mapping,
    Optional,
    TypeVar,
    Union
)

from ._action import Action
from ._errors import ReducerContractError


__all__ = (
    "CombinedState",
    "Reducer",
    "ReducerMap",

    "combine_reducers"
)


A = TypeVar("A", bound=Action)
S = TypeVar("S")


_logger = logging.getLogger(__name__)


Reducer = Callable[[Optional[S], A], S]
CombinedState = Mapping[str, Any]
ReducerMap = Union[Mapping[str, Reducer], Iterable[tuple[str, Reducer]]]


_EMPTY_STATE: CombinedState = MappingProxyType({})


def _freeze_reducer_map(reducers: ReducerMap) -> tuple[tuple[str, Reducer], ...]:
    if isinstance(reducers, Mapping):
        return tuple(reducers.items())

    pairs: list[tuple[str, Reducer]] = []
    seen: set[str] = set()

    for key, reducer in reducers:
        if key in seen:
            raise ValueError(f"Duplicate reducer key: {key!r}")

        seen.add(key)
        pairs.append((key, reducer))

    return tuple(pairs)


def combine_reducers(reducers: ReducerMap) -> Reducer[CombinedState, Action]:
    """Combine slice reducers into one reducer over a keyed state tree.

    Every child receives the same action together with its own slice, in
    the order the reducers were given. The incoming composite is returned
    unchanged when no slice changed.
    """
    pairs = _freeze_reducer_map(reducers)
    keys = frozenset(key for key, _ in pairs)
    warned_unexpected = False

    def combination(
        state: Optional[CombinedState],
        action: Action
    ) -> CombinedState:
        nonlocal warned_unexpected

        if state is None:
            state = _EMPTY_STATE

        has_changed = False
        next_state: dict[str, Any] = {}

        for key, reducer in pairs:
            previous_slice = state.get(key)
            next_slice = reducer(previous_slice, action)

            if next_slice is None:
                raise ReducerContractError(
                    f"Reducer for slice {key!r} returned None "
                    f"for action {action.type!r}"
                )

            next_state[key] = next_slice
            has_changed = has_changed or next_slice is not previous_slice

        unexpected = state.keys() - keys

        if unexpected and not warned_unexpected:
            _logger.warning(
                "Ignoring unexpected state keys with no reducer: %s",
                ", ".join(sorted(unexpected))
            )
            warned_unexpected = True

        if (
            not has_changed
            and len(state) == len(pairs)
            and isinstance(state, MappingProxyType)
        ):
            return state

        return MappingProxyType(next_state)

    return combination
