from typing import Literal, Optional, Union

from ._action import Action


__all__ = (
    "CounterAction",
    "Decrement",
    "Increment",

    "counter"
)


class Increment(Action):
    type: Literal["INCREMENT"] = "INCREMENT"


class Decrement(Action):
    type: Literal["DECREMENT"] = "DECREMENT"


CounterAction = Union[Increment, Decrement]


def counter(state: Optional[int], action: Action) -> int:
    if state is None:
        state = 0

    if isinstance(action, Increment):
        return state + 1

    if isinstance(action, Decrement):
        return state - 1

    return state
