from uuid import uuid4

from pydantic import BaseModel, ConfigDict


__all__ = (
    "Action",
    "INIT_ACTION_PREFIX",

    "init_action"
)


INIT_ACTION_PREFIX = "@@minstore/INIT."


class Action(BaseModel):
    """Immutable record describing something that happened.

    Subclasses pin ``type`` with a ``Literal`` default and declare the
    payload fields their kind carries.
    """

    model_config = ConfigDict(frozen=True)

    type: str


def init_action() -> Action:
    return Action(type=f"{INIT_ACTION_PREFIX}{uuid4().hex}")
