__all__ = (
    "InvalidActionError",
    "ReducerContractError",
    "ReentrantDispatchError",
    "StoreError"
)


class StoreError(Exception):
    pass


class ReentrantDispatchError(StoreError):
    def __init__(self) -> None:
        super().__init__("cannot dispatch while a dispatch is in progress")


class ReducerContractError(StoreError):
    pass


class InvalidActionError(StoreError):
    pass
