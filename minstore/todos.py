"""Todo-list state: actions, reducers, action creators and selectors."""

from __future__ import annotations

import itertools

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from ._action import Action
from ._reducer import CombinedState, combine_reducers
from ._store import Store, create_store


__all__ = (
    "AddTodo",
    "RemoveTodo",
    "SetVisibilityFilter",
    "Todo",
    "TodoAction",
    "TodoList",
    "ToggleTodo",
    "VisibilityFilter",

    "add_todo",
    "create_todo_store",
    "get_visible_todos",
    "set_visibility_filter",
    "todo_app",
    "todos",
    "toggle_todo",
    "visibility_filter"
)


class VisibilityFilter(str, Enum):
    SHOW_ALL = "SHOW_ALL"
    SHOW_ACTIVE = "SHOW_ACTIVE"
    SHOW_COMPLETED = "SHOW_COMPLETED"


class Todo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    completed: bool = False


TodoList = tuple[Todo, ...]


class AddTodo(Action):
    type: Literal["ADD_TODO"] = "ADD_TODO"
    id: int
    text: str


class ToggleTodo(Action):
    type: Literal["TOGGLE_TODO"] = "TOGGLE_TODO"
    id: int


class RemoveTodo(Action):
    """Clears the whole list."""

    type: Literal["REMOVE_TODO"] = "REMOVE_TODO"


class SetVisibilityFilter(Action):
    type: Literal["SET_VISIBILITY_FILTER"] = "SET_VISIBILITY_FILTER"
    filter: VisibilityFilter


TodoAction = Union[AddTodo, ToggleTodo, RemoveTodo, SetVisibilityFilter]


def _todo(state: Todo, action: Action) -> Todo:
    """Reduce one existing item of the list."""
    if isinstance(action, ToggleTodo):
        if state.id != action.id:
            return state

        return state.model_copy(update={"completed": not state.completed})

    return state


def todos(state: Optional[TodoList], action: Action) -> TodoList:
    if state is None:
        state = ()

    if isinstance(action, AddTodo):
        return (*state, Todo(id=action.id, text=action.text))

    if isinstance(action, ToggleTodo):
        toggled = tuple(_todo(item, action) for item in state)

        if all(new is old for new, old in zip(toggled, state)):
            return state

        return toggled

    if isinstance(action, RemoveTodo):
        return () if state else state

    return state


def visibility_filter(
    state: Optional[VisibilityFilter],
    action: Action
) -> VisibilityFilter:
    if state is None:
        state = VisibilityFilter.SHOW_ALL

    if isinstance(action, SetVisibilityFilter):
        return action.filter

    return state


todo_app = combine_reducers((
    ("todos", todos),
    ("visibility_filter", visibility_filter)
))


_todo_ids = itertools.count()


def add_todo(text: str, id: Optional[int] = None) -> AddTodo:
    if id is None:
        id = next(_todo_ids)

    return AddTodo(id=id, text=text)


def toggle_todo(id: int) -> ToggleTodo:
    return ToggleTodo(id=id)


def set_visibility_filter(filter: VisibilityFilter) -> SetVisibilityFilter:
    return SetVisibilityFilter(filter=filter)


def get_visible_todos(todos: TodoList, filter: VisibilityFilter) -> TodoList:
    if filter == VisibilityFilter.SHOW_COMPLETED:
        return tuple(item for item in todos if item.completed)

    if filter == VisibilityFilter.SHOW_ACTIVE:
        return tuple(item for item in todos if not item.completed)

    return todos


def create_todo_store(
    preloaded_state: Optional[CombinedState] = None,
    middleware: tuple = ()
) -> Store[CombinedState, Action]:
    return create_store(todo_app, preloaded_state, middleware)
