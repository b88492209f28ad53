# src/doru/todo/todo_manager.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..errors import TodoNotFoundError
from .todo_models import Todo, TodoStatus

logger = logging.getLogger(__name__)


class TodoManager:
    """
    In-memory owner of a todo list and its id counter.

    - ids are assigned here only, strictly increasing, never reused
    - the counter starts at the highest adopted id (0 for an empty list)
    - by-id lookups use the first match in list order, so adopted input with
      duplicate ids always resolves to the same todo

    Persistence is not handled here; see todo_storage.
    """

    def __init__(self, todos: Iterable[Todo] | None = None) -> None:
        self._todos: list[Todo] = list(todos or [])
        self._counter: int = max((t.id for t in self._todos), default=0)

    @classmethod
    def empty(cls) -> TodoManager:
        return cls([])

    @property
    def counter(self) -> int:
        """Last assigned id."""
        return self._counter

    def __len__(self) -> int:
        return len(self._todos)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self._todos)

    # ---- queries ----

    def list_all(self) -> list[Todo]:
        return list(self._todos)

    def find_by_id(self, todo_id: int) -> Todo | None:
        return next((t for t in self._todos if t.id == todo_id), None)

    def list_by_status(self, status: TodoStatus) -> list[Todo]:
        return [t for t in self._todos if t.status == status]

    # ---- mutations ----

    def add(self, content: str) -> int:
        self._counter += 1
        self._todos.append(Todo(id=self._counter, content=content))
        logger.debug("Todo added id=%s", self._counter)
        return self._counter

    def edit_content(self, todo_id: int, content: str) -> None:
        todo = self._require(todo_id)
        todo.content = content
        logger.debug("Todo content edited id=%s", todo_id)

    def change_status(self, todo_id: int, status: TodoStatus | str) -> None:
        todo = self._require(todo_id)
        old = todo.status
        todo.status = status
        logger.debug("Todo status changed id=%s %s -> %s", todo_id, old, status)

    def delete(self, todo_id: int) -> None:
        for idx, todo in enumerate(self._todos):
            if todo.id == todo_id:
                del self._todos[idx]
                logger.debug("Todo deleted id=%s", todo_id)
                return
        raise TodoNotFoundError(todo_id)

    def _require(self, todo_id: int) -> Todo:
        todo = self.find_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo
