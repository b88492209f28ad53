# src/doru/todo/todo_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TodoStatus(StrEnum):
    """
    Todo lifecycle status.

    Values are the exact spellings stored on disk. Any status can move to any
    other one; there is no enforced ordering.
    """

    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    @classmethod
    def parse(cls, raw: str) -> TodoStatus:
        """
        Lenient parse for user input.

        Accepts the stored spelling in any case ("InProgress", "inprogress")
        and the kebab-case form ("in-progress").
        """
        key = (raw or "").strip().replace("-", "").replace("_", "").lower()
        for status in cls:
            if status.value.lower() == key:
                return status
        raise ValueError(f"invalid status: {raw!r}")


@dataclass(slots=True)
class Todo:
    id: int
    content: str
    status: TodoStatus = TodoStatus.OPEN

    def __setattr__(self, name: str, value: Any) -> None:
        # id is assigned once, at construction
        if name == "id" and hasattr(self, "id"):
            raise AttributeError("Todo.id is immutable")
        # status is always held as a TodoStatus
        if name == "status":
            value = TodoStatus(value)
        object.__setattr__(self, name, value)

    def __str__(self) -> str:
        tick = "x" if self.status == TodoStatus.DONE else " "
        # Example: "[x] Learn Python         [Done        ] (ID: 42)"
        return f"[{tick}] {self.content:<20} [{self.status.value:<12}] (ID: {self.id})"

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "content": self.content, "status": self.status.value}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Todo:
        """
        Build a Todo from its stored form.

        Strict on purpose (unlike TodoStatus.parse): the status must be spelled
        exactly as written by to_dict. Raises KeyError/TypeError/ValueError.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"todo must be an object, got {type(raw).__name__}")

        todo_id = raw["id"]
        content = raw["content"]
        status = raw["status"]

        if isinstance(todo_id, bool) or not isinstance(todo_id, int):
            raise TypeError(f"todo id must be an integer, got {todo_id!r}")
        if todo_id < 0:
            raise ValueError(f"todo id must not be negative, got {todo_id}")
        if not isinstance(content, str):
            raise TypeError(f"todo content must be a string, got {content!r}")

        return cls(id=todo_id, content=content, status=TodoStatus(status))
