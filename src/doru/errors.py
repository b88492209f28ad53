# src/doru/errors.py

"""Exception hierarchy shared by the manager, the storages and the CLI."""

from __future__ import annotations

from pathlib import Path


class DoruError(Exception):
    """Base class for every error raised by doru."""


class TodoNotFoundError(DoruError, LookupError):
    """No todo with the given id exists."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo with id {todo_id} not found!")
        self.todo_id = todo_id


class StorageError(DoruError):
    """Base class for load/save failures."""


class StorageFileError(StorageError):
    def __init__(self, path: str | Path, operation: str = "read") -> None:
        verb = "reading from" if operation == "read" else "writing to"
        super().__init__(f"Failed {verb} {path}!")
        self.path = Path(path)
        self.operation = operation


class StorageParseError(StorageError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Failed parsing {path}!")
        self.path = Path(path)


class StorageSerializeError(StorageError):
    def __init__(self) -> None:
        super().__init__("Failed serializing todos!")
