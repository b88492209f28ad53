# src/doru/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The manager never touches the disk; the CLI loads and saves through a
TodoStorage so the backend stays swappable and tests can use a fake.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from ..todo.todo_models import Todo


class TodoStorage(Protocol):
    """
    Load/save contract for a todo list.

    load:
    - missing or unreadable location -> StorageFileError
    - malformed content -> StorageParseError
    - empty but readable source -> []

    save replaces previous contents:
    - location not writable -> StorageFileError
    - todos cannot be encoded -> StorageSerializeError
    """

    def load(self, path: str | Path) -> list[Todo]: ...

    def save(self, todos: Iterable[Todo], path: str | Path) -> None: ...
