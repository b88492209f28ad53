# src/doru/todo/todo_storage.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import sqlite3
from collections.abc import Iterable
from pathlib import Path

from ..core.ports import TodoStorage
from ..errors import (
    StorageError,
    StorageFileError,
    StorageParseError,
    StorageSerializeError,
)
from .todo_models import Todo, TodoStatus

logger = logging.getLogger(__name__)


class JsonTodoStorage:
    """
    JSON file storage: one array of {"id", "content", "status"} objects.

    - an empty or whitespace-only file loads as []
    - save writes a sibling .tmp file and os.replace()s it over the target,
      so a failed write leaves the previous contents intact
    """

    def load(self, path: str | Path) -> list[Todo]:
        path = Path(path)
        try:
            raw = path.read_text("utf-8")
        except UnicodeDecodeError as exc:
            raise StorageParseError(path) from exc
        except OSError as exc:
            raise StorageFileError(path) from exc

        if not raw.strip():
            logger.debug("Empty todo file %s", path)
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageParseError(path) from exc

        if not isinstance(data, list):
            raise StorageParseError(path)

        try:
            todos = [Todo.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageParseError(path) from exc

        logger.debug("Loaded %d todos from %s", len(todos), path)
        return todos

    def save(self, todos: Iterable[Todo], path: str | Path) -> None:
        path = Path(path)
        try:
            payload = json.dumps([t.to_dict() for t in todos], ensure_ascii=False, indent=2)
        except (AttributeError, TypeError, ValueError) as exc:
            raise StorageSerializeError() from exc

        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageFileError(path, "write") from exc

        logger.debug("Saved todos to %s", path)


class SqliteTodoStorage:
    """
    SQLite file storage.

    One table, rewritten as a whole on every save; `position` keeps list order.
    Each call opens its own short-lived connection. load opens the file
    read-only, so it never creates a database where none exists.
    """

    _SCHEMA = """
        CREATE TABLE IF NOT EXISTS todos (
            position INTEGER PRIMARY KEY,
            id INTEGER NOT NULL,
            content TEXT NOT NULL,
            status TEXT NOT NULL
        )
    """

    def load(self, path: str | Path) -> list[Todo]:
        path = Path(path)
        try:
            conn = sqlite3.connect(path.resolve().as_uri() + "?mode=ro", uri=True)
        except sqlite3.Error as exc:
            raise StorageFileError(path) from exc

        try:
            conn.row_factory = sqlite3.Row
            cur = conn.cursor()
            cur.execute("SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'todos'")
            if cur.fetchone() is None:
                logger.debug("No todos table in %s", path)
                return []
            cur.execute("SELECT id, content, status FROM todos ORDER BY position ASC")
            rows = cur.fetchall()
        except sqlite3.OperationalError as exc:
            raise StorageFileError(path) from exc
        except sqlite3.DatabaseError as exc:
            raise StorageParseError(path) from exc
        finally:
            conn.close()

        try:
            todos = [_todo_from_row(r) for r in rows]
        except (TypeError, ValueError) as exc:
            raise StorageParseError(path) from exc

        logger.debug("Loaded %d todos from %s", len(todos), path)
        return todos

    def save(self, todos: Iterable[Todo], path: str | Path) -> None:
        path = Path(path)
        try:
            rows = [(pos, t.id, t.content, t.status.value) for pos, t in enumerate(todos)]
        except (AttributeError, TypeError) as exc:
            raise StorageSerializeError() from exc

        try:
            conn = sqlite3.connect(str(path), timeout=30.0)
        except sqlite3.Error as exc:
            raise StorageFileError(path, "write") from exc

        try:
            with conn:
                conn.execute(self._SCHEMA)
                conn.execute("DELETE FROM todos")
                conn.executemany(
                    "INSERT INTO todos(position, id, content, status) VALUES (?, ?, ?, ?)",
                    rows,
                )
        except sqlite3.Error as exc:
            raise StorageFileError(path, "write") from exc
        finally:
            conn.close()

        logger.debug("Saved %d todos to %s", len(rows), path)


def _todo_from_row(row: sqlite3.Row) -> Todo:
    todo_id = int(row["id"])
    if todo_id < 0:
        raise ValueError(f"todo id must not be negative, got {todo_id}")
    return Todo(id=todo_id, content=str(row["content"]), status=TodoStatus(row["status"]))


STORAGES: dict[str, type[TodoStorage]] = {
    "json": JsonTodoStorage,
    "sqlite": SqliteTodoStorage,
}


def get_storage(name: str) -> TodoStorage:
    """Instantiate a storage backend by name ("json" or "sqlite")."""
    key = (name or "").strip().lower()
    cls = STORAGES.get(key)
    if cls is None:
        raise StorageError(f"Unknown storage backend: {name!r} (expected one of {', '.join(STORAGES)})")
    return cls()


def default_filename(name: str) -> str:
    return "todos.sqlite3" if (name or "").strip().lower() == "sqlite" else "todos.json"
