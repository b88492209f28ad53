# src/doru/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- resolves where the todo file lives (flag > DORU_PATH > data dir default),
- makes sure the file and its directory exist,
- picks the storage backend and loads the manager from it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings
from ..core.ports import TodoStorage
from ..todo.todo_manager import TodoManager
from ..todo.todo_storage import default_filename

logger = logging.getLogger(__name__)


def resolve_todos_path(
    settings: Settings,
    override: str | Path | None = None,
    *,
    backend: str | None = None,
) -> Path:
    """Pick the todo file; the data dir default is named after `backend` (settings backend if None)."""
    if override:
        return Path(override).expanduser()
    if settings.todos_path is not None:
        return Path(settings.todos_path)
    return Path(settings.data_dir) / default_filename(backend or settings.storage_backend)


def ensure_storage_exists(path: Path) -> None:
    """Create parent directories and an empty file if missing (OSError propagates)."""
    if path.exists():
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    logger.info("Created empty todo file %s", path)


def load_manager(storage: TodoStorage, path: Path) -> TodoManager:
    manager = TodoManager(storage.load(path))
    logger.info("Loaded %d todos from %s (last id=%s)", len(manager), path, manager.counter)
    return manager


def save_manager(storage: TodoStorage, manager: TodoManager, path: Path) -> None:
    storage.save(manager.list_all(), path)
    logger.info("Saved %d todos to %s", len(manager), path)
