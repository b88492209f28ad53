# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from doru.todo.todo_manager import TodoManager


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with doru.config.Settings.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep CLI tests isolated from DORU_* variables and ~/.doru.
    """
    return SimpleNamespace(
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        log_file_enabled=False,
        data_dir=tmp_path / "data",
        storage_backend="json",
        todos_path=None,
    )


@pytest.fixture()
def manager() -> TodoManager:
    """Manager holding three open todos with ids 1, 2, 3."""
    m = TodoManager.empty()
    m.add("Lorem")
    m.add("Ipsum")
    m.add("Dolor")
    return m
