# src/doru/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object per invocation, built by Settings.from_env().
- Invalid values fall back to defaults instead of failing at startup.
- config.example.py at the repo root documents every variable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "DORU"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Logging ----
    log_level: str
    log_dir: Path
    log_file_enabled: bool

    # ---- Storage ----
    data_dir: Path
    storage_backend: str
    # None: <data_dir>/<backend default filename>
    todos_path: Path | None

    @staticmethod
    def from_env() -> "Settings":
        data_dir = _env_path(_k("DATA_DIR"), Path.home() / ".doru") or Path.home() / ".doru"

        return Settings(
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_dir=_env_path(_k("LOG_DIR"), data_dir) or data_dir,
            log_file_enabled=_env_bool(_k("LOG_FILE"), True),
            data_dir=data_dir,
            storage_backend=_env(_k("STORAGE"), "json").strip().lower() or "json",
            todos_path=_env_path(_k("PATH"), None),
        )


def get_settings(*, dotenv: bool = True) -> Settings:
    """Build Settings from the environment, loading the nearest .env above the cwd first."""
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
