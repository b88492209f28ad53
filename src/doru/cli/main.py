# src/doru/cli/main.py

"""
CLI entrypoint.

One invocation = one unit of work:
load the todo file, run a single command against the manager, save the
whole list back. A missing todo is reported and the save still happens;
a storage failure stops the run with exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .. import __version__
from ..config import Settings, get_settings
from ..errors import StorageError, TodoNotFoundError
from ..logging_setup import setup_logging
from ..todo.todo_storage import STORAGES, get_storage
from .bootstrap import ensure_storage_exists, load_manager, resolve_todos_path, save_manager
from .commands import register_commands

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    # Global options, accepted before or after the subcommand ("doru list -p x.json").
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-p",
        "--path",
        default=argparse.SUPPRESS,
        help="Todo file (default: $DORU_PATH or ~/.doru/todos.json)",
    )
    common.add_argument(
        "--storage",
        choices=sorted(STORAGES),
        default=argparse.SUPPRESS,
        help="Storage backend (default: $DORU_STORAGE or json)",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log debug output to stderr",
    )

    parser = argparse.ArgumentParser(
        prog="doru",
        description="Keep track of small todos in a local file.",
        parents=[common],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    register_commands(subparsers, parents=[common])
    return parser


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)

    if settings is None:
        settings = get_settings()

    verbose = getattr(args, "verbose", False)
    console_level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(
        log_dir=settings.log_dir if settings.log_file_enabled else None,
        console_level=console_level,
    )

    backend = getattr(args, "storage", None) or settings.storage_backend
    try:
        storage = get_storage(backend)
    except StorageError as exc:
        print(exc, file=sys.stderr)
        return 2

    path = resolve_todos_path(settings, getattr(args, "path", None), backend=backend)
    logger.debug("Using %s storage at %s", backend, path)

    try:
        ensure_storage_exists(path)
    except OSError:
        logger.info("Failed reaching storage path %s", path, exc_info=True)
        print(f"Failed reaching storage path {path}!", file=sys.stderr)
        return 1

    try:
        manager = load_manager(storage, path)
    except StorageError as exc:
        logger.info("Load failed: %s", exc)
        print(exc, file=sys.stderr)
        return 1

    try:
        reply = args.handler(manager, args)
    except TodoNotFoundError as exc:
        logger.info("Command %s: %s", args.command, exc)
        reply = str(exc)

    if reply:
        print(reply)

    try:
        save_manager(storage, manager, path)
    except StorageError as exc:
        logger.info("Save failed: %s", exc)
        print(exc, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
