# src/doru/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from ..todo.todo_manager import TodoManager
from ..todo.todo_models import TodoStatus

CommandHandler = Callable[[TodoManager, argparse.Namespace], str | None]

logger = logging.getLogger(__name__)


def parse_status(raw: str) -> TodoStatus:
    """argparse `type=` hook: "open", "in-progress", "InProgress", ..."""
    try:
        return TodoStatus.parse(raw)
    except ValueError:
        choices = ", ".join(s.value for s in TodoStatus)
        raise argparse.ArgumentTypeError(f"invalid status {raw!r} (choose from {choices})") from None


def cmd_add(manager: TodoManager, args: argparse.Namespace) -> str:
    todo_id = manager.add(args.content)
    return f"Added todo {todo_id}."


def cmd_edit(manager: TodoManager, args: argparse.Namespace) -> None:
    manager.edit_content(args.id, args.content)


def cmd_list(manager: TodoManager, args: argparse.Namespace) -> str | None:
    """
    list          -> every todo
    list <status> -> only todos with that status
    """
    if args.status is None:
        todos = manager.list_all()
    else:
        todos = manager.list_by_status(args.status)
    if not todos:
        return None
    return "\n".join(str(t) for t in todos)


def cmd_status(manager: TodoManager, args: argparse.Namespace) -> None:
    manager.change_status(args.id, args.status)


def cmd_delete(manager: TodoManager, args: argparse.Namespace) -> None:
    manager.delete(args.id)


def register_commands(
    subparsers: argparse._SubParsersAction,
    parents: list[argparse.ArgumentParser] | None = None,
) -> None:
    parents = parents or []

    p_add = subparsers.add_parser("add", parents=parents, help="Add a new todo")
    p_add.add_argument("content", help="Todo text")
    p_add.set_defaults(handler=cmd_add)

    p_edit = subparsers.add_parser("edit", parents=parents, help="Replace the text of a todo")
    p_edit.add_argument("id", type=int, help="Todo id")
    p_edit.add_argument("content", help="New todo text")
    p_edit.set_defaults(handler=cmd_edit)

    p_list = subparsers.add_parser("list", parents=parents, help="List todos, optionally by status")
    p_list.add_argument(
        "status",
        nargs="?",
        type=parse_status,
        default=None,
        help="open, in-progress or done",
    )
    p_list.set_defaults(handler=cmd_list)

    p_status = subparsers.add_parser("status", parents=parents, help="Change the status of a todo")
    p_status.add_argument("id", type=int, help="Todo id")
    p_status.add_argument("status", type=parse_status, help="open, in-progress or done")
    p_status.set_defaults(handler=cmd_status)

    p_delete = subparsers.add_parser("delete", parents=parents, help="Delete a todo")
    p_delete.add_argument("id", type=int, help="Todo id")
    p_delete.set_defaults(handler=cmd_delete)
