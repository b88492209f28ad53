# tests/test_todo_manager.py

from __future__ import annotations

import pytest

from doru.errors import TodoNotFoundError
from doru.todo.todo_manager import TodoManager
from doru.todo.todo_models import Todo, TodoStatus


def _snapshot(m: TodoManager) -> list[tuple[int, str, TodoStatus]]:
    return [(t.id, t.content, t.status) for t in m.list_all()]


def test_empty_manager_has_no_todos_and_counter_0() -> None:
    m = TodoManager.empty()
    assert m.list_all() == []
    assert m.counter == 0
    assert len(TodoManager()) == 0


def test_adopts_existing_todos_verbatim() -> None:
    todos = [Todo(id=0, content="Lorem"), Todo(id=1, content="Ipsum")]
    m = TodoManager(todos)
    assert m.list_all() == todos


def test_counter_is_max_adopted_id() -> None:
    m = TodoManager([Todo(id=0, content="Lorem"), Todo(id=10, content="Ipsum"), Todo(id=2, content="Dolor")])
    assert m.counter == 10
    assert m.add("Sit") == 11


def test_adopted_list_is_not_aliased() -> None:
    todos = [Todo(id=1, content="Lorem")]
    m = TodoManager(todos)
    m.add("Ipsum")
    assert len(todos) == 1
    assert len(m) == 2


def test_add_ids_start_at_1_and_increase_without_gaps() -> None:
    m = TodoManager.empty()
    ids = [m.add(f"todo {i}") for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert m.counter == 5


def test_add_creates_open_todo() -> None:
    m = TodoManager.empty()
    new_id = m.add("Lorem Ipsum")
    todo = m.find_by_id(new_id)
    assert todo is not None
    assert todo.content == "Lorem Ipsum"
    assert todo.status == TodoStatus.OPEN


def test_ids_are_not_reused_after_delete(manager: TodoManager) -> None:
    manager.delete(3)
    assert manager.add("Sit") == 4


def test_list_all_returns_every_todo_in_order(manager: TodoManager) -> None:
    assert [t.content for t in manager.list_all()] == ["Lorem", "Ipsum", "Dolor"]
    assert [t.id for t in manager] == [1, 2, 3]


def test_list_all_is_a_copy_of_references(manager: TodoManager) -> None:
    todos = manager.list_all()
    todos.clear()
    assert len(manager) == 3

    manager.list_all()[0].content = "Changed"
    assert manager.find_by_id(1).content == "Changed"


def test_list_by_status_open(manager: TodoManager) -> None:
    manager.change_status(3, TodoStatus.IN_PROGRESS)

    open_todos = manager.list_by_status(TodoStatus.OPEN)
    assert [(t.id, t.content) for t in open_todos] == [(1, "Lorem"), (2, "Ipsum")]


def test_list_by_status_in_progress(manager: TodoManager) -> None:
    manager.change_status(2, TodoStatus.IN_PROGRESS)

    in_progress = manager.list_by_status(TodoStatus.IN_PROGRESS)
    assert in_progress == [Todo(id=2, content="Ipsum", status=TodoStatus.IN_PROGRESS)]
    assert manager.list_by_status(TodoStatus.DONE) == []


def test_find_by_id(manager: TodoManager) -> None:
    assert manager.find_by_id(3) == Todo(id=3, content="Dolor")


@pytest.mark.parametrize("todo_id", [0, 1, 42, -1])
def test_find_by_id_on_empty_manager_returns_none(todo_id: int) -> None:
    assert TodoManager.empty().find_by_id(todo_id) is None


def test_edit_content(manager: TodoManager) -> None:
    manager.edit_content(2, "This is even better!")
    assert manager.find_by_id(2).content == "This is even better!"


def test_edit_unknown_id_raises_and_changes_nothing(manager: TodoManager) -> None:
    before = _snapshot(manager)
    with pytest.raises(TodoNotFoundError) as excinfo:
        manager.edit_content(42, "Some content.")
    assert excinfo.value.todo_id == 42
    assert str(excinfo.value) == "Todo with id 42 not found!"
    assert _snapshot(manager) == before


def test_change_status_moves_freely(manager: TodoManager) -> None:
    manager.change_status(1, TodoStatus.DONE)
    assert manager.find_by_id(1).status == TodoStatus.DONE
    manager.change_status(1, TodoStatus.OPEN)
    assert manager.find_by_id(1).status == TodoStatus.OPEN
    manager.change_status(1, TodoStatus.IN_PROGRESS)
    assert manager.find_by_id(1).status == TodoStatus.IN_PROGRESS


def test_change_status_accepts_stored_spelling(manager: TodoManager) -> None:
    manager.change_status(1, "Done")
    todo = manager.find_by_id(1)
    assert todo.status is TodoStatus.DONE
    assert str(todo) == str(Todo(id=1, content="Lorem", status=TodoStatus.DONE))


def test_change_status_unknown_id_raises_and_changes_nothing(manager: TodoManager) -> None:
    before = _snapshot(manager)
    with pytest.raises(TodoNotFoundError):
        manager.change_status(42, TodoStatus.DONE)
    assert _snapshot(manager) == before


def test_delete_removes_exactly_one_and_keeps_order(manager: TodoManager) -> None:
    manager.delete(2)
    assert [t.id for t in manager.list_all()] == [1, 3]
    assert manager.find_by_id(2) is None


def test_delete_unknown_id_raises_and_changes_nothing(manager: TodoManager) -> None:
    before = _snapshot(manager)
    with pytest.raises(TodoNotFoundError) as excinfo:
        manager.delete(42)
    assert isinstance(excinfo.value, LookupError)
    assert _snapshot(manager) == before


def test_duplicate_ids_always_resolve_to_first_match() -> None:
    m = TodoManager([Todo(id=1, content="first"), Todo(id=1, content="second"), Todo(id=2, content="other")])

    assert m.find_by_id(1).content == "first"

    m.edit_content(1, "edited")
    m.change_status(1, TodoStatus.DONE)
    assert _snapshot(m) == [
        (1, "edited", TodoStatus.DONE),
        (1, "second", TodoStatus.OPEN),
        (2, "other", TodoStatus.OPEN),
    ]

    m.delete(1)
    assert _snapshot(m) == [(1, "second", TodoStatus.OPEN), (2, "other", TodoStatus.OPEN)]
    assert m.find_by_id(1).content == "second"


def test_end_to_end_scenario() -> None:
    m = TodoManager.empty()
    assert m.add("Write report") == 1
    assert m.add("Buy milk") == 2

    m.change_status(1, TodoStatus.IN_PROGRESS)
    assert m.list_by_status(TodoStatus.OPEN) == [Todo(id=2, content="Buy milk", status=TodoStatus.OPEN)]

    m.delete(1)
    assert m.find_by_id(1) is None
