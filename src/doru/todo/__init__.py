from .todo_manager import TodoManager
from .todo_models import Todo, TodoStatus
from .todo_storage import JsonTodoStorage, SqliteTodoStorage, get_storage

__all__ = [
    "JsonTodoStorage",
    "SqliteTodoStorage",
    "Todo",
    "TodoManager",
    "TodoStatus",
    "get_storage",
]
