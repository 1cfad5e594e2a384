"""Per-user in-memory todo collections and the operations over them."""

from .models import Todo, UserRecord
from .operations import add_todo, list_todos, toggle_todo
from .store import TodoIdGenerator, UserStore

__all__ = [
    "Todo",
    "UserRecord",
    "UserStore",
    "TodoIdGenerator",
    "add_todo",
    "list_todos",
    "toggle_todo",
]
