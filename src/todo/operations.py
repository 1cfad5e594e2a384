"""Todo operations over a :class:`UserStore`."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .models import Todo
from .store import UserStore

logger = logging.getLogger(__name__)


def add_todo(store: UserStore, identity: str, text: str) -> Todo:
    """Append a new, not yet completed todo to the identity's list."""
    with store.session(identity) as record:
        todo = Todo(id=store.ids.next_id(), text=text)
        record.todos.append(todo)
    logger.info("Added todo %s for %s", todo.id, identity)
    return todo


def list_todos(store: UserStore, identity: str) -> Tuple[Todo, ...]:
    """Snapshot of the identity's todos in insertion order."""
    with store.session(identity) as record:
        return tuple(record.todos)


def toggle_todo(store: UserStore, identity: str, todo_id: str) -> Optional[Todo]:
    """Flip ``completed`` on the matching todo. Returns None if there is none."""
    with store.session(identity) as record:
        todo = record.find(todo_id)
        if todo is None:
            return None
        todo.completed = not todo.completed
    logger.info("Toggled todo %s for %s (completed=%s)", todo_id, identity, todo.completed)
    return todo
