from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ContextManager, Dict, List


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(slots=True)
class Todo:
    """Single todo entry owned by one identity."""

    id: str
    text: str
    completed: bool = False
    created_at: str = field(default_factory=utc_now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
        }


@dataclass
class UserRecord:
    """Per-identity container. Todos are kept in insertion order."""

    identity: str
    todos: List[Todo] = field(default_factory=list)
    lock: ContextManager[Any] = field(default_factory=threading.Lock, repr=False)

    def find(self, todo_id: str) -> Todo | None:
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return None
