"""
Todo tools exposed through the /mcp endpoint.

Components:
- ToolKind: closed set of tool names
- TOOL_DEFINITIONS: static schema returned by ``tools/list``
- ToolDispatcher: validates arguments, runs the todo operation and formats the
  text content block for one authenticated user
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from src.todo import Todo, UserStore, add_todo, list_todos, toggle_todo

from .exceptions import TodoNotFoundError, ToolArgumentError, UnknownToolError
from .identity import AuthenticatedUser

logger = logging.getLogger(__name__)


class ToolKind(str, Enum):
    """Tools available to MCP clients."""

    ADD_TODO = "add_todo"
    LIST_TODOS = "list_todos"
    TOGGLE_TODO = "toggle_todo"

    @classmethod
    def parse(cls, name: Any) -> "ToolKind":
        try:
            return cls(name)
        except ValueError as exc:
            raise UnknownToolError(f"Unknown tool: {name}") from exc


TOOL_DEFINITIONS: List[Dict[str, Any]] = [
    {
        "name": ToolKind.ADD_TODO.value,
        "description": "Add a new todo item for the authenticated user",
        "inputSchema": {
            "type": "object",
            "properties": {
                "text": {"type": "string", "description": "The content of the todo item"},
            },
            "required": ["text"],
        },
    },
    {
        "name": ToolKind.LIST_TODOS.value,
        "description": "List all todos for the authenticated user",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": ToolKind.TOGGLE_TODO.value,
        "description": "Toggle completion status of a todo",
        "inputSchema": {
            "type": "object",
            "properties": {
                "todoId": {"type": "string", "description": "The ID of the todo to toggle"},
            },
            "required": ["todoId"],
        },
    },
]


def status_icon(todo: Todo) -> str:
    return "✅" if todo.completed else "⏳"


def text_content(text: str) -> Dict[str, Any]:
    """Wrap ``text`` in a tool result with a single text block."""
    return {"content": [{"type": "text", "text": text}]}


def _require_string(arguments: Dict[str, Any], key: str, message: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str) or not value:
        raise ToolArgumentError(message)
    return value


class ToolDispatcher:
    """Routes tool calls to todo operations on a shared :class:`UserStore`."""

    def __init__(self, store: UserStore):
        self.store = store

    def list_tools(self) -> Dict[str, Any]:
        return {"tools": [dict(tool) for tool in TOOL_DEFINITIONS]}

    def call(
        self,
        name: Any,
        arguments: Optional[Dict[str, Any]],
        user: AuthenticatedUser,
    ) -> Dict[str, Any]:
        """
        Run one tool for ``user``.

        Args:
            name: tool name from ``params.name``
            arguments: ``params.arguments``; None is treated as no arguments
            user: authenticated caller, whose id selects the todo collection

        Returns:
            ``{"content": [{"type": "text", "text": ...}]}``

        Raises:
            UnknownToolError, ToolArgumentError, TodoNotFoundError
        """
        if not name:
            raise ToolArgumentError("Tool name is required in params.name")
        kind = ToolKind.parse(name)
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise ToolArgumentError("Tool arguments must be an object")

        logger.info("Tool call: %s from %s", kind.value, user.id)

        if kind is ToolKind.ADD_TODO:
            return self._add_todo(arguments, user)
        if kind is ToolKind.LIST_TODOS:
            return self._list_todos(user)
        if kind is ToolKind.TOGGLE_TODO:
            return self._toggle_todo(arguments, user)
        raise UnknownToolError(f"Unknown tool: {name}")

    def _add_todo(self, arguments: Dict[str, Any], user: AuthenticatedUser) -> Dict[str, Any]:
        text = _require_string(arguments, "text", "Text is required and must be a string")
        todo = add_todo(self.store, user.id, text)
        return text_content(f'✅ Todo added: "{todo.text}" (ID: {todo.id})')

    def _list_todos(self, user: AuthenticatedUser) -> Dict[str, Any]:
        todos = list_todos(self.store, user.id)
        logger.info("Listed %d todos for %s", len(todos), user.id)
        if not todos:
            return text_content("📝 No todos found. Add some todos to get started!")

        lines = "\n".join(f"{status_icon(todo)} {todo.text} (ID: {todo.id})" for todo in todos)
        return text_content(f"📋 Your todos:\n{lines}")

    def _toggle_todo(self, arguments: Dict[str, Any], user: AuthenticatedUser) -> Dict[str, Any]:
        todo_id = _require_string(arguments, "todoId", "Todo ID is required and must be a string")
        todo = toggle_todo(self.store, user.id, todo_id)
        if todo is None:
            raise TodoNotFoundError(f"Todo with ID {todo_id} not found")

        state = "completed" if todo.completed else "incomplete"
        return text_content(f'{status_icon(todo)} Todo "{todo.text}" marked as {state}')
