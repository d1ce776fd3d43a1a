"""
Service for managing todo items held in process memory.

A ``TodoService`` owns an ordered list of todos and the id counter
used to number new ones.  Both are guarded by a single lock so that
the service can be shared between concurrently running request
handlers: every public method holds the lock for its whole
read/validate/mutate step.

Ids come from a counter that only ever grows.  It starts one above the
highest seed id and is never rewound, so ids of deleted todos are not
handed out again.  Nothing is persisted; a new service starts from the
seed data.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional

from todo_api.app.core.errors import InvalidTodoIdError, TaskValidationError, TodoNotFoundError
from todo_api.app.schemas.todo import TodoRead

logger = logging.getLogger(__name__)

SEED_TODOS = (
    {"id": 1, "task": "Learn Node.js", "completed": False},
    {"id": 2, "task": "Build CRUD API", "completed": False},
)

TASK_REQUIRED_MESSAGE = '"task" field is required and must be a non-empty string.'
TASK_INVALID_MESSAGE = '"task" must be a non-empty string when provided.'

# Leading decimal integer; whatever follows it is ignored.
ID_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def parse_todo_id(token: Any) -> int:
    """Read the id at the start of a path token.

    Only a leading run of ASCII digits (with optional sign and leading
    whitespace) is used, so ``"2abc"`` and ``"1.5"`` read as 2 and 1.

    Raises
    ------
    InvalidTodoIdError
        If ``token`` does not start with a decimal integer.
    """
    match = ID_PREFIX.match(str(token))
    if match is None:
        raise InvalidTodoIdError()
    return int(match.group(1))


def validate_task(value: Any, message: str = TASK_REQUIRED_MESSAGE) -> str:
    """Return ``value`` trimmed, or raise if it is not a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise TaskValidationError(message)
    return value.strip()


def coerce_completed(value: Any) -> bool:
    """Coerce any JSON value to a completion flag by truthiness.

    Arrays and objects count as true even when empty.
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


class TodoService:
    """In-memory store of todos with CRUD operations."""

    def __init__(self, seeds: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        self._lock = threading.Lock()
        self._todos: List[Dict[str, Any]] = [
            {"id": int(seed["id"]), "task": seed["task"], "completed": bool(seed.get("completed", False))}
            for seed in (SEED_TODOS if seeds is None else seeds)
        ]
        self._next_id = max((todo["id"] for todo in self._todos), default=0) + 1

    @property
    def next_id(self) -> int:
        """Id that the next created todo will receive."""
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list_todos(self) -> List[TodoRead]:
        """Return every todo in creation order."""
        with self._lock:
            return [TodoRead(**todo) for todo in self._todos]

    def list_completed(self) -> List[TodoRead]:
        with self._lock:
            return [TodoRead(**todo) for todo in self._todos if todo["completed"]]

    def list_active(self) -> List[TodoRead]:
        with self._lock:
            return [TodoRead(**todo) for todo in self._todos if not todo["completed"]]

    def get_todo(self, todo_id: Any) -> TodoRead:
        """Return the todo identified by ``todo_id``.

        Raises
        ------
        InvalidTodoIdError
            If ``todo_id`` is not an integer.
        TodoNotFoundError
            If no todo has that id.
        """
        key = parse_todo_id(todo_id)
        with self._lock:
            return TodoRead(**self._find(key))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_todo(self, data: Mapping[str, Any]) -> TodoRead:
        """Validate ``data`` and append a new todo.

        ``data`` holds the fields present in the request body.  ``task``
        is required; ``completed`` defaults to ``False``.  Nothing is
        changed when validation fails.
        """
        task = validate_task(data.get("task"))
        completed = coerce_completed(data.get("completed", False))
        with self._lock:
            todo = {"id": self._next_id, "task": task, "completed": completed}
            self._next_id += 1
            self._todos.append(todo)
        logger.info("Created todo %s", todo["id"])
        return TodoRead(**todo)

    def update_todo(self, todo_id: Any, data: Mapping[str, Any]) -> TodoRead:
        """Apply the fields present in ``data`` to an existing todo.

        Fields missing from ``data`` are left as they are.  The todo is
        looked up before ``task`` is validated, so an unknown id is
        reported as not found even when the body is also invalid.
        """
        key = parse_todo_id(todo_id)
        with self._lock:
            todo = self._find(key)
            changes: Dict[str, Any] = {}
            if "task" in data:
                changes["task"] = validate_task(data["task"], TASK_INVALID_MESSAGE)
            if "completed" in data:
                changes["completed"] = coerce_completed(data["completed"])
            todo.update(changes)
            result = TodoRead(**todo)
        if changes:
            logger.info("Todo %s updated: %s", key, ", ".join(sorted(changes)))
        return result

    def delete_todo(self, todo_id: Any) -> None:
        """Remove a todo permanently.

        Raises
        ------
        TodoNotFoundError
            With an ``{"error": "Not found"}`` body if no todo has that id.
        """
        key = parse_todo_id(todo_id)
        with self._lock:
            remaining = [todo for todo in self._todos if todo["id"] != key]
            if len(remaining) == len(self._todos):
                raise TodoNotFoundError(message="Not found", body_key="error")
            self._todos = remaining
        logger.info("Todo %s deleted", key)

    def _find(self, todo_id: int) -> Dict[str, Any]:
        # Caller must hold the lock.
        for todo in self._todos:
            if todo["id"] == todo_id:
                return todo
        raise TodoNotFoundError()
