"""
Todo endpoints for API v1.

These routes expose a CRUD API over the in-memory todo list.  Route
order matters: ``/todos/completed`` and ``/todos/active`` are declared
before ``/todos/{todo_id}`` so that the fixed segments are matched
first and never parsed as an id.

The id is taken from the path as a plain string and parsed by the
service, which reports a malformed id as HTTP 400 rather than letting
FastAPI answer with 422.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from todo_api.app.api.deps import get_todo_service
from todo_api.app.schemas.todo import TodoCreate, TodoRead, TodoUpdate
from todo_api.app.services.todo_service import TodoService

router = APIRouter()


@router.get("/todos", response_model=List[TodoRead])
async def list_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoRead]:
    """Return all todos in creation order."""
    return service.list_todos()


@router.get("/todos/completed", response_model=List[TodoRead])
async def list_completed_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoRead]:
    """Return the todos marked as completed."""
    return service.list_completed()


@router.get("/todos/active", response_model=List[TodoRead])
async def list_active_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoRead]:
    """Return the todos that are not completed yet."""
    return service.list_active()


@router.get("/todos/{todo_id}", response_model=TodoRead)
async def get_todo(todo_id: str, service: TodoService = Depends(get_todo_service)) -> TodoRead:
    """Retrieve a single todo by ID.

    Returns HTTP 400 if the id is not an integer and HTTP 404 if no
    todo has that id.
    """
    return service.get_todo(todo_id)


@router.post("/todos", response_model=TodoRead, status_code=status.HTTP_201_CREATED)
async def create_todo(
    todo_in: Optional[TodoCreate] = None,
    service: TodoService = Depends(get_todo_service),
) -> TodoRead:
    """Create a new todo.

    ``task`` is required and trimmed; ``completed`` defaults to false.
    A request without a body is treated like an empty object and
    rejected because ``task`` is missing.
    """
    return service.create_todo(todo_in.provided() if todo_in else {})


@router.patch("/todos/{todo_id}", response_model=TodoRead)
async def update_todo(
    todo_id: str,
    todo_in: Optional[TodoUpdate] = None,
    service: TodoService = Depends(get_todo_service),
) -> TodoRead:
    """Partially update a todo.

    Only the fields present in the body are changed.  An explicit
    ``null`` counts as present: ``"task": null`` is rejected and
    ``"completed": null`` clears the flag.
    """
    return service.update_todo(todo_id, todo_in.provided() if todo_in else {})


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(todo_id: str, service: TodoService = Depends(get_todo_service)) -> None:
    """Delete a todo.  Responds with HTTP 204 and no body."""
    service.delete_todo(todo_id)
    return None
