"""
FastAPI dependencies shared by the endpoint modules.

The todo service is created by ``create_app`` and kept on
``app.state``; handlers obtain it through ``get_todo_service`` so that
each application instance (and each test) works on its own store.
"""

from fastapi import Request

from todo_api.app.services.todo_service import TodoService


def get_todo_service(request: Request) -> TodoService:
    """Return the todo service owned by the running application."""
    return request.app.state.todo_service
