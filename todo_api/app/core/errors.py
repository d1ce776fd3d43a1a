"""
Exception types raised by the todo service.

Each error knows the HTTP status it maps to and the JSON body that is
sent back to the client.  The application registers a single handler
for ``TodoAPIError`` (see ``main.create_app``) so that services can
raise these without depending on FastAPI.
"""

from typing import Any, Dict


class TodoAPIError(Exception):
    """Base class for errors that are reported to the client."""

    status_code: int = 400
    body_key: str = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {self.body_key: self.message}


class InvalidTodoIdError(TodoAPIError):
    """The id in the request path does not start with an integer."""

    def __init__(self) -> None:
        super().__init__("Invalid id")


class TaskValidationError(TodoAPIError):
    """The ``task`` field is missing, not a string or blank."""


class InvalidBodyError(TodoAPIError):
    """The request body is not a JSON object."""

    def __init__(self) -> None:
        super().__init__("Request body must be a JSON object.")


class TodoNotFoundError(TodoAPIError):
    """No todo with the requested id exists.

    Lookups report ``{"message": "Todo not found"}``.  Deletes report
    ``{"error": "Not found"}`` so clients can tell the two apart.
    """

    status_code = 404

    def __init__(self, message: str = "Todo not found", body_key: str = "message") -> None:
        super().__init__(message)
        self.body_key = body_key
