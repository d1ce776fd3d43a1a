"""
Pydantic schemas for todo items.

Request bodies are deliberately permissive: ``task`` and ``completed``
accept any JSON value so that the service layer can apply its own
validation and boolean coercion instead of pydantic's.  Presence of a
field is read from ``model_fields_set``, which lets partial updates
distinguish an omitted field from an explicit ``null``.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    """Schema for creating a todo."""

    task: Any = Field(None, description="Text of the todo; required and non-empty")
    completed: Any = Field(None, description="Completion flag; coerced to a boolean, defaults to false")

    model_config = {
        "extra": "ignore",
    }

    def provided(self) -> Dict[str, Any]:
        """Return only the fields present in the request body."""
        return self.model_dump(include=self.model_fields_set)


class TodoUpdate(TodoCreate):
    """Schema for partially updating a todo.

    All fields are optional; only provided values will be updated.
    """


class TodoRead(BaseModel):
    """Schema for reading a todo."""

    id: int
    task: str
    completed: bool

    model_config = {
        "from_attributes": True,
    }
