"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers.  When new domains are
introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import todos

router = APIRouter()

# The todos router defines its own "/todos" paths internally so that the
# fixed "/todos/completed" and "/todos/active" routes can be registered
# ahead of "/todos/{todo_id}".  Do not add a prefix here.
router.include_router(todos.router, tags=["todos"])
