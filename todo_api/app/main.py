"""
Main entrypoint for the Todo API.

This module assembles the FastAPI application, sets up logging,
registers error handling and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn todo_api.app.main:app --port 3002

Each call to ``create_app`` gets its own ``TodoService`` seeded with
the initial todos, stored on ``app.state``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import InvalidBodyError, TodoAPIError
from .core.logging_config import setup_logging
from .services.todo_service import TodoService

logger = logging.getLogger(__name__)


def create_app(todo_service: Optional[TodoService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    todo_service : Optional[TodoService]
        Store to serve.  A new one with the seed todos is created when
        omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the handlers
    # below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.todo_service = todo_service if todo_service is not None else TodoService()

    @app.exception_handler(TodoAPIError)
    async def todo_error_handler(request: Request, exc: TodoAPIError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Only the body is validated by FastAPI; path ids are parsed by the service.
        err = InvalidBodyError()
        return JSONResponse(status_code=err.status_code, content=err.to_body())

    @app.middleware("http")
    async def internal_fault_middleware(request: Request, call_next):
        # Unexpected errors must not leak details to the client or stop the server.
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"error": "Server error!"})

    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
