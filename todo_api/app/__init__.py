"""
Application package initializer.

This package contains the entrypoint for the API and its submodules.
Configuration and logging live in ``core``, the in-memory todo store
in ``services``, request/response models in ``schemas`` and the HTTP
routes in ``api/v1``.
"""

from .main import app  # noqa: F401
