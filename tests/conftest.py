from __future__ import annotations

from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from todo_api.app.main import create_app
from todo_api.app.services.todo_service import TodoService


@pytest.fixture()
def service() -> TodoService:
    return TodoService()


@pytest.fixture()
def client(service: TodoService) -> TestClient:
    with TestClient(create_app(service)) as test_client:
        yield test_client
