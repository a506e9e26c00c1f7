import os

# Must be set before importing app: load_dotenv() does not override existing env vars,
# so this keeps tests off any data.json configured in .env.
os.environ.setdefault("TODO_DATA_FILE", "")

import pytest
from fastapi.testclient import TestClient

from app import app, get_todo_list
from todos import TodoList


@pytest.fixture
def todo_list():
    """A fresh in-memory service per test."""
    return TodoList()


@pytest.fixture
def client(todo_list):
    """
    A TestClient whose get_todo_list dependency is overridden to return the
    per-test service, so tests can inspect state directly.

    TestClient is used without the context manager so the app's startup event
    (which opens the configured store) does not run.
    """
    app.dependency_overrides[get_todo_list] = lambda: todo_list
    yield TestClient(app, raise_server_exceptions=True)
    app.dependency_overrides.clear()
