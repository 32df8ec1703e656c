"""Root conftest: test settings, a substitute collection and HTTP clients."""

import os

# settings are read at import time, so these must be set first
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-unit-tests")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from main import app
from tasky.core.database import get_todo_collection
from tasky.core.security import create_access_token
from tasky.services.todo_service import TodoService
from tests.mock_mongo import FakeCollection


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def service(collection):
    return TodoService(collection, timeout_seconds=5)


@pytest.fixture
def client(collection):
    """Unauthenticated client; the store is the in-memory collection."""
    app.dependency_overrides[get_todo_collection] = lambda: collection
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def token():
    return create_access_token("u1")


@pytest.fixture
def auth_client(collection, token):
    app.dependency_overrides[get_todo_collection] = lambda: collection
    yield TestClient(app, headers={"Authorization": f"Bearer {token}"})
    app.dependency_overrides.clear()
