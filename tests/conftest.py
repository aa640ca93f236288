"""
Pytest configuration and fixtures.

Every test gets its own store or its own application instance, so no
state leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from newsroom_api.app.core.config import Settings
from newsroom_api.app.core.store import NewsroomStore
from newsroom_api.app.main import create_app


@pytest.fixture
def store():
    """Empty store with sequential ids and relaxed references."""
    return NewsroomStore()


@pytest.fixture
def make_client():
    """Factory building a TestClient over a fresh app with the given settings."""

    def _make(**overrides):
        params = {"seed_data": False, "api_prefix": "", **overrides}
        return TestClient(create_app(Settings(**params)))

    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def newsroom(client):
    """Client with one journalist, one category and one article created."""
    client.post("/journalists", json={"name": "A", "email": "a@x.com"})
    client.post("/categories", json={"name": "Tech"})
    client.post(
        "/articles",
        json={"title": "T", "content": "C", "journalistId": 1, "categoryId": 1},
    )
    return client
