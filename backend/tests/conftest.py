"""
Album Service Backend: Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.

Fixtures (all function-scoped, created fresh for each test):
    ├── album_store: A freshly seeded AlbumStore
    ├── new_album_payload: JSON body for a valid POST /albums
    ├── app: A freshly built FastAPI app with its own store
    └── test_client: HTTPX AsyncClient bound to `app`
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from album_api.main import create_app
from album_api.services.album_store import AlbumStore


@pytest.fixture
def album_store():
    """A store holding the three seed albums."""
    return AlbumStore.seeded()


@pytest.fixture
def new_album_payload():
    return {
        "id": "4",
        "title": "The Modern Sound of Betty Carter",
        "artist": "Betty Carter",
        "price": 49.99,
    }


@pytest.fixture
def app():
    """
    A fresh application instance.

    Each test gets its own seeded store, so appends in one test never leak
    into another.
    """
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server needed).

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/albums")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
