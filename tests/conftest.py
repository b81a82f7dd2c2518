"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from api.app import create_app
from config import Config
from court.arena import reset_arena
from court.entities import GameObject


@pytest.fixture(autouse=True)
def default_arena():
    """Every test starts on the default 300x300 court."""
    reset_arena()
    yield
    reset_arena()


@pytest.fixture
def square():
    """Create a 10x10 object at the origin, at rest."""
    return GameObject(0, 0, 0, 0, 10, 10)


@pytest.fixture
def app():
    """Create test FastAPI app with default config."""
    return create_app(Config())


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
