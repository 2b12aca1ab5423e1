"""Shared test constants, fixtures, and factory functions."""

from collections.abc import AsyncIterator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.config import Settings
from blog_api.main import app
from blog_api.models import PostCreate
from blog_api.store import MemoryPostStore, seed_posts

# -- Constants --

SEED_IDS = [1, 2]
FIRST_NEW_ID = 3
MISSING_ID = 9999

POST_BODY: dict[str, Any] = {"title": "A", "content": "B", "author": "C"}


# -- Factories --


def make_settings(**overrides: Any) -> Settings:
    """Create a Settings instance with test defaults. Override any field."""
    defaults: dict[str, Any] = {"log_level": "debug"}
    return Settings(**(defaults | overrides))


def make_candidate(**overrides: Any) -> PostCreate:
    """Create a valid PostCreate. Override any field."""
    return PostCreate(**(POST_BODY | overrides))


def make_store(*, seed: bool = True) -> MemoryPostStore:
    return MemoryPostStore(seed_posts() if seed else ())


# -- Fixtures --


@pytest.fixture
def store() -> MemoryPostStore:
    """A freshly seeded store."""
    return make_store()


@pytest.fixture
async def client(store: MemoryPostStore) -> AsyncIterator[AsyncClient]:
    """AsyncClient wired to the FastAPI app with a fresh seeded store."""
    app.state.settings = make_settings()
    app.state.store = store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
