"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Point the client at the in-process reference store
os.environ["API_BASE_URL"] = "http://test"
os.environ["SITE_URL"] = "https://basedlist.xyz"
os.environ["JSON_LOGS"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api.dependencies.store import get_document_store
from domain.entities.identity import CurrentIdentity
from infrastructure.http.client import create_http_client
from infrastructure.memory.document_store import InMemoryDocumentStore

TEST_USER_ID = "user_2abcDEF"


@pytest.fixture
def identity() -> CurrentIdentity:
    """Signed-in test identity."""
    return CurrentIdentity(
        id=TEST_USER_ID,
        first_name="Alice",
        image_url="https://img.clerk.com/alice.png",
        email="alice@example.com",
    )


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """A fresh, empty document store per test."""
    return InMemoryDocumentStore()


@pytest.fixture
async def client(store: InMemoryDocumentStore) -> AsyncGenerator[AsyncClient, None]:
    """Raw async test client for the reference store API."""
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_document_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def store_client(store: InMemoryDocumentStore) -> AsyncGenerator[AsyncClient, None]:
    """The production HTTP client, routed into the reference store in-process."""
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_document_store] = lambda: store

    async with create_http_client(transport=ASGITransport(app=app)) as c:
        yield c

    app.dependency_overrides.clear()
