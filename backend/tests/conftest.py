"""Shared fixtures: an isolated app client backed by a fresh in-memory store."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from homekeep.config import Settings, get_settings
from homekeep.infrastructure.dependencies import get_memory_store
from homekeep.infrastructure.memory import InMemoryStore
from homekeep.main import app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url="",
        upload_dir=str(tmp_path / "uploads"),
        max_upload_size_mb=1,
    )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest_asyncio.fixture
async def client(settings: Settings, store: InMemoryStore):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_memory_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
