"""
Pytest fixtures - a fresh SQLite file per test, the real app, an HTTP client
that keeps the session cookie between requests.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from memequiz.config import Settings
from memequiz.db.models import User
from memequiz.db.store import MemeStore
from memequiz.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    memes_dir = tmp_path / "memes"
    memes_dir.mkdir()
    (memes_dir / "cat.jpg").write_bytes(b"\xff\xd8\xff\xe0not-really-a-jpeg")
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'db' / 'memes.db'}",
        memes_dir=str(memes_dir),
        secret_key="test-secret",
    )


@pytest_asyncio.fixture
async def store(settings: Settings):
    store = MemeStore(settings.database_url)
    await store.initialize()
    yield store
    await store.dispose()


@pytest.fixture
def app(settings: Settings, store: MemeStore):
    # ASGITransport skips the lifespan, so the store is attached here
    app = create_app(settings)
    app.state.store = store
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def test_user(store: MemeStore) -> User:
    user_id = await store.create_user("alice", "pw123")
    return await store.find_user_by_id(user_id)


@pytest_asyncio.fixture
async def logged_in_client(client: AsyncClient, test_user: User) -> AsyncClient:
    response = await client.post("/api/login", json={"username": "alice", "password": "pw123"})
    assert response.status_code == 200
    return client
