"""Test configuration: sqlite database, fake redis and local image storage."""
import os
import tempfile
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="menu-tests-"))

# Settings are read at import time, so the environment has to be ready before menu_api is imported.
os.environ.setdefault("EXECUTION_MODE", "test")
os.environ.setdefault("DEBUG", "false")
os.environ["DB_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR / 'menu.db'}"
os.environ["STORAGE_BACKEND"] = "local"
os.environ["LOCAL_STORAGE_MEDIA_FOLDER"] = str(_TMP_DIR / "media")

import fakeredis.aioredis  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from menu_api.db.database import engine  # noqa: E402
from menu_api.db.redis import redis_pool  # noqa: E402
from menu_api.main import app  # noqa: E402
from menu_api.models import Base  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def media_folder() -> Path:
    return _TMP_DIR / "media"


@pytest.fixture(autouse=True)
async def database(anyio_backend):
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)

    # connections are bound to the event loop of the finished test
    await engine.dispose()


@pytest.fixture(autouse=True)
async def fake_redis(anyio_backend, monkeypatch):
    redis = fakeredis.aioredis.FakeRedis()

    async def get_redis():
        return redis

    monkeypatch.setattr(redis_pool, "get_redis", get_redis)
    yield redis
    await redis.aclose()


@pytest.fixture
async def client(anyio_backend):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def category(client) -> dict:
    response = await client.post("/api/v1/category", json={"name": "Pizza"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def menu_payload():
    def build(category_id: str, **overrides) -> dict:
        payload = {
            "title": "Margherita",
            "text": "Tomato, mozzarella and basil",
            "price": 8.5,
            "ingredients": "tomato, mozzarella, basil",
            "categoryId": category_id,
        }
        payload.update(overrides)
        return payload

    return build
