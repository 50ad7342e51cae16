from uuid import UUID

import pytest

from command.db.utils import FIRST_MENU_ID, SEED_CATEGORIES, seed
from menu_api.core import settings
from menu_api.utils.unitofwork import UnitOfWork


@pytest.mark.anyio
async def test_seed_is_idempotent(client) -> None:
    first = await seed()
    second = await seed()

    assert first == second
    assert set(first) == set(SEED_CATEGORIES)

    async with UnitOfWork() as uow:
        assert await uow.category.get_count() == len(SEED_CATEGORIES)
        menu = await uow.menu.get_with_category(FIRST_MENU_ID)
        assert menu.category.name == "Pizza"

    response = await client.get(f"/api/v1/post/{FIRST_MENU_ID}")
    assert response.status_code == 200
    assert UUID(response.json()["categoryId"]) == first["Pizza"]


@pytest.mark.anyio
async def test_health_check(client) -> None:
    response = await client.get("/api/health-check")

    assert response.status_code == 200
    assert response.json() == "Server works!"


@pytest.mark.anyio
async def test_seed_invalidates_category_cache(client, fake_redis) -> None:
    before = await client.get("/api/v1/category")
    assert before.json() == []
    assert await fake_redis.get(settings.redis.categories_key) is not None

    await seed()

    assert await fake_redis.get(settings.redis.categories_key) is None
    after = await client.get("/api/v1/category")
    assert sorted(category["name"] for category in after.json()) == sorted(SEED_CATEGORIES)
