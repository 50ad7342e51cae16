import json
from uuid import uuid4

import pytest

from menu_api.core import settings


@pytest.mark.anyio
async def test_create_and_list_categories_ordered_by_name(client) -> None:
    for name in ("Pizza", "Bevande", "Pasta"):
        response = await client.post("/api/v1/category", json={"name": name})
        assert response.status_code == 201

    response = await client.get("/api/v1/category")

    assert response.status_code == 200
    assert [category["name"] for category in response.json()] == ["Bevande", "Pasta", "Pizza"]


@pytest.mark.anyio
@pytest.mark.parametrize("name", ["", "   "])
async def test_blank_name_is_rejected(client, name) -> None:
    response = await client.post("/api/v1/category", json={"name": name})

    assert response.status_code == 422


@pytest.mark.anyio
async def test_duplicate_name_conflicts(client, category) -> None:
    response = await client.post("/api/v1/category", json={"name": "Pizza"})

    assert response.status_code == 409
    assert response.json()["detail"]["alias"] == "DBObjectExists"


@pytest.mark.anyio
async def test_get_category_by_id(client, category) -> None:
    response = await client.get(f"/api/v1/category/{category['id']}")
    missing = await client.get(f"/api/v1/category/{uuid4()}")

    assert response.status_code == 200
    assert response.json()["name"] == "Pizza"
    assert missing.status_code == 404


@pytest.mark.anyio
async def test_update_category(client, category) -> None:
    response = await client.put(f"/api/v1/category/{category['id']}", json={"name": "Pizze"})

    assert response.status_code == 200
    assert response.json()["id"] == category["id"]
    assert response.json()["name"] == "Pizze"


@pytest.mark.anyio
async def test_update_to_duplicate_name_conflicts(client, category) -> None:
    pasta = (await client.post("/api/v1/category", json={"name": "Pasta"})).json()

    response = await client.put(f"/api/v1/category/{pasta['id']}", json={"name": "Pizza"})

    assert response.status_code == 409
    assert response.json()["detail"]["alias"] == "DBObjectExists"
    assert (await client.get(f"/api/v1/category/{pasta['id']}")).json()["name"] == "Pasta"


@pytest.mark.anyio
async def test_update_unknown_category_is_not_found(client) -> None:
    response = await client.put(f"/api/v1/category/{uuid4()}", json={"name": "Pizze"})

    assert response.status_code == 404
    assert response.json()["detail"]["msg"] == "Category not found"


@pytest.mark.anyio
async def test_delete_category_removes_its_items(client, category, menu_payload) -> None:
    pasta = (await client.post("/api/v1/category", json={"name": "Pasta"})).json()
    pizza_ids = []
    for number in range(3):
        created = await client.post("/api/v1/post", json=menu_payload(category["id"], title=f"Pizza {number}"))
        pizza_ids.append(created.json()["id"])
    kept = (await client.post("/api/v1/post", json=menu_payload(pasta["id"]))).json()

    response = await client.delete(f"/api/v1/category/{category['id']}")

    assert response.status_code == 204
    for menu_id in pizza_ids:
        assert (await client.get(f"/api/v1/post/{menu_id}")).status_code == 404
    assert (await client.get(f"/api/v1/category/{category['id']}")).status_code == 404

    listing = (await client.get("/api/v1/post")).json()
    assert [item["id"] for item in listing["items"]] == [kept["id"]]


@pytest.mark.anyio
async def test_delete_unknown_category_is_not_found(client) -> None:
    response = await client.delete(f"/api/v1/category/{uuid4()}")

    assert response.status_code == 404


@pytest.mark.anyio
async def test_list_is_cached_and_invalidated_on_change(client, fake_redis, category) -> None:
    key = settings.redis.categories_key

    await client.get("/api/v1/category")
    cached = json.loads(await fake_redis.get(key))
    assert [item["name"] for item in cached] == ["Pizza"]

    await client.post("/api/v1/category", json={"name": "Pasta"})
    assert await fake_redis.get(key) is None

    response = await client.get("/api/v1/category")
    assert [item["name"] for item in response.json()] == ["Pasta", "Pizza"]


@pytest.mark.anyio
async def test_list_is_served_from_cache(client, fake_redis) -> None:
    cached = [
        {
            "id": str(uuid4()),
            "name": "Cached",
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-01-01T00:00:00Z",
        }
    ]
    await fake_redis.set(settings.redis.categories_key, json.dumps(cached))

    response = await client.get("/api/v1/category")

    assert [item["name"] for item in response.json()] == ["Cached"]


@pytest.mark.anyio
async def test_cache_is_invalidated_on_update(client, fake_redis, category) -> None:
    key = settings.redis.categories_key

    await client.get("/api/v1/category")
    assert await fake_redis.get(key) is not None

    await client.put(f"/api/v1/category/{category['id']}", json={"name": "Pizze"})
    assert await fake_redis.get(key) is None

    response = await client.get("/api/v1/category")
    assert [item["name"] for item in response.json()] == ["Pizze"]


@pytest.mark.anyio
async def test_cache_is_invalidated_on_delete(client, fake_redis, category) -> None:
    key = settings.redis.categories_key

    await client.get("/api/v1/category")
    assert await fake_redis.get(key) is not None

    await client.delete(f"/api/v1/category/{category['id']}")
    assert await fake_redis.get(key) is None

    response = await client.get("/api/v1/category")
    assert response.json() == []
