from uuid import uuid4

import pytest


@pytest.mark.anyio
async def test_add_returns_item_with_category(client, category, menu_payload) -> None:
    response = await client.post("/api/v1/post", json=menu_payload(category["id"], imageUrl="https://cdn/x.png"))

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Margherita"
    assert body["price"] == 8.5
    assert body["imageUrl"] == "https://cdn/x.png"
    assert body["categoryId"] == category["id"]
    assert body["category"] == {"id": category["id"], "name": "Pizza"}
    assert {"createdAt", "updatedAt"} <= body.keys()


@pytest.mark.anyio
async def test_add_accepts_client_supplied_id(client, category, menu_payload) -> None:
    menu_id = str(uuid4())

    response = await client.post("/api/v1/post", json=menu_payload(category["id"], id=menu_id))

    assert response.status_code == 201
    assert response.json()["id"] == menu_id


@pytest.mark.anyio
async def test_by_id_returns_created_item(client, category, menu_payload) -> None:
    created = (await client.post("/api/v1/post", json=menu_payload(category["id"]))).json()

    response = await client.get(f"/api/v1/post/{created['id']}")

    assert response.status_code == 200
    assert response.json()["id"] == created["id"]
    assert response.json()["category"]["name"] == "Pizza"


@pytest.mark.anyio
async def test_by_id_after_delete_is_not_found(client, category, menu_payload) -> None:
    created = (await client.post("/api/v1/post", json=menu_payload(category["id"]))).json()

    deleted = await client.delete(f"/api/v1/post/{created['id']}")
    response = await client.get(f"/api/v1/post/{created['id']}")

    assert deleted.status_code == 204
    assert response.status_code == 404
    assert response.json()["detail"] == {
        "msg": f"No post with id '{created['id']}'",
        "alias": "DBObjectNotFound",
    }


@pytest.mark.anyio
async def test_delete_unknown_item_is_not_found(client) -> None:
    response = await client.delete(f"/api/v1/post/{uuid4()}")

    assert response.status_code == 404


@pytest.mark.anyio
@pytest.mark.parametrize(
    "overrides",
    [
        {"price": -0.01},
        {"price": 12.345},
        {"price": 100000000},
        {"price": 1e12},
        {"title": "x" * 33},
        {"title": ""},
        {"text": ""},
        {"ingredients": ""},
        {"categoryId": "not-a-uuid"},
    ],
)
async def test_invalid_item_is_rejected_before_storage(client, category, menu_payload, overrides) -> None:
    response = await client.post("/api/v1/post", json=menu_payload(category["id"], **overrides))
    listing = await client.get("/api/v1/post")

    assert response.status_code == 422
    assert listing.json()["items"] == []


@pytest.mark.anyio
async def test_title_of_32_characters_is_accepted(client, category, menu_payload) -> None:
    response = await client.post("/api/v1/post", json=menu_payload(category["id"], title="x" * 32, price=0))

    assert response.status_code == 201


@pytest.mark.anyio
@pytest.mark.parametrize("price", [0.01, 12.34, 99999999.99])
async def test_price_is_stored_without_rounding(client, category, menu_payload, price) -> None:
    created = await client.post("/api/v1/post", json=menu_payload(category["id"], price=price))

    assert created.status_code == 201
    assert created.json()["price"] == price

    response = await client.get(f"/api/v1/post/{created.json()['id']}")
    assert response.json()["price"] == price


@pytest.mark.anyio
async def test_add_with_unknown_category_is_not_found(client, menu_payload) -> None:
    response = await client.post("/api/v1/post", json=menu_payload(str(uuid4())))

    assert response.status_code == 404
    assert response.json()["detail"]["msg"] == "Category not found"


@pytest.mark.anyio
async def test_add_with_duplicate_id_conflicts(client, category, menu_payload) -> None:
    menu_id = str(uuid4())
    await client.post("/api/v1/post", json=menu_payload(category["id"], id=menu_id))

    response = await client.post("/api/v1/post", json=menu_payload(category["id"], id=menu_id))

    assert response.status_code == 409


@pytest.mark.anyio
async def test_update_changes_fields_and_category(client, category, menu_payload) -> None:
    pasta = (await client.post("/api/v1/category", json={"name": "Pasta"})).json()
    created = (await client.post("/api/v1/post", json=menu_payload(category["id"], imageUrl="a.png"))).json()

    response = await client.put(
        f"/api/v1/post/{created['id']}",
        json=menu_payload(pasta["id"], title="Carbonara", price=12),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Carbonara"
    assert body["price"] == 12
    assert body["category"]["name"] == "Pasta"
    # image is kept when not sent
    assert body["imageUrl"] == "a.png"


@pytest.mark.anyio
async def test_update_unknown_item_is_not_found(client, category, menu_payload) -> None:
    response = await client.put(f"/api/v1/post/{uuid4()}", json=menu_payload(category["id"]))

    assert response.status_code == 404


@pytest.mark.anyio
async def test_update_image_url(client, category, menu_payload) -> None:
    created = (await client.post("/api/v1/post", json=menu_payload(category["id"]))).json()

    response = await client.patch(
        f"/api/v1/post/{created['id']}/image-url", json={"imageUrl": "https://utfs.io/f/abc.png"}
    )

    assert response.status_code == 200
    assert response.json()["imageUrl"] == "https://utfs.io/f/abc.png"
    assert response.json()["title"] == created["title"]


@pytest.mark.anyio
async def test_snake_case_input_is_accepted(client, category) -> None:
    payload = {
        "title": "Diavola",
        "text": "Spicy",
        "price": 10,
        "ingredients": "salami",
        "category_id": category["id"],
    }

    response = await client.post("/api/v1/post", json=payload)

    assert response.status_code == 201
    assert response.json()["categoryId"] == category["id"]
