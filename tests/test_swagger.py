import pytest

from menu_api.core import settings

OPENAPI_URL = f"/{settings.PROJECT_NAME}/openapi.json"


@pytest.mark.anyio
async def test_openapi_requires_credentials(client) -> None:
    anonymous = await client.get(OPENAPI_URL)
    wrong = await client.get(OPENAPI_URL, auth=(settings.SWAGGER_USERNAME, "wrong"))

    assert anonymous.status_code == 401
    assert wrong.status_code == 401
    assert wrong.headers["www-authenticate"] == "Basic"


@pytest.mark.anyio
async def test_openapi_lists_procedures(client) -> None:
    response = await client.get(OPENAPI_URL, auth=(settings.SWAGGER_USERNAME, settings.SWAGGER_PASSWORD))

    assert response.status_code == 200
    operation_ids = {
        operation["operationId"] for path in response.json()["paths"].values() for operation in path.values()
    }
    assert {
        "post.list",
        "post.byId",
        "post.add",
        "post.update",
        "post.updateImageUrl",
        "post.uploadImage",
        "post.delete",
        "category.list",
        "category.byId",
        "category.create",
        "category.update",
        "category.delete",
    } <= operation_ids


@pytest.mark.anyio
async def test_docs_pages_are_served(client) -> None:
    docs = await client.get("/docs")
    redoc = await client.get("/redoc")

    assert docs.status_code == 200
    assert OPENAPI_URL in docs.text
    assert redoc.status_code == 200
