import secrets
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.openapi.docs import get_redoc_html, get_swagger_ui_html
from fastapi.openapi.utils import get_openapi
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from menu_api.core.config import settings

swagger_router = APIRouter()
security = HTTPBasic()

docs_title = f"{settings.PROJECT_NAME.capitalize()} API"
openapi_url = f"/{settings.PROJECT_NAME}/openapi.json"


def check_credentials(creds: HTTPBasicCredentials = Depends(security)) -> None:
    username_ok = secrets.compare_digest(creds.username.encode(), settings.SWAGGER_USERNAME.encode())
    password_ok = secrets.compare_digest(creds.password.encode(), settings.SWAGGER_PASSWORD.encode())

    if not (username_ok and password_ok):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Basic"},
        )


@lru_cache
def build_openapi_schema() -> dict[str, Any]:
    """Schema of the public api, operation ids are the procedure names."""
    from menu_api.api import api_router

    return get_openapi(
        title=docs_title,
        version=settings.VERSION,
        description="Menu items grouped by category.",
        routes=api_router.routes,
    )


@swagger_router.get("/docs", include_in_schema=False, response_class=HTMLResponse)
async def get_docs() -> HTMLResponse:
    return get_swagger_ui_html(openapi_url=openapi_url, title=f"{docs_title} Swagger")


@swagger_router.get("/redoc", include_in_schema=False, response_class=HTMLResponse)
async def get_redoc() -> HTMLResponse:
    return get_redoc_html(openapi_url=openapi_url, title=f"{docs_title} Redoc", with_google_fonts=False)


@swagger_router.get(
    openapi_url,
    include_in_schema=False,
    response_class=JSONResponse,
    dependencies=[Depends(check_credentials)],
)
async def get_openapi_json() -> JSONResponse:
    return JSONResponse(build_openapi_schema())
