from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator
from sentry_sdk import capture_exception

from menu_api.api import api_router
from menu_api.core import init_sentry, settings, swagger_router
from menu_api.db.redis import redis_pool
from menu_api.enums import StorageBackend


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    init_sentry()

    yield

    await redis_pool.aclose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=None,
    debug=settings.DEBUG,
    docs_url=None,
    redoc_url=None,
    version=settings.VERSION,
    lifespan=lifespan,
)

# Prometheus metrics
Instrumentator().instrument(app).expose(app, include_in_schema=False)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    capture_exception(exc)
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder({"detail": exc.errors(), "body": exc.body}),
    )


app.include_router(swagger_router, tags=["Swagger"])
app.include_router(api_router)

if settings.storage.backend_type == StorageBackend.LOCAL:
    local_storage = settings.storage.local
    local_storage.base.mkdir(parents=True, exist_ok=True)
    app.mount(local_storage.MEDIA_URL, StaticFiles(directory=local_storage.base), name="media")

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "menu_api.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG,
        forwarded_allow_ips="*",
    )
