import functools
from typing import Any

from sqlalchemy import NullPool, event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from menu_api.core import settings


def get_engine_options() -> dict[str, Any]:
    if settings.db.is_sqlite:
        return {}

    return dict(
        pool_recycle=settings.db.POOL_RECYCLE,
        pool_pre_ping=True,
        pool_size=settings.db.POOL_SIZE,
        max_overflow=settings.db.MAX_OVERFLOW,
    )


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(
    url=settings.db.url,
    echo=settings.is_test_mode and settings.DEBUG,
    **get_engine_options(),
)

if settings.db.is_sqlite:
    enable_sqlite_foreign_keys(engine)

async_session = async_sessionmaker(engine, expire_on_commit=False)


def create_null_pool_engine() -> AsyncEngine:
    return create_async_engine(url=settings.db.url, poolclass=NullPool, echo=settings.is_test_mode)


@functools.lru_cache
def get_sessionmaker_without_pool() -> async_sessionmaker:
    null_pool_engine = create_null_pool_engine()
    if settings.db.is_sqlite:
        enable_sqlite_foreign_keys(null_pool_engine)
    return async_sessionmaker(bind=null_pool_engine, autoflush=False, expire_on_commit=False)
