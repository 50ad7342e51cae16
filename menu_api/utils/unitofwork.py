from abc import ABC, abstractmethod
from typing import Any

from loguru import logger
from sentry_sdk import capture_exception
from sqlalchemy.ext.asyncio import AsyncSession

from menu_api.core.exc import BaseHTTPException
from menu_api.db.database import async_session, get_sessionmaker_without_pool
from menu_api.repository import CategoryRepository, MenuRepository


class ABCUnitOfWork(ABC):
    session: AsyncSession

    # Repository classes
    category: CategoryRepository
    menu: MenuRepository

    @abstractmethod
    def __init__(self) -> None:
        raise NotImplementedError

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        raise NotImplementedError

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.close(exc_type, exc)

    @abstractmethod
    async def close(self, exc_type: Any, exc: Any) -> None:
        raise NotImplementedError


class UnitOfWork(ABCUnitOfWork):
    def __init__(self) -> None:
        self.session_maker = async_session

    async def __aenter__(self) -> "UnitOfWork":
        self.session = self.session_maker()

        self.category = CategoryRepository(self.session)
        self.menu = MenuRepository(self.session)

        return self

    async def close(self, exc_type: Any, exc: Any) -> None:
        """
        Finish the transaction and close the session in any case.
        """
        try:
            await self.finish(exc, exc_type)

        except Exception as e:
            capture_exception(e)
            logger.exception("Failed to finish the transaction: {e}", e=e)
            if not exc:
                raise

        finally:
            await self.session.close()
            await logger.complete()

    async def finish(self, exc: Any, exc_type: Any) -> None:
        if not exc:
            await self.session.commit()
            return

        if not issubclass(exc_type, BaseHTTPException):
            capture_exception(exc)
            logger.error("An error occurred while processing query. Rolling back. Error: {exc}", exc=exc)

        await self.session.rollback()


class UnitOfWorkNoPool(UnitOfWork):
    def __init__(self) -> None:
        super().__init__()
        self.session_maker = get_sessionmaker_without_pool()
