from typing import Any
from uuid import UUID

from sqlalchemy.orm import selectinload

from menu_api.core.exc import MenuExistsException, MenuNotFoundException
from menu_api.models import Menu
from menu_api.repository.base import CursorPaginateRepositoryMixin, SQLAlchemyRepository
from menu_api.schemas.utils import CursorOutput


class MenuRepository(SQLAlchemyRepository, CursorPaginateRepositoryMixin):
    model = Menu
    duplicate_error_class = MenuExistsException
    object_not_found_error_class = MenuNotFoundException

    @property
    def with_category(self) -> list[Any]:
        return [selectinload(self.model.category)]

    async def get_with_category(self, menu_id: UUID) -> Menu:
        return await self.get_one(join_load_list=self.with_category, id=menu_id)

    async def list_page(self, *, limit: int, cursor: UUID | None = None, **filters: Any) -> CursorOutput:
        return await self.cursor_list(join_load_list=self.with_category, limit=limit, cursor=cursor, **filters)
