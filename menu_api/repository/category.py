from typing import Sequence

from menu_api.core.exc import CategoryExistsException, CategoryNotFoundException
from menu_api.enums import OrderDirection
from menu_api.models import Category
from menu_api.repository.base import SQLAlchemyRepository


class CategoryRepository(SQLAlchemyRepository):
    model = Category
    default_order_by = "name"
    duplicate_error_class = CategoryExistsException
    object_not_found_error_class = CategoryNotFoundException

    async def get_all_by_name(self) -> Sequence[Category]:
        return await self.get_all(order_by="name", order_direction=OrderDirection.ASC)
