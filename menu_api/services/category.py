from typing import Any

from loguru import logger
from pydantic import UUID4
from redis.exceptions import RedisError

from menu_api.core import settings
from menu_api.db.redis import redis_pool
from menu_api.schemas import CategoryCreate, CategoryResponse, CategoryUpdate
from menu_api.utils.unitofwork import ABCUnitOfWork


class CategoryService:
    cache_key = settings.redis.categories_key

    @classmethod
    async def _get_cached(cls) -> list[dict[str, Any]] | None:
        try:
            return await redis_pool.get_json(cls.cache_key)

        except RedisError as e:
            logger.warning(f"Categories cache is unavailable: {e}")
            return None

    @classmethod
    async def _set_cached(cls, categories: list[CategoryResponse]) -> None:
        value = [category.model_dump(mode="json") for category in categories]

        try:
            await redis_pool.set_json(cls.cache_key, value, ttl=settings.redis.categories_ttl)

        except RedisError as e:
            logger.warning(f"Categories cache is unavailable: {e}")

    @classmethod
    async def invalidate_cache(cls) -> None:
        try:
            await redis_pool.remove_key(cls.cache_key)

        except RedisError as e:
            logger.warning(f"Categories cache is unavailable: {e}")

    @classmethod
    async def get_all(cls, unit_of_work: ABCUnitOfWork) -> list[CategoryResponse]:
        """
        Get all categories ordered by name, served from cache when possible.

        Args:
            unit_of_work

        Returns:
            list of CategoryResponse objects
        """
        cached = await cls._get_cached()

        if cached is not None:
            return [CategoryResponse.model_validate(category) for category in cached]

        async with unit_of_work:
            categories = await unit_of_work.category.get_all_by_name()
            response = [CategoryResponse.model_validate(category) for category in categories]

        await cls._set_cached(response)
        return response

    @classmethod
    async def get_by_id(cls, unit_of_work: ABCUnitOfWork, *, category_id: UUID4) -> CategoryResponse:
        async with unit_of_work:
            category = await unit_of_work.category.get_one(id=category_id)
            return CategoryResponse.model_validate(category)

    @classmethod
    async def create(cls, unit_of_work: ABCUnitOfWork, *, data: CategoryCreate) -> CategoryResponse:
        async with unit_of_work:
            category = await unit_of_work.category.create(data)
            response = CategoryResponse.model_validate(category)

        logger.info(f"Category {response.name!r} created")
        await cls.invalidate_cache()
        return response

    @classmethod
    async def update(cls, unit_of_work: ABCUnitOfWork, *, category_id: UUID4, data: CategoryUpdate) -> CategoryResponse:
        async with unit_of_work:
            category = await unit_of_work.category.update(data, return_object=True, id=category_id)
            response = CategoryResponse.model_validate(category)

        await cls.invalidate_cache()
        return response

    @classmethod
    async def delete(cls, unit_of_work: ABCUnitOfWork, *, category_id: UUID4) -> None:
        """
        Delete category together with its menu items.

        Args:
            unit_of_work
            category_id: category id

        Raises:
            CategoryNotFoundException: if category does not exist, no menu item is removed then
        """
        async with unit_of_work:
            items_count = await unit_of_work.menu.delete(category_id=category_id)
            await unit_of_work.category.delete(return_object=True, id=category_id)

        logger.info(f"Category {category_id} deleted with {items_count} menu items")
        await cls.invalidate_cache()
