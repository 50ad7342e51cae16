from time import time_ns

from loguru import logger
from pydantic import UUID4

from menu_api.core import settings
from menu_api.core.exc import CategoryNotFoundException, InvalidImageException
from menu_api.enums import ImageContentType, ObjectExtension
from menu_api.schemas import MenuCreate, MenuFilter, MenuImageUrlUpdate, MenuPage, MenuResponse, MenuUpdate
from menu_api.schemas.utils import CursorPaginationFilter
from menu_api.services.storages import AbstractStorageRepository, storage
from menu_api.utils.convertors import webp_converter
from menu_api.utils.unitofwork import ABCUnitOfWork


class MenuService:
    @staticmethod
    async def _ensure_category(unit_of_work: ABCUnitOfWork, category_id: UUID4) -> None:
        if not await unit_of_work.category.exist(id=category_id):
            raise CategoryNotFoundException(id=category_id)

    @classmethod
    async def get_page(
        cls, unit_of_work: ABCUnitOfWork, *, pagination: CursorPaginationFilter, filters: MenuFilter
    ) -> MenuPage:
        """
        Get one page of menu items, newest pages first and items oldest first within a page.

        Args:
            unit_of_work
            pagination: limit and cursor
            filters: optional category filter

        Returns:
            MenuPage with items and the cursor of the next page
        """
        async with unit_of_work:
            output = await unit_of_work.menu.list_page(
                limit=pagination.limit, cursor=pagination.cursor, **filters.model_dump(exclude_none=True)
            )
            return MenuPage(
                items=[MenuResponse.model_validate(item) for item in output.items],
                next_cursor=output.next_cursor,
            )

    @classmethod
    async def get_by_id(cls, unit_of_work: ABCUnitOfWork, *, menu_id: UUID4) -> MenuResponse:
        async with unit_of_work:
            menu = await unit_of_work.menu.get_with_category(menu_id)
            return MenuResponse.model_validate(menu)

    @classmethod
    async def create(cls, unit_of_work: ABCUnitOfWork, *, data: MenuCreate) -> MenuResponse:
        async with unit_of_work:
            await cls._ensure_category(unit_of_work, data.category_id)

            menu = await unit_of_work.menu.create(data)
            menu = await unit_of_work.menu.get_with_category(menu.id)
            response = MenuResponse.model_validate(menu)

        logger.info(f"Menu item {response.title!r} created in category {response.category.name!r}")
        return response

    @classmethod
    async def update(cls, unit_of_work: ABCUnitOfWork, *, menu_id: UUID4, data: MenuUpdate) -> MenuResponse:
        async with unit_of_work:
            await cls._ensure_category(unit_of_work, data.category_id)

            await unit_of_work.menu.update(data, return_object=True, id=menu_id)
            menu = await unit_of_work.menu.get_with_category(menu_id)
            return MenuResponse.model_validate(menu)

    @classmethod
    async def update_image_url(
        cls, unit_of_work: ABCUnitOfWork, *, menu_id: UUID4, data: MenuImageUrlUpdate
    ) -> MenuResponse:
        async with unit_of_work:
            await unit_of_work.menu.update(data, return_object=True, id=menu_id)
            menu = await unit_of_work.menu.get_with_category(menu_id)
            return MenuResponse.model_validate(menu)

    @classmethod
    async def upload_image(
        cls,
        unit_of_work: ABCUnitOfWork,
        *,
        menu_id: UUID4,
        data: bytes,
        content_type: str | None,
        image_storage: AbstractStorageRepository = None,
    ) -> MenuResponse:
        """
        Store an uploaded image as webp and attach its url to the menu item.

        Args:
            unit_of_work
            menu_id: menu item id
            data: raw image bytes
            content_type: content type declared by the client
            image_storage: storage backend, configured one when omitted

        Raises:
            MenuNotFoundException: if menu item does not exist
            InvalidImageException: if file is not a supported image

        Returns:
            updated menu item
        """
        image_storage = image_storage or storage

        if content_type not in ImageContentType.list():
            raise InvalidImageException(reason=f"content type {content_type} is not accepted")

        if not data:
            raise InvalidImageException(reason="file is empty")

        if len(data) > settings.storage.MAX_UPLOAD_SIZE:
            raise InvalidImageException(reason=f"file exceeds {settings.storage.MAX_UPLOAD_SIZE} bytes")

        prefix = image_storage.construct_object_name(prefix="menu", id=menu_id)
        object_name = image_storage.construct_object_name(
            prefix="menu", id=menu_id, version=time_ns(), extension=ObjectExtension.WEBP
        )
        stored = False

        try:
            async with unit_of_work:
                await unit_of_work.menu.get_one(id=menu_id)

                await image_storage.save_file(data=webp_converter(data), object_name=object_name)
                stored = True
                image_url = await image_storage.get_link(object_name)

                await unit_of_work.menu.update({"image_url": image_url}, id=menu_id)
                menu = await unit_of_work.menu.get_with_category(menu_id)
                response = MenuResponse.model_validate(menu)

        except Exception:
            # the item still points at its previous image
            if stored:
                await image_storage.delete_files_with_prefix(prefix=object_name)
            raise

        await image_storage.delete_files_with_prefix(prefix=prefix, exclude=object_name)

        logger.success(f"Image of menu item {menu_id} stored at {image_url}")
        return response

    @classmethod
    async def delete(cls, unit_of_work: ABCUnitOfWork, *, menu_id: UUID4) -> None:
        async with unit_of_work:
            await unit_of_work.menu.delete(return_object=True, id=menu_id)
