from fastapi import APIRouter, File, UploadFile, status
from pydantic import UUID4

from menu_api.api.dependencies import CursorPaginationDep, MenuFilterDep, UnitOfWorkDep
from menu_api.core import settings
from menu_api.schemas import MenuCreate, MenuImageUrlUpdate, MenuPage, MenuResponse, MenuUpdate
from menu_api.services import MenuService

router = APIRouter(prefix="/post", tags=["Menu"])


@router.get(
    "",
    name="post.list",
    operation_id="post.list",
    description="List menu items page by page, newest page first.",
    response_model=MenuPage,
    status_code=status.HTTP_200_OK,
)
async def list_posts(unit_of_work: UnitOfWorkDep, pagination: CursorPaginationDep, filters: MenuFilterDep) -> MenuPage:
    return await MenuService.get_page(unit_of_work, pagination=pagination, filters=filters)


@router.get(
    "/{menu_id}",
    name="post.byId",
    operation_id="post.byId",
    description="Get menu item with its category.",
    response_model=MenuResponse,
    status_code=status.HTTP_200_OK,
)
async def get_post(unit_of_work: UnitOfWorkDep, menu_id: UUID4) -> MenuResponse:
    return await MenuService.get_by_id(unit_of_work, menu_id=menu_id)


@router.post(
    "",
    name="post.add",
    operation_id="post.add",
    description="Create menu item.",
    response_model=MenuResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_post(unit_of_work: UnitOfWorkDep, data: MenuCreate) -> MenuResponse:
    return await MenuService.create(unit_of_work, data=data)


@router.put(
    "/{menu_id}",
    name="post.update",
    operation_id="post.update",
    description="Update menu item.",
    response_model=MenuResponse,
    status_code=status.HTTP_200_OK,
)
async def update_post(unit_of_work: UnitOfWorkDep, menu_id: UUID4, data: MenuUpdate) -> MenuResponse:
    return await MenuService.update(unit_of_work, menu_id=menu_id, data=data)


@router.patch(
    "/{menu_id}/image-url",
    name="post.updateImageUrl",
    operation_id="post.updateImageUrl",
    description="Attach an image url returned by the upload service.",
    response_model=MenuResponse,
    status_code=status.HTTP_200_OK,
)
async def update_post_image_url(unit_of_work: UnitOfWorkDep, menu_id: UUID4, data: MenuImageUrlUpdate) -> MenuResponse:
    return await MenuService.update_image_url(unit_of_work, menu_id=menu_id, data=data)


@router.post(
    "/{menu_id}/image",
    name="post.uploadImage",
    operation_id="post.uploadImage",
    description="Upload png, jpg or gif image for the menu item.",
    response_model=MenuResponse,
    status_code=status.HTTP_200_OK,
)
async def upload_post_image(unit_of_work: UnitOfWorkDep, menu_id: UUID4, file: UploadFile = File(...)) -> MenuResponse:
    # one byte over the limit is enough to reject the upload
    data = await file.read(settings.storage.MAX_UPLOAD_SIZE + 1)
    return await MenuService.upload_image(unit_of_work, menu_id=menu_id, data=data, content_type=file.content_type)


@router.delete(
    "/{menu_id}",
    name="post.delete",
    operation_id="post.delete",
    description="Delete menu item.",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_post(unit_of_work: UnitOfWorkDep, menu_id: UUID4) -> None:
    await MenuService.delete(unit_of_work, menu_id=menu_id)
