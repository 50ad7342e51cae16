from fastapi import APIRouter, status
from pydantic import UUID4

from menu_api.api.dependencies import UnitOfWorkDep
from menu_api.schemas import CategoryCreate, CategoryResponse, CategoryUpdate
from menu_api.services import CategoryService

router = APIRouter(prefix="/category", tags=["Category"])


@router.get(
    "",
    name="category.list",
    operation_id="category.list",
    description="List all categories ordered by name.",
    response_model=list[CategoryResponse],
    status_code=status.HTTP_200_OK,
)
async def list_categories(unit_of_work: UnitOfWorkDep) -> list[CategoryResponse]:
    return await CategoryService.get_all(unit_of_work)


@router.get(
    "/{category_id}",
    name="category.byId",
    operation_id="category.byId",
    description="Get category.",
    response_model=CategoryResponse,
    status_code=status.HTTP_200_OK,
)
async def get_category(unit_of_work: UnitOfWorkDep, category_id: UUID4) -> CategoryResponse:
    return await CategoryService.get_by_id(unit_of_work, category_id=category_id)


@router.post(
    "",
    name="category.create",
    operation_id="category.create",
    description="Create category.",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(unit_of_work: UnitOfWorkDep, data: CategoryCreate) -> CategoryResponse:
    return await CategoryService.create(unit_of_work, data=data)


@router.put(
    "/{category_id}",
    name="category.update",
    operation_id="category.update",
    description="Rename category.",
    response_model=CategoryResponse,
    status_code=status.HTTP_200_OK,
)
async def update_category(unit_of_work: UnitOfWorkDep, category_id: UUID4, data: CategoryUpdate) -> CategoryResponse:
    return await CategoryService.update(unit_of_work, category_id=category_id, data=data)


@router.delete(
    "/{category_id}",
    name="category.delete",
    operation_id="category.delete",
    description="Delete category and every menu item in it.",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_category(unit_of_work: UnitOfWorkDep, category_id: UUID4) -> None:
    await CategoryService.delete(unit_of_work, category_id=category_id)
