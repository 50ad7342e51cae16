from typing import Annotated

from fastapi import Depends, Query
from pydantic import UUID4

from menu_api.core import settings
from menu_api.schemas import MenuFilter
from menu_api.schemas.utils import CursorPaginationFilter
from menu_api.utils.unitofwork import ABCUnitOfWork, UnitOfWork


def get_cursor_pagination(
    limit: int = Query(
        settings.pagination.DEFAULT_LIMIT,
        ge=1,
        le=settings.pagination.MAX_LIMIT,
        description="Maximum number of items per page",
    ),
    cursor: UUID4 | None = Query(None, description="Cursor returned as nextCursor by the previous page"),
) -> CursorPaginationFilter:
    return CursorPaginationFilter(limit=limit, cursor=cursor)


def get_menu_filter(
    category_id: UUID4 | None = Query(None, alias="categoryId", description="Restrict items to one category"),
) -> MenuFilter:
    return MenuFilter(category_id=category_id)


UnitOfWorkDep = Annotated[ABCUnitOfWork, Depends(UnitOfWork)]
CursorPaginationDep = Annotated[CursorPaginationFilter, Depends(get_cursor_pagination)]
MenuFilterDep = Annotated[MenuFilter, Depends(get_menu_filter)]
