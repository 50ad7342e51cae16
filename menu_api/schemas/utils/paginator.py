from typing import Generic, TypeVar

from pydantic import UUID4, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from menu_api.core import settings

M = TypeVar("M")


class CursorPaginationFilter(BaseModel):
    limit: int = Field(
        settings.pagination.DEFAULT_LIMIT,
        description="Maximum number of items per page",
        ge=1,
        le=settings.pagination.MAX_LIMIT,
    )
    cursor: UUID4 | None = Field(None, description="Id of the first item of the requested page")


class CursorOutput(BaseModel, Generic[M]):
    """Raw page produced by the repository layer."""

    items: list[M] = Field(description="Page items, oldest first")
    next_cursor: UUID4 | None = Field(None, description="Cursor of the next page, absent on the last one")


class CursorPage(CursorOutput[M], Generic[M]):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
