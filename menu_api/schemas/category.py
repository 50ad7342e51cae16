from datetime import datetime

from pydantic import UUID4, Field, field_validator

from menu_api.schemas.base import CamelModel, CamelReadModel


class CategoryBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255, description="Category name", examples=["Pizza", "Pasta"])

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Category name must not be blank")
        return v.strip()


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CategoryBase):
    pass


class CategoryShort(CamelReadModel):
    id: UUID4
    name: str


class CategoryResponse(CategoryShort):
    created_at: datetime
    updated_at: datetime
