from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import UUID4, Field, PlainSerializer

from menu_api.schemas.base import CamelModel, CamelReadModel
from menu_api.schemas.category import CategoryShort
from menu_api.schemas.utils import CursorPage

# NUMERIC(10, 2) column, rendered as a plain JSON number
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class MenuBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=32, description="Dish title", examples=["Margherita"])
    text: str = Field(..., min_length=1, description="Dish description")
    price: Price = Field(..., ge=0, max_digits=10, decimal_places=2, description="Dish price", examples=[9.99])
    ingredients: str = Field(..., min_length=1, description="Comma separated ingredients")
    category_id: UUID4 = Field(..., description="Category of the dish")
    image_url: str | None = Field(None, description="Public image URL")


class MenuCreate(MenuBase):
    id: UUID4 | None = Field(None, description="Client supplied id")


class MenuUpdate(MenuBase):
    pass


class MenuImageUrlUpdate(CamelModel):
    image_url: str = Field(..., min_length=1, description="Image URL returned by the upload service")


class MenuFilter(CamelModel):
    category_id: UUID4 | None = Field(None, description="Restrict the listing to one category")


class MenuResponse(CamelReadModel):
    id: UUID4
    title: str
    text: str
    price: Price
    ingredients: str
    image_url: str | None = None
    category_id: UUID4
    category: CategoryShort
    created_at: datetime
    updated_at: datetime


MenuPage = CursorPage[MenuResponse]
