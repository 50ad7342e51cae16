from .category import CategoryCreate, CategoryResponse, CategoryShort, CategoryUpdate
from .menu import MenuCreate, MenuFilter, MenuImageUrlUpdate, MenuPage, MenuResponse, MenuUpdate

__all__ = (
    "CategoryCreate",
    "CategoryResponse",
    "CategoryShort",
    "CategoryUpdate",
    "MenuCreate",
    "MenuFilter",
    "MenuImageUrlUpdate",
    "MenuPage",
    "MenuResponse",
    "MenuUpdate",
)
