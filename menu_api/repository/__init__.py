from .category import CategoryRepository
from .menu import MenuRepository

__all__ = (
    "CategoryRepository",
    "MenuRepository",
)
