from .base import Base, CreatedAtModel, TimestampModel, UpdatedAtModel, UUIDModel
from .category import Category
from .menu import Menu

__all__ = (
    "Base",
    "Category",
    "CreatedAtModel",
    "Menu",
    "TimestampModel",
    "UUIDModel",
    "UpdatedAtModel",
)
