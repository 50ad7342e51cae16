from .category import CategoryService
from .menu import MenuService
from .storages import LocalStorageRepository, S3StorageRepository, storage

__all__ = (
    "CategoryService",
    "LocalStorageRepository",
    "MenuService",
    "S3StorageRepository",
    "storage",
)
