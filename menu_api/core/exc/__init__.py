from .base import (
    BadRequestException,
    BaseHTTPException,
    DBConnectionException,
    ForeignKeyViolationException,
    LoggerMixin,
    ObjectExistsException,
    ObjectNotFoundException,
)
from .category import CategoryExistsException, CategoryNotFoundException
from .menu import MenuExistsException, MenuNotFoundException
from .storage import InvalidImageException, StorageMaxRetryException

__all__ = (
    "BadRequestException",
    "BaseHTTPException",
    "CategoryExistsException",
    "CategoryNotFoundException",
    "DBConnectionException",
    "ForeignKeyViolationException",
    "InvalidImageException",
    "LoggerMixin",
    "MenuExistsException",
    "MenuNotFoundException",
    "ObjectExistsException",
    "ObjectNotFoundException",
    "StorageMaxRetryException",
)
