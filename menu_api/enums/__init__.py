from .base import BaseStrEnum, ExceptionAlias, ExecutionMode, OrderDirection, ProjectStage, StorageBackend
from .storage import ImageContentType, ObjectExtension

__all__ = (
    "BaseStrEnum",
    "ExceptionAlias",
    "ExecutionMode",
    "ImageContentType",
    "ObjectExtension",
    "OrderDirection",
    "ProjectStage",
    "StorageBackend",
)
