from abc import ABC, abstractmethod
from typing import Any

from menu_api.core import settings
from menu_api.enums import ObjectExtension
from menu_api.utils.convertors import text_normalize


class AbstractStorageRepository(ABC):
    @abstractmethod
    async def get_link(self, *args: Any, **kwargs: Any) -> str:
        """Create public link to file."""
        raise NotImplementedError

    @abstractmethod
    async def save_file(self, *args: Any, **kwargs: Any) -> Any:
        """Save file to storage."""
        raise NotImplementedError

    @abstractmethod
    async def delete_files_with_prefix(self, *args: Any, **kwargs: Any) -> Any:
        """Delete files with prefix from storage."""
        raise NotImplementedError

    @staticmethod
    def construct_object_name(prefix: str = None, extension: ObjectExtension = None, **kwargs: Any) -> str:
        """
        Creating object name basing on arguments.

        Args:
            prefix: leading part of the name, project name when omitted
            extension: extension postfix

        Returns:
            concatenated string which represents file path in the images folder or bucket
        """
        parts = [text_normalize(prefix if prefix else settings.PROJECT_NAME.lower())]
        parts.extend(str(value) for value in kwargs.values() if value)
        file_name = "_".join(parts)
        if extension:
            file_name += extension
        return file_name
