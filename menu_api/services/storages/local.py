from pathlib import Path

import aiofiles
import aiofiles.os
from loguru import logger

from menu_api.core import settings
from menu_api.enums.base import StorageBackend
from menu_api.services.storages.abc import AbstractStorageRepository


class LocalStorageRepository(AbstractStorageRepository):
    """Local filesystem storage backend, files are served under the media url."""

    def __init__(self) -> None:
        self.settings = settings.storage.local

        self.folder: Path = self.settings.base
        self.folder.mkdir(parents=True, exist_ok=True)

    # Specific backend methods
    def get_folder(self, folder_name: str = None) -> Path:
        """
        Create folder if not exists.

        Args:
            folder_name: folder name

        Returns:
            Folder path
        """

        folder = self.folder / (folder_name or self.settings.images)
        folder.mkdir(exist_ok=True)
        return folder

    # Protocol methods
    async def get_link(self, key: str, bucket: str = None) -> str:
        """
        Return public url of the file.

        Args:
            key: object path
            bucket: folder name

        Returns:
            url relative to the server root
        """
        folder_name = bucket or self.settings.images
        return f"{self.settings.MEDIA_URL.rstrip('/')}/{folder_name}/{key}"

    async def save_file(self, data: bytes, object_name: str, bucket: str = None) -> str:
        """
        Save object to local storage.

        Args:
            data: bytes content
            object_name: file name to save
            bucket: folder name

        Returns:
            saved object name
        """

        async with aiofiles.open(self.get_folder(bucket) / object_name, "wb") as file:
            await file.write(data)

        logger.info(f"File was saved locally. Name: {object_name}")
        return object_name

    async def delete_files_with_prefix(self, prefix: str, bucket: str = None, exclude: str = None) -> None:
        """
        Delete objects by file name prefix.

        Args:
            prefix: part of the name
            bucket: folder name
            exclude: object name to keep
        """

        folder = self.get_folder(bucket)
        files_to_delete = [file for file in folder.glob(f"{prefix}*") if file.name != exclude]

        if not files_to_delete:
            logger.info("No files to delete.")
            return

        for file in files_to_delete:
            await aiofiles.os.remove(file)

        logger.success(f"Removed {len(files_to_delete)} files with {prefix=}")


is_local = settings.storage.backend_type == StorageBackend.LOCAL
repository: LocalStorageRepository | None = LocalStorageRepository() if is_local else None
