import asyncio

from aiobotocore.config import AioConfig
from aiobotocore.session import ClientCreatorContext, get_session
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from menu_api.core import settings
from menu_api.core.exc import StorageMaxRetryException
from menu_api.enums.base import StorageBackend
from menu_api.services.storages.abc import AbstractStorageRepository


class S3StorageRepository(AbstractStorageRepository):
    """S3 storage backend."""

    def __init__(self) -> None:
        self.settings = settings.storage.s3
        self.config = AioConfig(retries={"max_attempts": 10, "mode": "standard"}, read_timeout=60)
        self.session = get_session()

    # Specific backend methods
    async def create_client(self) -> ClientCreatorContext:
        """Init session for connection to S3"""
        return self.session.create_client(
            "s3",
            region_name=self.settings.REGION,
            endpoint_url=f"https://{self.settings.ENDPOINT_URL}",
            aws_secret_access_key=self.settings.SECRET_KEY,
            aws_access_key_id=self.settings.ACCESS_KEY,
            config=self.config,
        )

    async def get_link(self, key: str, bucket: str = None) -> str:
        """
        Create public link to file. Images are uploaded with public-read ACL, so no signing is needed.

        Args:
            key: file path
            bucket: bucket name

        Returns:
            Public link to file
        """
        bucket = bucket or self.settings.images

        return f"https://{bucket}.{self.settings.ENDPOINT_URL}/{key}"

    async def save_file(self, data: bytes, object_name: str, bucket: str = None) -> str:
        """
        Upload bytes data into file with object_name name .

        Args:
            data: bytes content
            object_name: file name to upload
            bucket: bucket name

        Raises:
            StorageMaxRetryException: if max retries reached

        Returns:
            file path in S3 bucket
        """

        bucket = bucket or self.settings.images
        delay = self.settings.UPLOAD_DELAY

        for attempt in range(self.settings.UPLOAD_RETRIES):
            try:
                async with await self.create_client() as s3:
                    await s3.put_object(Bucket=bucket, Key=object_name, Body=data, ACL="public-read")
                    logger.info(f"File was uploaded. URL: {object_name}")
                    return object_name

            except (BotoCoreError, ClientError) as e:
                logger.warning(f"Upload attempt {attempt + 1} of {object_name} failed: {e}")
                await asyncio.sleep(delay)
                delay *= 2  # Exponential backoff

        raise StorageMaxRetryException(object_name=object_name)

    async def delete_files_with_prefix(self, prefix: str, bucket: str = None, exclude: str = None) -> None:
        """
        Delete objects by file name prefix.

        Args:
            prefix: part of the name
            bucket: bucket name
            exclude: object name to keep
        """

        bucket = bucket or self.settings.images

        async with await self.create_client() as s3:
            response = await s3.list_objects_v2(Bucket=bucket, Prefix=prefix)
            keys = [{"Key": obj["Key"]} for obj in response.get("Contents", []) if obj["Key"] != exclude]

            if not keys:
                logger.info("No files to delete.")
                return

            await s3.delete_objects(Bucket=bucket, Delete={"Objects": keys})

        logger.success(f"Removed {len(keys)} files with {prefix=}")


is_s3 = settings.storage.backend_type == StorageBackend.S3
repository: S3StorageRepository | None = S3StorageRepository() if is_s3 else None
