from pathlib import Path

from pydantic import Field

from menu_api.core.config.base import BaseConfig
from menu_api.enums.base import ProjectStage, StorageBackend


class S3StorageConfig(BaseConfig):
    stage: ProjectStage = Field(ProjectStage.LOCAL, alias="STAGE")
    project: str = Field("menu", alias="S3_PROJECT_NAME")
    IMAGES: str = Field("images", alias="S3_IMAGES_BUCKET")

    # Credentials
    REGION: str = Field("", alias="S3_REGION")
    ENDPOINT_URL: str = Field("", alias="S3_ENDPOINT_URL")
    SECRET_KEY: str = Field("", alias="S3_SECRET_KEY")
    ACCESS_KEY: str = Field("", alias="S3_ACCESS_KEY")

    # Upload settings
    UPLOAD_RETRIES: int = Field(3, alias="S3_UPLOAD_RETRIES")
    UPLOAD_DELAY: int = Field(1, alias="S3_UPLOAD_DELAY")

    @property
    def pattern(self) -> str:
        return f"{self.project}-{{}}-{self.stage}"

    @property
    def images(self) -> str:
        return self.pattern.format(self.IMAGES)


class LocalStorageConfig(BaseConfig):
    media: str = Field("media", alias="LOCAL_STORAGE_MEDIA_FOLDER")
    IMAGES: str = Field("images", alias="LOCAL_STORAGE_IMAGES_FOLDER")
    MEDIA_URL: str = Field("/media", alias="LOCAL_STORAGE_MEDIA_URL")

    @property
    def base(self) -> Path:
        return Path(self.media).resolve()

    @property
    def images(self) -> str:
        return self.IMAGES


class StorageConfig(BaseConfig):
    backend_type: StorageBackend = Field(
        StorageBackend.LOCAL, alias="STORAGE_BACKEND", examples=StorageBackend.list()
    )
    MAX_UPLOAD_SIZE: int = Field(4 * 1024 * 1024, alias="STORAGE_MAX_UPLOAD_SIZE")

    s3: S3StorageConfig = S3StorageConfig()
    local: LocalStorageConfig = LocalStorageConfig()
