from loguru import logger
from pydantic import Field, model_validator

from menu_api.core.config.base import BaseConfig
from menu_api.core.config.database import DataBaseConfig
from menu_api.core.config.pagination import PaginationConfig
from menu_api.core.config.redis import RedisConfig
from menu_api.core.config.storage import StorageConfig
from menu_api.enums.base import ExecutionMode, ProjectStage


class Settings(BaseConfig):
    EXECUTION_MODE: ExecutionMode = Field(default=ExecutionMode.TEST)
    STAGE: ProjectStage = Field(default=ProjectStage.LOCAL)
    PROJECT_NAME: str = Field(default="menu")
    SERVER_HOST: str = Field(default="localhost")
    SERVER_PORT: int = Field(default=8000)

    VERSION: str = Field(default="0.1.0")
    DEBUG: bool = Field(default=True)

    # Swagger
    SWAGGER_USERNAME: str = Field(default="admin")
    SWAGGER_PASSWORD: str = Field(default="admin")

    SENTRY_DSN: str = Field(default="")

    db: DataBaseConfig = DataBaseConfig()
    pagination: PaginationConfig = PaginationConfig()
    redis: RedisConfig = RedisConfig()
    storage: StorageConfig = StorageConfig()

    @property
    def include_in_schema(self) -> bool:
        return self.STAGE != ProjectStage.PRODUCTION

    @property
    def is_test_mode(self) -> bool:
        return self.EXECUTION_MODE == ExecutionMode.TEST

    @model_validator(mode="after")
    def production_extra_check(self) -> "Settings":
        if self.STAGE != ProjectStage.PRODUCTION:
            return self

        if not self.SENTRY_DSN:
            logger.error("Sentry DSN is not configured in production mode")

        if self.SWAGGER_PASSWORD == "admin":
            logger.warning("Default swagger credentials are used in production mode")

        return self


settings = Settings()
