from pydantic import Field

from menu_api.core.config.base import BaseConfig


class DataBaseConfig(BaseConfig):
    URL: str | None = Field(None, alias="DB_URL", description="Full SQLAlchemy URL, overrides the parts below")
    USER: str = Field("postgres", alias="DB_USER")
    PASSWORD: str = Field("postgres", alias="DB_PASSWORD")
    HOST: str = Field("localhost", alias="DB_HOST")
    PORT: str = Field("5432", alias="DB_PORT")
    NAME: str = Field("menu", alias="DB_NAME")

    POOL_SIZE: int = 20
    MAX_OVERFLOW: int = 10
    POOL_RECYCLE: int = 1800

    @property
    def url(self) -> str:
        """Constructs the SQLAlchemy URL using the database configuration."""
        if self.URL:
            return self.URL
        return f"postgresql+asyncpg://{self.USER}:{self.PASSWORD}@{self.HOST}:{self.PORT}/{self.NAME}"

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")
