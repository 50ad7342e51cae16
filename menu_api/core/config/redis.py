from pydantic import Field

from menu_api.core.config.base import BaseConfig


class RedisConfig(BaseConfig):
    MAX_CONNECTIONS: int = 100
    host: str = Field("localhost", alias="REDIS_HOST")
    port: int = Field(6379, alias="REDIS_PORT")
    username: str | None = Field(None, alias="REDIS_USERNAME")
    password: str | None = Field(None, alias="REDIS_PASSWORD")
    db: int = Field(0, alias="REDIS_DB")

    categories_key: str = "categories:all"
    categories_ttl: int = Field(3600, alias="CATEGORIES_CACHE_TTL")

    @property
    def base_url(self) -> str:
        host_port = f"{self.host}:{self.port}"

        if self.username and self.password:
            return f"redis://{self.username}:{self.password}@{host_port}"

        elif self.password:
            return f"redis://:{self.password}@{host_port}"

        else:
            return f"redis://{host_port}"

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.db}"
