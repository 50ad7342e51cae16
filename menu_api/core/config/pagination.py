from pydantic import Field, model_validator

from menu_api.core.config.base import BaseConfig


class PaginationConfig(BaseConfig):
    DEFAULT_LIMIT: int = Field(50, alias="PAGINATION_DEFAULT_LIMIT")
    MAX_LIMIT: int = Field(100, alias="PAGINATION_MAX_LIMIT")

    @model_validator(mode="after")
    def validate_limits(self) -> "PaginationConfig":
        if not 1 <= self.DEFAULT_LIMIT <= self.MAX_LIMIT:
            raise ValueError("PAGINATION_DEFAULT_LIMIT must be between 1 and PAGINATION_MAX_LIMIT")
        return self
