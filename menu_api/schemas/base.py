from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema exposed with camelCase names, accepting snake_case input as well."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelReadModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
