from enum import StrEnum


class BaseStrEnum(StrEnum):
    @classmethod
    def list(cls) -> list[str]:
        return [member.value for member in cls]


class ExecutionMode(BaseStrEnum):
    TEST = "test"
    PRODUCTION = "production"


class ProjectStage(BaseStrEnum):
    LOCAL = "local"
    DEV = "dev"
    PRODUCTION = "production"


class StorageBackend(BaseStrEnum):
    LOCAL = "local"
    S3 = "s3"


class OrderDirection(BaseStrEnum):
    ASC = "asc"
    DESC = "desc"


class ExceptionAlias(BaseStrEnum):
    DBObjectNotFound = "DBObjectNotFound"
    DBObjectExists = "DBObjectExists"
    DBForeignKeyViolation = "DBForeignKeyViolation"
    DBConnection = "DBConnection"
    InvalidImage = "InvalidImage"
    StorageUnavailable = "StorageUnavailable"
