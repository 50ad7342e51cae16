from fastapi import status

from menu_api.core.exc.base import BadRequestException, BaseHTTPException
from menu_api.enums import ExceptionAlias


class InvalidImageException(BadRequestException):
    message_pattern = ("Unsupported image: {0}", "reason")
    _exception_alias = ExceptionAlias.InvalidImage


class StorageMaxRetryException(BaseHTTPException):
    log_level = "error"
    status_code = status.HTTP_502_BAD_GATEWAY
    message_pattern = ("Failed to upload file {0} to storage", "object_name")
    sentry_record = True
    _exception_alias = ExceptionAlias.StorageUnavailable
