from logging import LogRecord

import sentry_sdk
from loguru import logger
from loguru._defaults import LOGURU_FORMAT
from sentry_sdk.integrations.asyncpg import AsyncPGIntegration
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import _IGNORED_LOGGERS, EventHandler
from sentry_sdk.integrations.loguru import Integration, LoggingLevels
from sentry_sdk.integrations.redis import RedisIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

from menu_api.core.config import settings
from menu_api.enums import ExecutionMode


class CustomLoguruEventHandler(EventHandler):
    def _can_record(self, record: LogRecord) -> bool:
        if record.name in _IGNORED_LOGGERS:
            return False

        if record.exc_info is None:
            return True

        exc_type, *_ = record.exc_info

        if not exc_type:
            return True

        # filter sending exceptions into sentry
        if not getattr(exc_type, "sentry_record", True):
            return False

        return True


class CustomLoguruIntegration(Integration):
    identifier = "custom_loguru_integration"

    @staticmethod
    def setup_once() -> None:
        logger.add(
            CustomLoguruEventHandler(),
            level=LoggingLevels.ERROR.value,
            format=LOGURU_FORMAT,
        )


def init_sentry() -> None:
    if settings.EXECUTION_MODE == ExecutionMode.PRODUCTION and settings.SENTRY_DSN:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            environment=settings.STAGE,
            integrations=[
                AsyncPGIntegration(record_params=settings.include_in_schema),
                CustomLoguruIntegration(),
                FastApiIntegration(),
                RedisIntegration(),
                SqlalchemyIntegration(),
            ],
            release=settings.VERSION,
        )
