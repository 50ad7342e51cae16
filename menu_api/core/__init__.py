from .config import settings
from .init_sentry import init_sentry
from .swagger import swagger_router

__all__ = ("init_sentry", "settings", "swagger_router")
