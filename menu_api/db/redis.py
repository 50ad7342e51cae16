import asyncio
import json
from typing import Any

from redis.asyncio import Redis, connection

from menu_api.core import settings


class RedisPool:
    def __init__(self) -> None:
        self.instances: dict[asyncio.AbstractEventLoop, Redis] = dict()
        self.url = settings.redis.url
        self.max_connections = settings.redis.MAX_CONNECTIONS

    async def get_redis(self) -> Redis:
        loop = asyncio.get_running_loop()

        if loop not in self.instances:
            pool = connection.ConnectionPool.from_url(self.url, max_connections=self.max_connections)
            self.instances[loop] = Redis(connection_pool=pool)

        return self.instances[loop]

    async def aclose(self) -> None:
        loop = asyncio.get_running_loop()

        if loop in self.instances:
            await self.instances[loop].aclose()
            _ = self.instances.pop(loop)

    async def get_json(self, key: str) -> Any | None:
        redis = await self.get_redis()
        value = await redis.get(key)
        return json.loads(value) if value is not None else None

    async def set_json(self, key: str, value: Any, ttl: int) -> None:
        redis = await self.get_redis()
        await redis.set(key, json.dumps(value), ex=ttl)

    async def remove_key(self, key: str) -> None:
        redis = await self.get_redis()
        await redis.delete(key)


redis_pool = RedisPool()
