# storefront/adapters/cache/redis_cache.py
import json
from typing import Any, Optional

import structlog
from redis.asyncio import Redis, from_url
from redis.exceptions import RedisError

from storefront.core.ports.response_cache import IResponseCache

logger = structlog.get_logger()


class RedisResponseCache(IResponseCache):
    """
    Adapter for Redis interactions.
    Handles connection pooling and JSON serialization of cached responses.

    Redis failures are logged and reported as a miss: the cache must never
    be the reason a request fails.
    """

    def __init__(self, redis_url: str, key_prefix: str = "storefront:cache:"):
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self._redis: Optional[Redis] = None

    async def connect(self) -> None:
        """Initializes the Redis connection pool."""
        if not self._redis:
            self._redis = from_url(self.redis_url, decode_responses=True)
            logger.info("redis_cache_connected")

    async def close(self) -> None:
        """Closes the connection pool."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None
            logger.info("redis_cache_disconnected")

    async def get_json(self, key: str) -> Optional[Any]:
        if not self._redis:
            await self.connect()

        try:
            data = await self._redis.get(self.key_prefix + key)
        except RedisError as e:
            logger.warning("cache_get_failed", key=key, error=str(e))
            return None

        if data is None:
            return None
        try:
            return json.loads(data)
        except ValueError:
            logger.warning("cache_entry_corrupt", key=key)
            return None

    async def set_json(self, key: str, value: Any, ttl_sec: int) -> None:
        if not self._redis:
            await self.connect()

        try:
            await self._redis.set(self.key_prefix + key, json.dumps(value), ex=ttl_sec)
        except RedisError as e:
            logger.warning("cache_set_failed", key=key, error=str(e))

    async def delete(self, key: str) -> None:
        if not self._redis:
            await self.connect()

        try:
            await self._redis.delete(self.key_prefix + key)
        except RedisError as e:
            logger.warning("cache_delete_failed", key=key, error=str(e))

    async def health_check(self) -> bool:
        if not self._redis:
            return False
        try:
            return bool(await self._redis.ping())
        except RedisError:
            return False
