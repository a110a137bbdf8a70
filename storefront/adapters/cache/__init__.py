# storefront/adapters/cache/__init__.py
"""
Response Cache Adapters.

- RedisResponseCache: shared cache backed by Redis (`SET ... EX`).
- InMemoryResponseCache: process-local cache for development and tests.
"""

from .memory_cache import InMemoryResponseCache
from .redis_cache import RedisResponseCache

__all__ = [
    "InMemoryResponseCache",
    "RedisResponseCache",
]
