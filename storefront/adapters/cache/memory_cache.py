# storefront/adapters/cache/memory_cache.py
import copy
import time
from typing import Any, Callable, Dict, Optional, Tuple

from storefront.core.ports.response_cache import IResponseCache


class InMemoryResponseCache(IResponseCache):
    """Dict-backed cache. Entries expire lazily on read."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}

    async def connect(self) -> None:
        return None

    async def close(self) -> None:
        self._entries.clear()

    async def get_json(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return copy.deepcopy(value)

    async def set_json(self, key: str, value: Any, ttl_sec: int) -> None:
        self._entries[key] = (self._clock() + ttl_sec, copy.deepcopy(value))

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def health_check(self) -> bool:
        return True
