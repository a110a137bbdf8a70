# storefront/core/ports/response_cache.py
from typing import Any, Optional, Protocol


class IResponseCache(Protocol):
    """
    Port for the boundary-level response cache.
    Values are JSON-compatible structures with a fixed time-to-live.
    """

    async def get_json(self, key: str) -> Optional[Any]:
        """Returns the cached value, or None on a miss."""
        ...

    async def set_json(self, key: str, value: Any, ttl_sec: int) -> None:
        ...

    async def delete(self, key: str) -> None:
        ...

    async def health_check(self) -> bool:
        ...
