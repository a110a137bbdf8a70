# storefront/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols the Infrastructure Adapters must implement. They let the Core
reach storage and caches without knowing the implementation details.
"""

from .order_repository import IOrderRepository
from .product_repository import IProductRepository
from .response_cache import IResponseCache

__all__ = [
    "IOrderRepository",
    "IProductRepository",
    "IResponseCache",
]
