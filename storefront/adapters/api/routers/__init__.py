# storefront/adapters/api/routers/__init__.py
"""
API Route Definitions.

- `orders`: Create and read orders (hexagonal context).
- `products`: Create and list products (layered context, cached list).
- `health`: System health checks.
"""

from .health import router as health_router
from .orders import router as orders_router
from .products import router as products_router

__all__ = [
    "health_router",
    "orders_router",
    "products_router",
]
