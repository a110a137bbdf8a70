# storefront/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

Each use case is a single business action invoked by the API boundary:
1. Validates its input against the business rules.
2. Builds the Domain Entity.
3. Delegates to a Repository Port and returns the result unchanged.

Use cases only originate `ValidationError`; storage failures and
cancellation pass through untouched.
"""

from .create_order import CreateOrder
from .get_order import GetOrder
from .create_product import CreateProduct
from .list_products import ListProducts

__all__ = [
    "CreateOrder",
    "GetOrder",
    "CreateProduct",
    "ListProducts",
]
