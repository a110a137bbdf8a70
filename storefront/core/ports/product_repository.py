# storefront/core/ports/product_repository.py
from typing import List, Protocol

from storefront.core.domain.models import Product


class IProductRepository(Protocol):
    """
    Port for Product persistence.
    The store assigns the sequential integer identifier.
    """

    async def create(self, product: Product) -> int:
        """Persists a product and returns its store-assigned id."""
        ...

    async def list_all(self) -> List[Product]:
        """Returns every product, in whatever order the medium yields them."""
        ...

    async def health_check(self) -> bool:
        """Returns True if the underlying storage is accessible."""
        ...
