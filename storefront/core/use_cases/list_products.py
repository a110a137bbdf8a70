# storefront/core/use_cases/list_products.py
from typing import List

from storefront.core.domain.models import Product
from storefront.core.ports.product_repository import IProductRepository


class ListProducts:
    """Use Case: Enumerates the catalogue. A pure pass-through to the repository."""

    def __init__(self, repo: IProductRepository):
        self.repo = repo

    async def execute(self) -> List[Product]:
        return await self.repo.list_all()
