# storefront/adapters/persistence/memory.py
import itertools
from typing import Dict, List, Optional

from storefront.core.domain.models import Order, OrderId, Product
from storefront.core.ports.order_repository import IOrderRepository
from storefront.core.ports.product_repository import IProductRepository


class InMemoryOrderRepository(IOrderRepository):
    """Process-local Order store. Contents are lost on restart."""

    def __init__(self):
        self._orders: Dict[str, Order] = {}

    async def create(self, order: Order) -> OrderId:
        self._orders[order.id.value] = order
        return order.id

    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        return self._orders.get(order_id.value)

    async def health_check(self) -> bool:
        return True


class InMemoryProductRepository(IProductRepository):
    """Process-local Product store with a sequential id counter."""

    def __init__(self):
        self._products: List[Product] = []
        self._ids = itertools.count(1)

    async def create(self, product: Product) -> int:
        product_id = next(self._ids)
        self._products.append(product.model_copy(update={"id": product_id}))
        return product_id

    async def list_all(self) -> List[Product]:
        return list(self._products)

    async def health_check(self) -> bool:
        return True
