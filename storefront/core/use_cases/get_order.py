# storefront/core/use_cases/get_order.py
from typing import Optional

from storefront.core.domain.models import Order, OrderId
from storefront.core.ports.order_repository import IOrderRepository


class GetOrder:
    """Use Case: Reads one order back. A pure pass-through to the repository."""

    def __init__(self, repo: IOrderRepository):
        self.repo = repo

    async def execute(self, order_id: OrderId) -> Optional[Order]:
        return await self.repo.get_by_id(order_id)
