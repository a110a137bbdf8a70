# storefront/core/use_cases/create_order.py
import structlog

from storefront.core.domain.exceptions import ValidationError
from storefront.core.domain.models import Order, OrderId
from storefront.core.ports.order_repository import IOrderRepository
from storefront.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

# Stored as VARCHAR(255) and a 32-bit INTEGER.
SKU_MAX_LENGTH = 255
QTY_MAX = 2**31 - 1


class CreateOrder:
    """
    Use Case: Places a new order.

    Responsibilities:
    1. Rejects a blank or oversized SKU and an out-of-range quantity.
    2. Generates the OrderId client side.
    3. Persists the order through the IOrderRepository Port.
    """

    def __init__(self, repo: IOrderRepository):
        self.repo = repo

    async def execute(self, sku: str, qty: int) -> OrderId:
        """
        Args:
            sku: Stock keeping unit. Non-blank, at most SKU_MAX_LENGTH characters.
            qty: Quantity ordered. Between 1 and QTY_MAX.

        Returns:
            OrderId: The identifier returned by the repository.

        Raises:
            ValidationError: If a business rule is broken (no storage is touched).
            StorageUnavailableError: Passed through from the repository.
        """
        with tracer.start_as_current_span("use_case.create_order") as span:
            span.set_attribute("app.sku", sku or "")
            span.set_attribute("app.qty", qty)

            if not sku or not sku.strip():
                logger.info("order_rejected", reason="empty_sku")
                raise ValidationError("Sku cannot be empty!")
            if len(sku) > SKU_MAX_LENGTH:
                logger.info("order_rejected", reason="sku_too_long")
                raise ValidationError("Sku is too long!")
            if qty <= 0:
                logger.info("order_rejected", reason="non_positive_qty", qty=qty)
                raise ValidationError("Qty must be greater than zero!")
            if qty > QTY_MAX:
                logger.info("order_rejected", reason="qty_too_large", qty=qty)
                raise ValidationError("Qty is too large!")

            order = Order(id=OrderId.new(), sku=sku, qty=qty)
            order_id = await self.repo.create(order)

            span.set_attribute("app.order_id", str(order_id))
            logger.info("order_created", order_id=str(order_id), sku=sku, qty=qty)
            return order_id
