# storefront/core/ports/order_repository.py
from typing import Optional, Protocol

from storefront.core.domain.models import Order, OrderId


class IOrderRepository(Protocol):
    """
    Port for Order persistence.
    Implementations:
    - SqlOrderRepository (relational store via SQLAlchemy)
    - CsvOrderRepository (append-only flat file)
    - InMemoryOrderRepository (process-local, used in tests)
    """

    async def create(self, order: Order) -> OrderId:
        """
        Persists a new order.

        Returns:
            The identifier carried by `order`, unchanged.

        Raises:
            StorageUnavailableError: If the medium cannot be reached or written.
        """
        ...

    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        """
        Looks up an order by identifier.

        Returns:
            The Order if found, None otherwise.

        Raises:
            StorageUnavailableError: If the medium cannot be read.
        """
        ...

    async def health_check(self) -> bool:
        """Returns True if the underlying storage is accessible."""
        ...
