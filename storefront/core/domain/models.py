# storefront/core/domain/models.py
import uuid
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# --- Value Objects ---

class OrderId(BaseModel):
    """
    Opaque order identifier, generated client side.
    Rendered as 32 lowercase hex characters (a dashless UUID4).
    """
    model_config = ConfigDict(frozen=True)

    value: str

    @classmethod
    def new(cls) -> "OrderId":
        return cls(value=uuid.uuid4().hex)

    def __str__(self) -> str:
        return self.value

# --- Entities ---

class Order(BaseModel):
    """An order line. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    id: OrderId
    sku: str
    qty: int


class Product(BaseModel):
    """
    A catalogue product. Immutable once built.

    `id` stays None until the store assigns its sequential integer;
    the repository returns the assigned value from `create`.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: str
    price: Decimal = Field(..., description="Unit price")
