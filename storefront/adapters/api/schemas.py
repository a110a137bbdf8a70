# storefront/adapters/api/schemas.py
from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.core.domain.models import Order, Product

# --- Request Models ---

class CreateOrderRequest(BaseModel):
    sku: str = Field(..., description="Stock keeping unit (1-255 characters)")
    qty: int = Field(..., description="Quantity ordered (1 to 2^31-1)")


class CreateProductRequest(BaseModel):
    name: str = Field(..., description="Product name (1-100 characters)")
    price: Decimal = Field(..., description="Unit price (> 0, at most two decimal places)")

# --- Response Models ---

class OrderCreatedResponse(BaseModel):
    id: str


class ProductCreatedResponse(BaseModel):
    id: int


class OrderResponse(BaseModel):
    id: str
    sku: str
    qty: int

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        return cls(id=order.id.value, sku=order.sku, qty=order.qty)


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(id=product.id, name=product.name, price=float(product.price))

