# storefront/core/domain/validators.py
from decimal import Decimal

from storefront.core.domain.exceptions import ValidationError
from storefront.core.domain.models import Product

NAME_MAX_LENGTH = 100

# Prices are stored as NUMERIC(12, 2): ten integer digits, two decimals.
PRICE_DECIMAL_PLACES = 2
PRICE_LIMIT = Decimal(10) ** 10


class ProductValidator:
    """Business rules a Product must satisfy before it is persisted."""

    def validate(self, product: Product) -> None:
        if not product.name or not product.name.strip():
            raise ValidationError("Name cannot be empty!")
        if len(product.name) > NAME_MAX_LENGTH:
            raise ValidationError("Name is too long!")
        if product.price <= 0:
            raise ValidationError("Price cannot be less than zero!")
        if product.price >= PRICE_LIMIT:
            raise ValidationError("Price is too large!")
        if product.price != round(product.price, PRICE_DECIMAL_PLACES):
            raise ValidationError("Price cannot have more than two decimal places!")
