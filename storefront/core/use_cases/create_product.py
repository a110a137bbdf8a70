# storefront/core/use_cases/create_product.py
from decimal import Decimal
from typing import Optional

import structlog

from storefront.core.domain.models import Product
from storefront.core.domain.validators import ProductValidator
from storefront.core.ports.product_repository import IProductRepository
from storefront.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class CreateProduct:
    """
    Use Case: Adds a product to the catalogue.

    The product is built with no id; the store assigns one and the
    repository hands it back.
    """

    def __init__(self, repo: IProductRepository, validator: Optional[ProductValidator] = None):
        self.repo = repo
        self.validator = validator or ProductValidator()

    async def execute(self, name: str, price: Decimal) -> int:
        with tracer.start_as_current_span("use_case.create_product") as span:
            product = Product(id=None, name=name, price=price)
            self.validator.validate(product)

            product_id = await self.repo.create(product)

            span.set_attribute("app.product_id", product_id)
            logger.info("product_created", product_id=product_id, name=name)
            return product_id
