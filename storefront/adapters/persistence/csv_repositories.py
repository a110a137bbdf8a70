# storefront/adapters/persistence/csv_repositories.py
from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation
from typing import List, Optional

import structlog

from storefront.adapters.persistence.csv_file import CsvFile
from storefront.core.domain.exceptions import StorageUnavailableError
from storefront.core.domain.models import Order, OrderId, Product
from storefront.core.ports.order_repository import IOrderRepository
from storefront.core.ports.product_repository import IProductRepository

logger = structlog.get_logger()

ORDER_HEADER = ("id", "sku", "qty")
PRODUCT_HEADER = ("id", "name", "price")


class CsvOrderRepository(IOrderRepository):
    """
    Flat-file implementation of the Order Repository.
    Appends on create, scans linearly on lookup.
    """

    def __init__(self, path: str | os.PathLike):
        self._file = CsvFile(path, ORDER_HEADER)

    @property
    def path(self):
        return self._file.path

    async def create(self, order: Order) -> OrderId:
        async with self._file.lock:
            try:
                await self._file.append_record([order.id.value, order.sku, order.qty])
            except OSError as e:
                logger.error("csv_write_failed", path=str(self.path), error=str(e))
                raise StorageUnavailableError(str(self.path), str(e)) from e

        return order.id

    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        async with self._file.lock:
            try:
                records = await self._file.read_records()
            except OSError as e:
                logger.error("csv_read_failed", path=str(self.path), error=str(e))
                raise StorageUnavailableError(str(self.path), str(e)) from e

        for record in records:
            if record[0] != order_id.value:
                continue
            try:
                return Order(id=OrderId(value=record[0]), sku=record[1], qty=int(record[2]))
            except ValueError:
                logger.warning("csv_record_malformed", path=str(self.path), record=record)
        return None

    async def health_check(self) -> bool:
        return self._file.is_accessible()


class CsvProductRepository(IProductRepository):
    """
    Flat-file implementation of the Product Repository.
    Ids are assigned sequentially (highest id on file + 1) under the file lock.
    """

    def __init__(self, path: str | os.PathLike):
        self._file = CsvFile(path, PRODUCT_HEADER)

    @property
    def path(self):
        return self._file.path

    async def create(self, product: Product) -> int:
        async with self._file.lock:
            try:
                existing = self._parse(await self._file.read_records())
                product_id = max((p.id for p in existing), default=0) + 1
                await self._file.append_record([product_id, product.name, product.price])
            except OSError as e:
                logger.error("csv_write_failed", path=str(self.path), error=str(e))
                raise StorageUnavailableError(str(self.path), str(e)) from e

        return product_id

    async def list_all(self) -> List[Product]:
        async with self._file.lock:
            try:
                records = await self._file.read_records()
            except OSError as e:
                logger.error("csv_read_failed", path=str(self.path), error=str(e))
                raise StorageUnavailableError(str(self.path), str(e)) from e

        return self._parse(records)

    async def health_check(self) -> bool:
        return self._file.is_accessible()

    def _parse(self, records: List[List[str]]) -> List[Product]:
        products = []
        for record in records:
            try:
                products.append(Product(id=int(record[0]), name=record[1], price=Decimal(record[2])))
            except (ValueError, InvalidOperation):
                logger.warning("csv_record_malformed", path=str(self.path), record=record)
        return products
