# storefront/adapters/persistence/sql.py
"""
Relational persistence via SQLAlchemy Core.

Each repository call checks one connection out of the engine's pool,
runs a single transaction in a worker thread and hands the connection
back on every exit path. Pool sizing belongs to the engine, which the
container builds once per process.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Callable, Iterator, List, Optional, TypeVar

import structlog
from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    create_engine,
    insert,
    select,
    text,
)
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from storefront.core.domain.exceptions import StorageUnavailableError
from storefront.core.domain.models import Order, OrderId, Product
from storefront.core.ports.order_repository import IOrderRepository
from storefront.core.ports.product_repository import IProductRepository

logger = structlog.get_logger()

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

metadata = MetaData()

orders_table = Table(
    "orders",
    metadata,
    Column("id", String(32), primary_key=True),
    Column("sku", String(255), nullable=False),
    Column("qty", Integer, nullable=False),
)

products_table = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("price", Numeric(12, 2), nullable=False),
)

# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def create_sql_engine(database_url: str, echo: bool = False) -> Engine:
    # SQLite needs a special flag when used from worker threads.
    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}

    return create_engine(database_url, echo=echo, future=True, connect_args=connect_args)


def init_sql_engine(database_url: str, echo: bool = False) -> Iterator[Engine]:
    """
    Container resource: builds the engine, creates missing tables,
    and disposes of the pool on shutdown.
    """
    engine = create_sql_engine(database_url, echo)
    try:
        metadata.create_all(engine)
        logger.info("sql_schema_ready", url=engine.url.render_as_string(hide_password=True))
    except SQLAlchemyError as e:
        # Requests will surface StorageUnavailableError until the database is back.
        logger.error("sql_schema_init_failed", error=str(e))

    try:
        yield engine
    finally:
        engine.dispose()
        logger.info("sql_engine_disposed")

# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------

class TransactionAbandoned(Exception):
    """Raised inside the worker thread to roll back work whose caller was cancelled."""


class SqlRepository:
    """Shared plumbing: one transaction per call, run off the event loop."""

    store_name = "sql"

    def __init__(self, engine: Engine):
        self.engine = engine

    async def _run(self, work: Callable[[Connection], T]) -> T:
        abandoned = threading.Event()
        try:
            return await asyncio.to_thread(self._in_transaction, work, abandoned)
        except asyncio.CancelledError:
            abandoned.set()
            raise

    def _in_transaction(self, work: Callable[[Connection], T], abandoned: threading.Event) -> T:
        try:
            with self.engine.begin() as conn:
                result = work(conn)
                if abandoned.is_set():
                    raise TransactionAbandoned()
                return result
        except SQLAlchemyError as e:
            logger.error("sql_operation_failed", store=self.store_name, error=str(e))
            raise StorageUnavailableError(self.store_name, str(e)) from e

    async def health_check(self) -> bool:
        try:
            await self._run(lambda conn: conn.execute(text("SELECT 1")).scalar())
            return True
        except StorageUnavailableError:
            return False


class SqlOrderRepository(SqlRepository, IOrderRepository):
    """Relational Order Repository. Stores the client-generated id as is."""

    store_name = "orders"

    async def create(self, order: Order) -> OrderId:
        stmt = insert(orders_table).values(id=order.id.value, sku=order.sku, qty=order.qty)
        await self._run(lambda conn: conn.execute(stmt))
        return order.id

    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        stmt = select(orders_table).where(orders_table.c.id == order_id.value).limit(1)
        row = await self._run(lambda conn: conn.execute(stmt).first())
        if row is None:
            return None
        return Order(id=OrderId(value=row.id), sku=row.sku, qty=row.qty)


class SqlProductRepository(SqlRepository, IProductRepository):
    """Relational Product Repository. The database assigns the id."""

    store_name = "products"

    async def create(self, product: Product) -> int:
        stmt = insert(products_table).values(name=product.name, price=product.price)
        return await self._run(lambda conn: conn.execute(stmt).inserted_primary_key[0])

    async def list_all(self) -> List[Product]:
        stmt = select(products_table)
        rows = await self._run(lambda conn: conn.execute(stmt).all())
        return [Product(id=row.id, name=row.name, price=row.price) for row in rows]
