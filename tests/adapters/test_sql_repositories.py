# tests/adapters/test_sql_repositories.py
import asyncio
import threading
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from storefront.adapters.persistence.sql import (
    SqlOrderRepository,
    SqlProductRepository,
    TransactionAbandoned,
    init_sql_engine,
    orders_table,
)
from storefront.core.domain.exceptions import StorageUnavailableError, ValidationError
from storefront.core.domain.models import Order, OrderId, Product
from storefront.core.use_cases.create_order import CreateOrder
from storefront.core.use_cases.create_product import CreateProduct


@pytest.fixture
def engine(tmp_path):
    """A file-backed SQLite engine with the schema in place."""
    resource = init_sql_engine(f"sqlite:///{tmp_path / 'storefront.db'}")
    engine = next(resource)
    yield engine
    resource.close()


@pytest.fixture
def order_repo(engine):
    return SqlOrderRepository(engine)


@pytest.fixture
def product_repo(engine):
    return SqlProductRepository(engine)


@pytest.mark.asyncio
class TestSqlOrderRepository:

    async def test_create_then_get(self, order_repo):
        order = Order(id=OrderId.new(), sku="ABC", qty=2)

        returned = await order_repo.create(order)

        assert returned == order.id
        assert await order_repo.get_by_id(order.id) == order

    async def test_unknown_id_is_absent(self, order_repo):
        assert await order_repo.get_by_id(OrderId(value="missing")) is None

    async def test_duplicate_id_is_a_storage_failure(self, order_repo):
        order = Order(id=OrderId.new(), sku="ABC", qty=2)
        await order_repo.create(order)

        with pytest.raises(StorageUnavailableError):
            await order_repo.create(order)

    async def test_concurrent_creates_are_all_stored(self, order_repo, engine):
        orders = [Order(id=OrderId.new(), sku=f"S{i}", qty=i + 1) for i in range(10)]

        await asyncio.gather(*(order_repo.create(o) for o in orders))

        with engine.connect() as conn:
            count = conn.execute(select(func.count()).select_from(orders_table)).scalar()
        assert count == 10

    async def test_abandoned_transaction_is_rolled_back(self, order_repo, engine):
        """
        Scenario: The caller was cancelled while the worker thread ran the insert.
        Expected: The worker sees the flag and nothing is committed.
        """
        order = Order(id=OrderId.new(), sku="ABC", qty=2)
        abandoned = threading.Event()
        abandoned.set()

        def insert(conn):
            conn.execute(orders_table.insert().values(id=order.id.value, sku="ABC", qty=2))

        with pytest.raises(TransactionAbandoned):
            await asyncio.to_thread(order_repo._in_transaction, insert, abandoned)

        assert await order_repo.get_by_id(order.id) is None

    async def test_unreachable_database_is_storage_unavailable(self, tmp_path):
        resource = init_sql_engine(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'db.sqlite'}")
        engine = next(resource)
        repo = SqlOrderRepository(engine)

        with pytest.raises(StorageUnavailableError):
            await repo.get_by_id(OrderId(value="x"))
        assert await repo.health_check() is False

        resource.close()

    async def test_health_check(self, order_repo):
        assert await order_repo.health_check() is True

    async def test_storage_limits_round_trip(self, order_repo):
        order = Order(id=OrderId.new(), sku="S" * 255, qty=2**31 - 1)

        await order_repo.create(order)

        assert await order_repo.get_by_id(order.id) == order

    async def test_oversized_qty_is_rejected_before_the_driver(self, order_repo, engine):
        """
        Scenario: A quantity the INTEGER column cannot hold.
        Expected: ValidationError from the use case; the table stays empty.
        """
        use_case = CreateOrder(order_repo)

        with pytest.raises(ValidationError, match="Qty is too large!"):
            await use_case.execute("ABC", 2**63)

        with engine.connect() as conn:
            assert conn.execute(select(func.count()).select_from(orders_table)).scalar() == 0


@pytest.mark.asyncio
class TestSqlProductRepository:

    async def test_ids_are_store_assigned(self, product_repo):
        first = await product_repo.create(Product(name="A", price=Decimal("1.00")))
        second = await product_repo.create(Product(name="B", price=Decimal("2.50")))

        assert second == first + 1

    async def test_list_round_trip(self, product_repo):
        product_id = await product_repo.create(Product(name="Widget", price=Decimal("9.99")))

        products = await product_repo.list_all()

        assert len(products) == 1
        assert products[0].id == product_id
        assert products[0].name == "Widget"
        assert products[0].price == Decimal("9.99")

    @pytest.mark.parametrize("price", ["0.01", "19.90", "9999999999.99"])
    async def test_accepted_prices_read_back_exactly(self, product_repo, price):
        use_case = CreateProduct(product_repo)

        await use_case.execute("Widget", Decimal(price))

        assert (await product_repo.list_all())[0].price == Decimal(price)

    async def test_sub_cent_price_is_rejected_not_rounded(self, product_repo):
        use_case = CreateProduct(product_repo)

        with pytest.raises(ValidationError, match="Price cannot have more than two decimal places!"):
            await use_case.execute("Widget", Decimal("1.005"))

        assert await product_repo.list_all() == []
