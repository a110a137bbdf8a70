# tests/conftest.py
import os

# Keep the process-wide settings away from real infrastructure.
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("REPO_ADAPTER", "memory")
os.environ.setdefault("CACHE_BACKEND", "memory")
os.environ.setdefault("LOG_FORMAT", "console")

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from storefront.adapters.cache.memory_cache import InMemoryResponseCache
from storefront.core.domain.models import Order, OrderId, Product
from storefront.core.ports.order_repository import IOrderRepository
from storefront.core.ports.product_repository import IProductRepository
from storefront.shared.container import container as app_container


@pytest.fixture(scope="function")
def mock_order_repo():
    """Returns a mock Order Repository that echoes the id it is given."""
    repo = MagicMock(spec=IOrderRepository)
    repo.create = AsyncMock(side_effect=lambda order: order.id)
    repo.get_by_id = AsyncMock(return_value=None)
    repo.health_check = AsyncMock(return_value=True)
    return repo


@pytest.fixture(scope="function")
def mock_product_repo():
    """Returns a mock Product Repository that assigns id 1."""
    repo = MagicMock(spec=IProductRepository)
    repo.create = AsyncMock(return_value=1)
    repo.list_all = AsyncMock(return_value=[])
    repo.health_check = AsyncMock(return_value=True)
    return repo


@pytest.fixture(scope="function")
def response_cache():
    return InMemoryResponseCache()


@pytest.fixture(scope="function")
def container(mock_order_repo, mock_product_repo, response_cache):
    """
    The application container with real infrastructure providers
    overridden by the mocks defined above.
    """
    app_container.order_repository.override(mock_order_repo)
    app_container.product_repository.override(mock_product_repo)
    app_container.response_cache.override(response_cache)

    yield app_container

    app_container.reset_override()


@pytest.fixture
def sample_order():
    return Order(id=OrderId(value="0" * 32), sku="ABC", qty=2)


@pytest.fixture
def sample_product():
    return Product(id=None, name="Widget", price=Decimal("9.99"))
