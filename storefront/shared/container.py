# storefront/shared/container.py
from dependency_injector import containers, providers

from storefront.shared.config import settings
from storefront.adapters.cache.memory_cache import InMemoryResponseCache
from storefront.adapters.cache.redis_cache import RedisResponseCache
from storefront.adapters.persistence.csv_repositories import CsvOrderRepository, CsvProductRepository
from storefront.adapters.persistence.memory import InMemoryOrderRepository, InMemoryProductRepository
from storefront.adapters.persistence.sql import SqlOrderRepository, SqlProductRepository, init_sql_engine

from storefront.core.use_cases.create_order import CreateOrder
from storefront.core.use_cases.get_order import GetOrder
from storefront.core.use_cases.create_product import CreateProduct
from storefront.core.use_cases.list_products import ListProducts


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Repository providers are Selectors keyed by REPO_ADAPTER, so only the
    chosen adapter (and only its backing engine/file) is ever built.
    """

    # 1. Configuration
    config = providers.Object(settings)

    # 2. Gateways (Infrastructure Adapters)

    # SQL engine (Resource: created on first use, disposed on shutdown_resources)
    sql_engine = providers.Resource(
        init_sql_engine,
        database_url=config.provided.DATABASE_URL,
        echo=config.provided.DEBUG,
    )

    order_repository = providers.Selector(
        config.provided.REPO_ADAPTER,
        db=providers.Singleton(SqlOrderRepository, engine=sql_engine),
        file=providers.Singleton(CsvOrderRepository, path=config.provided.ORDERS_CSV_PATH),
        memory=providers.Singleton(InMemoryOrderRepository),
    )

    product_repository = providers.Selector(
        config.provided.REPO_ADAPTER,
        db=providers.Singleton(SqlProductRepository, engine=sql_engine),
        file=providers.Singleton(CsvProductRepository, path=config.provided.PRODUCTS_CSV_PATH),
        memory=providers.Singleton(InMemoryProductRepository),
    )

    response_cache = providers.Selector(
        config.provided.CACHE_BACKEND,
        redis=providers.Singleton(RedisResponseCache, redis_url=config.provided.REDIS_URL),
        memory=providers.Singleton(InMemoryResponseCache),
    )

    # 3. Use Cases (Application Logic)
    # Factory: new instance per request, Singleton adapters injected.

    create_order_use_case = providers.Factory(CreateOrder, repo=order_repository)

    get_order_use_case = providers.Factory(GetOrder, repo=order_repository)

    create_product_use_case = providers.Factory(CreateProduct, repo=product_repository)

    list_products_use_case = providers.Factory(ListProducts, repo=product_repository)


# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
