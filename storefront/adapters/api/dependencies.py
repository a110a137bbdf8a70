# storefront/adapters/api/dependencies.py
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from storefront.core.ports.response_cache import IResponseCache
from storefront.core.use_cases.create_order import CreateOrder
from storefront.core.use_cases.create_product import CreateProduct
from storefront.core.use_cases.get_order import GetOrder
from storefront.core.use_cases.list_products import ListProducts
from storefront.shared.container import Container


@inject
def get_create_order_use_case(
    use_case: CreateOrder = Depends(Provide[Container.create_order_use_case]),
) -> CreateOrder:
    return use_case


@inject
def get_get_order_use_case(
    use_case: GetOrder = Depends(Provide[Container.get_order_use_case]),
) -> GetOrder:
    return use_case


@inject
def get_create_product_use_case(
    use_case: CreateProduct = Depends(Provide[Container.create_product_use_case]),
) -> CreateProduct:
    return use_case


@inject
def get_list_products_use_case(
    use_case: ListProducts = Depends(Provide[Container.list_products_use_case]),
) -> ListProducts:
    return use_case


@inject
def get_response_cache(
    cache: IResponseCache = Depends(Provide[Container.response_cache]),
) -> IResponseCache:
    """The boundary-level cache in front of read endpoints."""
    return cache
