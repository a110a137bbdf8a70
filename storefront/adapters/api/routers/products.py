# storefront/adapters/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
import structlog

from storefront.adapters.api.dependencies import (
    get_create_product_use_case,
    get_list_products_use_case,
    get_response_cache,
)
from storefront.adapters.api.schemas import CreateProductRequest, ProductCreatedResponse, ProductResponse
from storefront.core.domain.exceptions import ValidationError
from storefront.core.ports.response_cache import IResponseCache
from storefront.core.use_cases.create_product import CreateProduct
from storefront.core.use_cases.list_products import ListProducts
from storefront.shared.config import settings

logger = structlog.get_logger()

PRODUCTS_CACHE_KEY = "products_all"

router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List Products",
)
async def list_products(
    use_case: ListProducts = Depends(get_list_products_use_case),
    cache: IResponseCache = Depends(get_response_cache),
):
    """
    Returns the full catalogue.
    Responses are cached for CACHE_TTL_SEC seconds (30 by default).
    """
    cached = await cache.get_json(PRODUCTS_CACHE_KEY)
    if cached is not None:
        logger.debug("products_cache_hit")
        return cached

    products = await use_case.execute()
    payload = [ProductResponse.from_domain(p).model_dump(mode="json") for p in products]

    await cache.set_json(PRODUCTS_CACHE_KEY, payload, settings.CACHE_TTL_SEC)
    return payload


@router.post(
    "",
    response_model=ProductCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a Product",
)
async def create_product(
    request: CreateProductRequest,
    response: Response,
    use_case: CreateProduct = Depends(get_create_product_use_case),
    cache: IResponseCache = Depends(get_response_cache),
):
    try:
        product_id = await use_case.execute(request.name, request.price)
    except ValidationError as e:
        logger.info("product_bad_request", error=e.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    # The list is stale as soon as a product lands.
    await cache.delete(PRODUCTS_CACHE_KEY)

    response.headers["Location"] = f"/products/{product_id}"
    return ProductCreatedResponse(id=product_id)
