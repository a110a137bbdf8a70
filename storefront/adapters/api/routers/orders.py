# storefront/adapters/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException, Response, status
import structlog

from storefront.adapters.api.dependencies import get_create_order_use_case, get_get_order_use_case
from storefront.adapters.api.schemas import CreateOrderRequest, OrderCreatedResponse, OrderResponse
from storefront.core.domain.exceptions import ValidationError
from storefront.core.domain.models import OrderId
from storefront.core.use_cases.create_order import CreateOrder
from storefront.core.use_cases.get_order import GetOrder

logger = structlog.get_logger()

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "",
    response_model=OrderCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place an Order",
)
async def create_order(
    request: CreateOrderRequest,
    response: Response,
    use_case: CreateOrder = Depends(get_create_order_use_case),
):
    """
    Validates and stores a new order.

    * 201 with the generated id and a `Location` header.
    * 400 when the SKU is blank or the quantity is not positive.
    """
    try:
        order_id = await use_case.execute(request.sku, request.qty)
    except ValidationError as e:
        logger.info("order_bad_request", error=e.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    response.headers["Location"] = f"/orders/{order_id.value}"
    return OrderCreatedResponse(id=order_id.value)


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Fetch an Order",
)
async def get_order(
    order_id: str,
    use_case: GetOrder = Depends(get_get_order_use_case),
):
    order = await use_case.execute(OrderId(value=order_id))
    if order is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Order '{order_id}' not found.",
        )
    return OrderResponse.from_domain(order)
