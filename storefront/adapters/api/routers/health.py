# storefront/adapters/api/routers/health.py
from typing import Dict

from fastapi import APIRouter, Depends, Response, status
from dependency_injector.wiring import inject, Provide
import structlog

from storefront.shared.container import Container
from storefront.core.ports.order_repository import IOrderRepository
from storefront.core.ports.product_repository import IProductRepository
from storefront.core.ports.response_cache import IResponseCache

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])


@router.get("", status_code=status.HTTP_200_OK)
async def health():
    return {"status": "ok"}


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    K8s Liveness Probe.
    Returns 200 OK if the process is serving requests.
    """
    return {"status": "ok", "service": "storefront-api"}


@router.get("/ready", status_code=status.HTTP_200_OK)
@inject
async def readiness_probe(
    response: Response,
    orders: IOrderRepository = Depends(Provide[Container.order_repository]),
    products: IProductRepository = Depends(Provide[Container.product_repository]),
    cache: IResponseCache = Depends(Provide[Container.response_cache]),
) -> Dict[str, str]:
    """
    K8s Readiness Probe.
    Checks both repositories and the response cache.
    Returns 503 Service Unavailable if any component is down.
    """
    components = {"orders": orders, "products": products, "cache": cache}
    health_status = {name: "down" for name in components}

    for name, component in components.items():
        try:
            if await component.health_check():
                health_status[name] = "up"
        except Exception as e:
            logger.error("health_check_failed", component=name, error=str(e))

    if not all(state == "up" for state in health_status.values()):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
