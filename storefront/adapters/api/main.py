# storefront/adapters/api/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from storefront import __version__
from storefront.core.domain.exceptions import StorageUnavailableError
from storefront.shared.config import settings, AppEnv
from storefront.shared.container import container
from storefront.shared.logging_config import configure_logging
from storefront.shared.telemetry import instrument_fastapi, setup_telemetry, shutdown_telemetry

# Import Routers
# Note: We import the modules directly to ensure 'container.wire' works correctly
from storefront.adapters.api.routers import health, orders, products

logger = structlog.get_logger()

WIRED_MODULES = [
    "storefront.adapters.api.dependencies",
    "storefront.adapters.api.routers.health",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    1. Startup: builds the selected adapters (Fail Fast), connects the cache.
    2. Shutdown: closes the cache and disposes of the SQL engine.
    """
    logger.info("app_startup", env=settings.APP_ENV.value, repo_adapter=settings.REPO_ADAPTER)
    setup_telemetry(settings.OTEL_SERVICE_NAME)

    # Adapters are lazy; resolving them here surfaces a bad path or URL at boot.
    container.order_repository()
    container.product_repository()

    cache = container.response_cache()
    await cache.connect()

    yield

    logger.info("app_shutdown")
    await cache.close()
    container.shutdown_resources()
    shutdown_telemetry()


def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    configure_logging()

    container.wire(modules=WIRED_MODULES)

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Orders (Hexagonal) and Products (Layered) sample service",
        lifespan=lifespan,
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url=None,
    )

    instrument_fastapi(app)

    # Global Exception Handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Standardizes HTTP errors into one envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "status": "error",
                "code": exc.status_code,
                "message": exc.detail,
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(StorageUnavailableError)
    async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
        logger.error("storage_unavailable", path=request.url.path, store=exc.store, error=exc.message)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "error",
                "code": status.HTTP_503_SERVICE_UNAVAILABLE,
                "message": exc.message if settings.DEBUG else "Storage is temporarily unavailable.",
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catches unhandled exceptions to avoid leaking stack traces in Prod."""
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": 500,
                "message": "Internal Server Error" if not settings.DEBUG else str(exc),
            },
        )

    # Register Routers
    app.include_router(health.router)
    app.include_router(orders.router)
    app.include_router(products.router)

    return app
