# storefront/shared/config.py
from enum import Enum
from typing import Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


RepoAdapter = Literal["db", "file", "memory"]
CacheBackend = Literal["redis", "memory"]


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic, so a bad value
    stops the process before any request is served.
    """

    # --- Application Meta ---
    APP_NAME: str = "storefront"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- HTTP Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"
    OTEL_SERVICE_NAME: str = "storefront-api"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Persistence ---
    # 'db' -> SQL (SQLAlchemy), 'file' -> CSV, 'memory' -> process-local
    REPO_ADAPTER: RepoAdapter = "db"
    DATABASE_URL: str = "sqlite:///./storefront.db"

    # FILESYSTEM CONFIG
    # CSV_PATH is the historical name of the orders file setting.
    ORDERS_CSV_PATH: str = Field(
        default="data/orders.csv",
        validation_alias=AliasChoices("ORDERS_CSV_PATH", "CSV_PATH"),
    )
    PRODUCTS_CSV_PATH: str = "data/products.csv"

    # --- Response Cache ---
    CACHE_BACKEND: CacheBackend = "redis"
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_TTL_SEC: int = Field(default=30, gt=0)

    @field_validator("REPO_ADAPTER", "CACHE_BACKEND", "LOG_FORMAT", mode="before")
    @classmethod
    def _normalize_choice(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
