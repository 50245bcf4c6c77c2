"""Order Service Configuration"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiscountThreshold(str, Enum):
    """When a discount_items promotion activates"""
    AT_LEAST = "at_least"  # requirement <= quantity
    AT_MOST = "at_most"  # requirement >= quantity


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Order Cart Service"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001

    # Engine
    context_timeout: float = Field(default=2.0, gt=0)
    discount_threshold: DiscountThreshold = DiscountThreshold.AT_LEAST
    default_cart_id: str = "default"

    # Storage
    seed_catalog: bool = True
    order_list_limit: int = Field(default=50, gt=0)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
