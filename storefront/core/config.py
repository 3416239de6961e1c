"""Storefront Configuration"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Toyozu Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001
    cors_origins: list[str] = ["*"]

    # Money
    currency: str = "PHP"
    currency_symbol: str = "₱"

    # Client storage keys
    cart_storage_key: str = "cartItems"
    checkout_storage_key: str = "checkoutData"
    default_tab_id: str = "main"

    # Idle client storage is evicted after this long
    storage_max_age_hours: int = 24
    storage_cleanup_interval_seconds: int = 3600

    # Where the client goes after an order is placed
    post_order_redirect: str = "/user-dashboard"

    # Landing page lookups (categories, vehicles)
    catalog_lookups_enabled: bool = True

    class Config:
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
