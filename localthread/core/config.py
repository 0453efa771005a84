"""Storefront Configuration"""

import os
from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings


CONFIG_DIR = os.path.join(os.path.dirname(__file__), "..", "..", "config")


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "LocalThread Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001
    cors_origins: list[str] = ["*"]

    # Pricing
    currency: str = "INR"
    flat_shipping_fee: Decimal = Decimal("49")

    # Catalog listing
    page_size: int = 12

    class Config:
        env_file = os.path.join(CONFIG_DIR, ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
