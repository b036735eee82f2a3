"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    STORE_BACKEND: str = os.getenv("STORE_BACKEND", "mongo").lower().strip()  # "mongo" | "memory"

    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB: str = os.getenv("MONGODB_DB", "inventory")
    ITEMS_COLLECTION: str = os.getenv("ITEMS_COLLECTION", "items")
    MONGODB_TIMEOUT_MS: int = _env_int("MONGODB_TIMEOUT_MS", 5000)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Include raw storage error text in 500 responses.
    EXPOSE_ERROR_DETAILS: bool = True


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Test configuration: in-memory store, no Mongo server needed."""

    TESTING: bool = True
    STORE_BACKEND: str = "memory"


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False
    EXPOSE_ERROR_DETAILS: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
