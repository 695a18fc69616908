"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the inventory tracker using Pydantic Settings.

This module implements the Singleton pattern to ensure a single global
configuration instance throughout the application lifecycle.

Features:
---------
- Environment variable loading with type validation (INVENTORY_ prefix)
- .env file support for local development
- Computed properties for derived values

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name shown in the menu banner
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        log_level: Logging level name used when debug is off
        product_id_start: First id handed out by the id sequence
        low_stock_threshold: Threshold suggested by the low stock prompt
        currency_symbol: Symbol prefixed to rendered prices
        seed_file: Optional JSON file loaded into the catalog at startup

    Example:
        >>> settings = Settings()
        >>> settings.product_id_start
        1001
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Inventory Management System",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level when debug mode is off"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    product_id_start: int = Field(
        default=1001,
        ge=1,
        description="First product id assigned by the id sequence"
    )

    low_stock_threshold: int = Field(
        default=5,
        ge=0,
        description="Default threshold offered by the low stock report"
    )

    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Currency symbol used when rendering prices"
    )

    seed_file: Optional[str] = Field(
        default=None,
        description="JSON file with products loaded at startup"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Unknown values fall back to 'development' with a warning.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Validate the logging level name.

        Raises:
            ValueError: If the level is not a standard logging level
        """
        supported = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

        if value.upper() not in supported:
            raise ValueError(
                f"Unsupported log level: {value}. "
                f"Supported: {', '.join(sorted(supported))}"
            )

        return value.upper()

    @field_validator("seed_file")
    @classmethod
    def blank_seed_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def seed_path(self) -> Optional[Path]:
        """Seed file as a Path, or None when no seed file is configured."""
        if self.seed_file is None:
            return None
        return Path(self.seed_file)

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level, DEBUG whenever debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"debug={self.debug}, "
            f"product_id_start={self.product_id_start})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).

    Uses lru_cache so only one Settings instance is created for the
    process. Call ``get_settings.cache_clear()`` to reload.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings!r}")

    return settings
