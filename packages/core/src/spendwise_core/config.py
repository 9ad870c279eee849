"""Configuration system for Spendwise.

This module provides Pydantic Settings-based configuration with environment
variable support and sensible defaults.

Usage:
    from spendwise_core.config import SpendwiseConfig

    # Load from environment variables and .env file
    config = SpendwiseConfig()

    # Access budget settings
    print(config.budget.default_limits["food"])

The analytic thresholds (trend, concentration, savings and forecast
guards) are deliberately not configurable; they live as constants in the
modules that use them.
"""

from decimal import Decimal
from typing import Any, Literal

import pydantic
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .categories import DEFAULT_BUDGET_LIMITS
from .exceptions import ConfigurationError


class BudgetConfig(BaseSettings):
    """Budget configuration settings.

    Environment Variables:
        SPENDWISE_BUDGET_DEFAULT_LIMITS: JSON object of category id to
            monthly ceiling, e.g. '{"food": 450, "transport": 250}'
    """

    model_config = SettingsConfigDict(
        env_prefix="SPENDWISE_BUDGET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_limits: dict[str, Decimal] = Field(
        default_factory=lambda: dict(DEFAULT_BUDGET_LIMITS),
        description="Monthly budget ceilings a new ledger starts with",
    )

    @field_validator("default_limits")
    @classmethod
    def validate_limits(cls, v: dict[str, Decimal]) -> dict[str, Decimal]:
        """Ensure every ceiling is positive."""
        for category, limit in v.items():
            if limit <= 0:
                raise ValueError(f"Budget limit for {category!r} must be positive, got {limit}")
        return v


class SpendwiseConfig(BaseSettings):
    """Root configuration for Spendwise.

    Environment Variables:
        SPENDWISE_ENV: Environment name (development, staging, production, test)
        SPENDWISE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        SPENDWISE_LOG_FORMAT: Log renderer (console or json)

    Example:
        # Load all configuration from environment
        config = SpendwiseConfig()

        # Override specific settings
        config = SpendwiseConfig(
            log_level="DEBUG",
            budget=BudgetConfig(default_limits={"food": Decimal("450")}),
        )
    """

    model_config = SettingsConfigDict(
        env_prefix="SPENDWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: str = Field(
        default="development",
        description="Environment name (development, staging, production, test)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Render logs for humans (console) or machines (json)",
    )

    budget: BudgetConfig = Field(default_factory=BudgetConfig)

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        valid_envs = {"development", "staging", "production", "test"}
        v_lower = v.lower().strip()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of: {valid_envs}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {valid_levels}")
        return v_upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"

    @property
    def is_debug(self) -> bool:
        """Check if debug logging is enabled."""
        return self.log_level == "DEBUG"


def load_config(**overrides: Any) -> SpendwiseConfig:
    """
    Load configuration, reporting invalid settings as ConfigurationError.

    Args:
        **overrides: Field values that take precedence over the environment

    Returns:
        Validated SpendwiseConfig
    """
    try:
        return SpendwiseConfig(**overrides)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"Invalid configuration: {first['msg']}",
            config_key=key,
            details={"errors": e.error_count()},
        ) from e
