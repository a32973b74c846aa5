#!/usr/bin/env python3
"""
Configuration Management for Freight Finance

Handles environment-based configuration with validated defaults.
Supports multiple environments (development, test, production).

Configured values (base currency, VAT rate, margin target) are read at the
CLI boundary and passed explicitly into the calculation functions, which
never consult this module themselves.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv

from .currency import BASE_CURRENCY
from .tax import DEFAULT_TAX_RATE

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class InvoicingConfig:
    """Invoice term and tax configuration."""

    base_currency: str = BASE_CURRENCY
    default_tax_rate: float = DEFAULT_TAX_RATE
    percentage_tolerance: float = 0.01  # Allowed drift from 100% in a term set


@dataclass
class ProfitabilityConfig:
    """Profitability reporting configuration."""

    margin_target: float = 20.0


@dataclass
class Config:
    """
    Main configuration class for the freight finance application.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Component configurations
    invoicing: InvoicingConfig
    profitability: ProfitabilityConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("FREIGHT_FINANCE_ENV", "development"))

        invoicing = InvoicingConfig(
            base_currency=os.getenv("BASE_CURRENCY", BASE_CURRENCY).upper(),
            default_tax_rate=float(os.getenv("DEFAULT_TAX_RATE", str(DEFAULT_TAX_RATE))),
            percentage_tolerance=float(os.getenv("PERCENTAGE_TOLERANCE", "0.01")),
        )

        profitability = ProfitabilityConfig(
            margin_target=float(os.getenv("MARGIN_TARGET", "20")),
        )

        return cls(
            environment=env,
            invoicing=invoicing,
            profitability=profitability,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.invoicing.base_currency or len(self.invoicing.base_currency) != 3:
            errors.append(f"Base currency must be a 3-letter code: {self.invoicing.base_currency!r}")

        if self.invoicing.default_tax_rate < 0:
            errors.append("Default tax rate must be non-negative")

        if not 0 < self.invoicing.percentage_tolerance < 1:
            errors.append("Percentage tolerance must be between 0 and 1")

        if self.profitability.margin_target < 0:
            errors.append("Margin target must be non-negative")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Enum):
                # Nested dataclass
                result[field_name] = dict(field_value.__dict__)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
