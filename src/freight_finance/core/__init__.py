"""
Core Utilities Package

Shared calculation primitives and infrastructure used by the term and
cost/revenue domains.

This package provides:
- Currency conversion into the base currency (IDR)
- VAT calculation with tax-inclusive totals
- Structured validation results for form-style input
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    InvoicingConfig,
    ProfitabilityConfig,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    BASE_CURRENCY,
    InvalidExchangeRate,
    calculate_line_amount,
    convert_to_idr,
    format_currency,
)
from .tax import (
    DEFAULT_TAX_RATE,
    InvalidTaxRate,
    TaxBreakdown,
    calculate_tax,
    calculate_total_with_tax,
)
from .validation import ValidationError, ValidationResult

__all__ = [
    # Currency
    "BASE_CURRENCY",
    # Configuration
    "Config",
    # Tax
    "DEFAULT_TAX_RATE",
    "Environment",
    "InvalidExchangeRate",
    "InvalidTaxRate",
    "InvoicingConfig",
    "ProfitabilityConfig",
    "TaxBreakdown",
    # Validation
    "ValidationError",
    "ValidationResult",
    "calculate_line_amount",
    "calculate_tax",
    "calculate_total_with_tax",
    "convert_to_idr",
    "format_currency",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "reload_config",
]
