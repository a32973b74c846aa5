"""
Freight Finance - Invoice Terms & Profitability Engine

Pure decision and computation functions for freight booking finances:
splitting job order revenue into invoice terms, deciding when each term can
be invoiced, converting multi-currency line items to IDR, applying VAT, and
aggregating profitability.

Domain Packages:
- core: Currency conversion, tax, validation results, configuration
- terms: Invoice term presets, trigger status, invoiced totals
- costs: Cost/revenue line items and profitability
- analysis: Cross-booking profitability reporting
- cli: Command-line interface

Example Usage:
    from freight_finance.terms import get_preset_terms, get_term_status
    from freight_finance.costs import summarize_booking_financials
    from freight_finance.core.currency import convert_to_idr

Persistence, authorization and concurrency control on writes belong to the
caller; nothing here performs I/O except the CLI.
"""

__version__ = "0.1.0"

# Export core utilities for easy access
from .core.currency import convert_to_idr
from .core.tax import calculate_tax, calculate_total_with_tax
from .core.validation import ValidationError, ValidationResult

# Export key domain functionality
from .terms import InvoiceTerm, PresetType, TermStatus, TriggerKind
from .costs import CostLineItem, ProfitabilitySnapshot, RevenueLineItem

__all__ = [
    # Core calculations
    "convert_to_idr",
    "calculate_tax",
    "calculate_total_with_tax",
    "ValidationError",
    "ValidationResult",

    # Domain models
    "InvoiceTerm",
    "PresetType",
    "TermStatus",
    "TriggerKind",
    "CostLineItem",
    "RevenueLineItem",
    "ProfitabilitySnapshot",
]
