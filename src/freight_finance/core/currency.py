#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

Converts foreign-currency line item amounts into the base currency (IDR)
used for all profitability aggregation, and formats amounts for display.

Currency Rules:
- Amounts already in the base currency are returned unchanged
- Foreign amounts are multiplied by their exchange rate to the base currency
- An exchange rate must be strictly positive whenever it is applied
- Monetary results are floats; callers round at the persistence boundary
"""

from decimal import ROUND_HALF_UP, Decimal

BASE_CURRENCY = "IDR"


class InvalidExchangeRate(ValueError):
    """Raised when a non-positive exchange rate would be applied."""

    pass


def convert_to_idr(
    amount: float,
    currency: str,
    exchange_rate: float,
    base_currency: str = BASE_CURRENCY,
) -> float:
    """
    Convert an amount to the base currency using the provided exchange rate.

    Args:
        amount: The original amount in ``currency``
        currency: ISO currency code of the amount (e.g., 'USD', 'IDR')
        exchange_rate: Units of base currency per unit of ``currency``
        base_currency: Reporting currency (default: IDR)

    Returns:
        The amount expressed in the base currency

    Raises:
        InvalidExchangeRate: If conversion is needed and exchange_rate <= 0

    Examples:
        convert_to_idr(100, "USD", 15500) -> 1550000
        convert_to_idr(250000, "IDR", 0) -> 250000
    """
    if currency == base_currency:
        return amount

    if exchange_rate <= 0:
        raise InvalidExchangeRate(
            f"Exchange rate must be greater than 0 (got {exchange_rate} for {currency})"
        )

    return amount * exchange_rate


def calculate_line_amount(unit_price: float, quantity: float) -> float:
    """Calculate line item amount from unit price and quantity."""
    return unit_price * quantity


def format_currency(amount: float, currency: str = BASE_CURRENCY) -> str:
    """
    Format an amount with thousands separators and up to two decimals.

    Trailing zero decimals are dropped, matching how invoice amounts in
    whole rupiah are usually displayed.

    Examples:
        format_currency(3330000) -> "IDR 3,330,000"
        format_currency(1234.5, "USD") -> "USD 1,234.5"
        format_currency(-500) -> "IDR -500"
    """
    quantized = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    formatted = f"{quantized:,.2f}".rstrip("0").rstrip(".")
    if formatted in ("-0", ""):
        formatted = "0"
    return f"{currency} {formatted}"
