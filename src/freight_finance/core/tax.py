#!/usr/bin/env python3
"""
Tax Calculation

VAT (PPN) calculation for invoice terms and cost/revenue line items.
Tax rates are expressed as percentages (11 means 11%).
"""

from dataclasses import dataclass

# Indonesian VAT rate, applied when a caller omits an explicit rate
DEFAULT_TAX_RATE = 11.0


class InvalidTaxRate(ValueError):
    """Raised when a negative tax rate is supplied for a taxable amount."""

    pass


@dataclass(frozen=True)
class TaxBreakdown:
    """Amount, tax and tax-inclusive total for a single taxable value."""

    amount: float
    tax: float
    total: float

    def to_dict(self) -> dict[str, float]:
        return {"amount": self.amount, "tax": self.tax, "total": self.total}


def calculate_tax(amount: float, tax_rate: float = DEFAULT_TAX_RATE, is_taxable: bool = True) -> float:
    """
    Calculate tax for an amount.

    Args:
        amount: The base amount
        tax_rate: Tax rate as a percentage (default: 11)
        is_taxable: Whether the amount is subject to tax (default: True)

    Returns:
        ``amount * tax_rate / 100``, or 0 when not taxable

    Raises:
        InvalidTaxRate: If the amount is taxable and tax_rate < 0
    """
    if not is_taxable:
        return 0.0

    if tax_rate < 0:
        raise InvalidTaxRate(f"Tax rate cannot be negative (got {tax_rate})")

    return amount * (tax_rate / 100)


def calculate_total_with_tax(
    amount: float, tax_rate: float = DEFAULT_TAX_RATE, is_taxable: bool = True
) -> TaxBreakdown:
    """
    Calculate amount, tax, and total (amount + tax).

    Example:
        calculate_total_with_tax(3000000, 11) -> TaxBreakdown(3000000, 330000, 3330000)
    """
    tax = calculate_tax(amount, tax_rate, is_taxable)
    return TaxBreakdown(amount=amount, tax=tax, total=amount + tax)
