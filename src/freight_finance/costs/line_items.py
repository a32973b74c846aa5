#!/usr/bin/env python3
"""
Line Item Preparation

Validates cost/revenue form input and builds fully computed line items:
line amount, base-currency conversion, tax and tax-inclusive total.

Defaults applied when the input omits them:
- exchange rate: 1 for base-currency lines
- tax rate: the supplied default_tax_rate (11 unless overridden)
- taxable flag: True
"""

import logging

from ..core.currency import BASE_CURRENCY, calculate_line_amount, convert_to_idr
from ..core.tax import DEFAULT_TAX_RATE, calculate_total_with_tax
from ..core.validation import ValidationResult
from .models import (
    CostLineItem,
    CostPaymentStatus,
    LineItemInput,
    RevenueBillingStatus,
    RevenueLineItem,
)

logger = logging.getLogger(__name__)

# Forward-only lifecycle of each status enum
_STATUS_ORDER: dict[type, list] = {
    CostPaymentStatus: [CostPaymentStatus.UNPAID, CostPaymentStatus.PARTIAL, CostPaymentStatus.PAID],
    RevenueBillingStatus: [RevenueBillingStatus.UNBILLED, RevenueBillingStatus.BILLED, RevenueBillingStatus.PAID],
}


def _validate_line_item_input(data: LineItemInput, kind: str, base_currency: str) -> ValidationResult:
    result = ValidationResult()

    if not data.booking_id and not data.bl_id and not data.job_order_id:
        result.add("booking_id", f"{kind} must be linked to a booking, B/L, or job order")

    if not data.charge_type_id:
        result.add("charge_type_id", "Charge type is required")

    if not (data.currency or "").strip():
        result.add("currency", "Currency is required")

    if data.unit_price is None:
        result.add("unit_price", "Unit price is required")
    elif data.unit_price < 0:
        result.add("unit_price", "Unit price must be a non-negative number")

    if data.quantity is None:
        result.add("quantity", "Quantity is required")
    elif data.quantity <= 0:
        result.add("quantity", "Quantity must be greater than 0")

    if data.currency and data.currency != base_currency:
        if not data.exchange_rate or data.exchange_rate <= 0:
            result.add(
                "exchange_rate",
                f"Exchange rate is required for non-{base_currency} currencies and must be greater than 0",
            )

    if data.tax_rate is not None and data.tax_rate < 0:
        result.add("tax_rate", "Tax rate cannot be negative")

    if not result.is_valid:
        logger.warning("%s input failed validation: %s", kind, ", ".join(result.fields()))

    return result


def validate_cost_data(data: LineItemInput, base_currency: str = BASE_CURRENCY) -> ValidationResult:
    """
    Validate shipment cost form input.

    Args:
        data: Cost form input
        base_currency: Currency that needs no exchange rate

    Returns:
        ValidationResult listing every invalid field
    """
    return _validate_line_item_input(data, "Cost", base_currency)


def validate_revenue_data(data: LineItemInput, base_currency: str = BASE_CURRENCY) -> ValidationResult:
    """
    Validate shipment revenue form input.

    Args:
        data: Revenue form input
        base_currency: Currency that needs no exchange rate

    Returns:
        ValidationResult listing every invalid field
    """
    return _validate_line_item_input(data, "Revenue", base_currency)


def _compute_amounts(
    data: LineItemInput, base_currency: str, default_tax_rate: float
) -> dict[str, float | bool]:
    """
    Compute the derived money fields shared by cost and revenue lines.

    Raises:
        ValueError: If unit_price or quantity is missing
        InvalidExchangeRate: If a foreign-currency line has no positive rate
        InvalidTaxRate: If a taxable line has a negative tax rate
    """
    if data.unit_price is None or data.quantity is None:
        raise ValueError("Unit price and quantity are required to compute a line item")

    amount = calculate_line_amount(data.unit_price, data.quantity)
    if data.currency == base_currency:
        exchange_rate = 1.0
    else:
        exchange_rate = data.exchange_rate if data.exchange_rate is not None else 0.0

    amount_base = convert_to_idr(amount, data.currency, exchange_rate, base_currency)
    tax_rate = data.tax_rate if data.tax_rate is not None else default_tax_rate
    is_taxable = data.is_taxable if data.is_taxable is not None else True
    breakdown = calculate_total_with_tax(amount_base, tax_rate, is_taxable)

    return {
        "amount": amount,
        "exchange_rate": exchange_rate,
        "amount_base": amount_base,
        "is_taxable": is_taxable,
        "tax_rate": tax_rate,
        "tax_amount": breakdown.tax,
        "total_amount": breakdown.total,
    }


def prepare_cost_line_item(
    data: LineItemInput,
    item_id: str,
    base_currency: str = BASE_CURRENCY,
    default_tax_rate: float = DEFAULT_TAX_RATE,
) -> CostLineItem:
    """
    Build a cost line item with all calculated fields.

    The new item starts ``unpaid`` with nothing paid.

    Raises:
        InvalidExchangeRate: If a foreign-currency line has no positive rate
        InvalidTaxRate: If a taxable line has a negative tax rate
    """
    amounts = _compute_amounts(data, base_currency, default_tax_rate)
    return CostLineItem(
        id=item_id,
        booking_id=data.booking_id,
        charge_type_id=data.charge_type_id,
        currency=data.currency,
        unit_price=data.unit_price,
        quantity=data.quantity,
        status=CostPaymentStatus.UNPAID,
        description=data.description,
        bl_id=data.bl_id,
        job_order_id=data.job_order_id,
        vendor_id=data.vendor_id,
        vendor_name=data.vendor_name,
        paid_amount=0.0,
        **amounts,
    )


def prepare_revenue_line_item(
    data: LineItemInput,
    item_id: str,
    base_currency: str = BASE_CURRENCY,
    default_tax_rate: float = DEFAULT_TAX_RATE,
) -> RevenueLineItem:
    """
    Build a revenue line item with all calculated fields.

    The new item starts ``unbilled``.

    Raises:
        InvalidExchangeRate: If a foreign-currency line has no positive rate
        InvalidTaxRate: If a taxable line has a negative tax rate
    """
    amounts = _compute_amounts(data, base_currency, default_tax_rate)
    return RevenueLineItem(
        id=item_id,
        booking_id=data.booking_id,
        charge_type_id=data.charge_type_id,
        currency=data.currency,
        unit_price=data.unit_price,
        quantity=data.quantity,
        status=RevenueBillingStatus.UNBILLED,
        description=data.description,
        bl_id=data.bl_id,
        job_order_id=data.job_order_id,
        invoice_id=data.invoice_id,
        **amounts,
    )


def _resolve_statuses(
    current: CostPaymentStatus | RevenueBillingStatus | str,
    new: CostPaymentStatus | RevenueBillingStatus | str,
) -> tuple[CostPaymentStatus, CostPaymentStatus] | tuple[RevenueBillingStatus, RevenueBillingStatus] | None:
    """Find the one status enum both values belong to, or None."""
    for status_type in _STATUS_ORDER:
        try:
            return status_type(current), status_type(new)
        except ValueError:
            continue
    return None


def is_valid_status_transition(
    current: CostPaymentStatus | RevenueBillingStatus | str,
    new: CostPaymentStatus | RevenueBillingStatus | str,
) -> bool:
    """
    Check whether a payment/billing status change moves strictly forward.

    ``unpaid -> partial -> paid`` for costs and ``unbilled -> billed -> paid``
    for revenue; skipping ahead is allowed, moving back or staying put is not.
    Statuses may be given as enums or their string values. Mixing cost and
    revenue statuses, or unknown values, is never valid.
    """
    resolved = _resolve_statuses(current, new)
    if resolved is None:
        return False
    current_status, new_status = resolved
    order = _STATUS_ORDER[type(current_status)]
    return order.index(new_status) > order.index(current_status)


def is_valid_cost_payment_status(value: str) -> bool:
    """Check if a value is a known cost payment status."""
    return value in {status.value for status in CostPaymentStatus}


def is_valid_revenue_billing_status(value: str) -> bool:
    """Check if a value is a known revenue billing status."""
    return value in {status.value for status in RevenueBillingStatus}
