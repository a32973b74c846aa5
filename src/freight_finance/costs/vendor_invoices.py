#!/usr/bin/env python3
"""
Vendor Invoices

Validation of vendor invoice form input, due date tracking, and the payment
status derived from the amount paid against an invoice.

Dates are plain ``datetime.date`` values or ISO ``YYYY-MM-DD`` strings.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

from ..core.validation import ValidationResult

logger = logging.getLogger(__name__)

# Days before the due date at which an unpaid invoice is flagged as due soon
DUE_SOON_DAYS = 7


class VendorInvoicePaymentStatus(Enum):
    """Payment status of a vendor invoice."""

    UNPAID = "unpaid"
    PARTIAL = "partial"
    PAID = "paid"


VENDOR_INVOICE_PAYMENT_STATUS_LABELS: dict[VendorInvoicePaymentStatus, str] = {
    VendorInvoicePaymentStatus.UNPAID: "Unpaid",
    VendorInvoicePaymentStatus.PARTIAL: "Partial",
    VendorInvoicePaymentStatus.PAID: "Paid",
}


@dataclass
class VendorInvoiceInput:
    """
    Form data for a vendor invoice covering one or more shipment costs.

    Amounts may be omitted (None); when given they must not be negative.
    """

    invoice_number: str
    vendor_id: str
    invoice_date: date | str | None
    due_date: date | str | None = None
    vendor_name: str | None = None
    currency: str = "IDR"
    subtotal: float | None = None
    tax_amount: float | None = None
    total_amount: float | None = None
    cost_ids: list[str] = field(default_factory=list)
    document_url: str | None = None
    notes: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VendorInvoiceInput":
        """Create VendorInvoiceInput from a form/JSON dictionary."""
        return cls(
            invoice_number=data.get("invoice_number", ""),
            vendor_id=data.get("vendor_id", ""),
            invoice_date=data.get("invoice_date"),
            due_date=data.get("due_date"),
            vendor_name=data.get("vendor_name"),
            currency=data.get("currency") or "IDR",
            subtotal=data.get("subtotal"),
            tax_amount=data.get("tax_amount"),
            total_amount=data.get("total_amount"),
            cost_ids=list(data.get("cost_ids") or []),
            document_url=data.get("document_url"),
            notes=data.get("notes"),
        )


def parse_date(value: date | str) -> date:
    """
    Parse a date or ISO ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If a string is not a valid ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


def validate_vendor_invoice_data(data: VendorInvoiceInput) -> ValidationResult:
    """
    Validate vendor invoice form input.

    Checks required fields, non-negative amounts, and that the due date is
    not before the invoice date.

    Args:
        data: Vendor invoice form input

    Returns:
        ValidationResult listing every invalid field
    """
    result = ValidationResult()

    if not (data.invoice_number or "").strip():
        result.add("invoice_number", "Invoice number is required")

    if not data.vendor_id:
        result.add("vendor_id", "Vendor is required")

    invoice_date = None
    if not data.invoice_date:
        result.add("invoice_date", "Invoice date is required")
    else:
        try:
            invoice_date = parse_date(data.invoice_date)
        except ValueError:
            result.add("invoice_date", "Invoice date must be a valid date (YYYY-MM-DD)")

    for field_name, label in (
        ("total_amount", "Total amount"),
        ("subtotal", "Subtotal"),
        ("tax_amount", "Tax amount"),
    ):
        value = getattr(data, field_name)
        if value is not None and value < 0:
            result.add(field_name, f"{label} cannot be negative")

    if data.due_date:
        try:
            due_date = parse_date(data.due_date)
        except ValueError:
            result.add("due_date", "Due date must be a valid date (YYYY-MM-DD)")
        else:
            if invoice_date is not None and due_date < invoice_date:
                result.add("due_date", "Due date cannot be before invoice date")

    if not result.is_valid:
        logger.warning("Vendor invoice input failed validation: %s", ", ".join(result.fields()))

    return result


def calculate_days_until_due(due_date: date | str | None, today: date | None = None) -> int:
    """
    Calculate the days from today until a due date.

    Args:
        due_date: Due date, or None when the invoice has none
        today: Reference date (default: today's date)

    Returns:
        Positive days until due, negative days overdue, 0 without a due date
    """
    if not due_date:
        return 0
    if today is None:
        today = date.today()
    return (parse_date(due_date) - today).days


def is_overdue(due_date: date | str | None, today: date | None = None) -> bool:
    """Check if a due date has passed; never overdue without a due date."""
    return calculate_days_until_due(due_date, today) < 0


def is_due_soon(
    due_date: date | str | None,
    payment_status: VendorInvoicePaymentStatus = VendorInvoicePaymentStatus.UNPAID,
    today: date | None = None,
) -> bool:
    """Check if an unpaid invoice falls due within DUE_SOON_DAYS and is not yet overdue."""
    if not due_date or payment_status == VendorInvoicePaymentStatus.PAID:
        return False
    return 0 <= calculate_days_until_due(due_date, today) <= DUE_SOON_DAYS


def determine_vendor_invoice_payment_status(paid_amount: float, total_amount: float) -> VendorInvoicePaymentStatus:
    """
    Derive a vendor invoice's payment status from the amount paid.

    Raises:
        ValueError: If paid_amount is negative
    """
    if paid_amount < 0:
        raise ValueError("Paid amount cannot be negative")
    if paid_amount == 0:
        return VendorInvoicePaymentStatus.UNPAID
    if paid_amount >= total_amount:
        return VendorInvoicePaymentStatus.PAID
    return VendorInvoicePaymentStatus.PARTIAL


def is_valid_vendor_invoice_payment_status(value: str) -> bool:
    """Check if a value is a known vendor invoice payment status."""
    return value in {status.value for status in VendorInvoicePaymentStatus}
