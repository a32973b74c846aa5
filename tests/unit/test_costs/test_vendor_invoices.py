#!/usr/bin/env python3
"""
Unit tests for vendor invoice validation and due date tracking.
"""

from datetime import date, datetime

import pytest

from freight_finance.costs import (
    VendorInvoiceInput,
    VendorInvoicePaymentStatus,
    calculate_days_until_due,
    determine_vendor_invoice_payment_status,
    is_due_soon,
    is_overdue,
    is_valid_vendor_invoice_payment_status,
    validate_vendor_invoice_data,
)

TODAY = date(2025, 3, 10)


def _invoice(**overrides):
    data = {
        "invoice_number": "VI-2025-0042",
        "vendor_id": "vendor-7",
        "invoice_date": "2025-03-01",
        "due_date": "2025-03-31",
        "total_amount": 5_550_000,
    }
    data.update(overrides)
    return VendorInvoiceInput.from_dict(data)


class TestValidateVendorInvoiceData:
    """Test vendor invoice form validation."""

    @pytest.mark.profitability
    def test_valid_invoice(self):
        """Test a complete invoice passes."""
        assert validate_vendor_invoice_data(_invoice()).is_valid

    @pytest.mark.profitability
    def test_due_date_optional(self):
        """Test an invoice without a due date is valid."""
        assert validate_vendor_invoice_data(_invoice(due_date=None)).is_valid

    @pytest.mark.profitability
    def test_date_objects_accepted(self):
        """Test date and datetime values validate like ISO strings."""
        data = _invoice(invoice_date=date(2025, 3, 1), due_date=datetime(2025, 3, 15, 9, 30))
        assert validate_vendor_invoice_data(data).is_valid

    @pytest.mark.profitability
    def test_required_fields(self):
        """Test missing number, vendor and invoice date are all reported."""
        result = validate_vendor_invoice_data(VendorInvoiceInput.from_dict({"invoice_number": "  "}))

        assert result.fields() == ["invoice_number", "vendor_id", "invoice_date"]
        assert result.messages() == [
            "Invoice number is required",
            "Vendor is required",
            "Invoice date is required",
        ]

    @pytest.mark.profitability
    def test_due_date_before_invoice_date(self):
        """Test a due date earlier than the invoice date is rejected."""
        result = validate_vendor_invoice_data(_invoice(invoice_date="2025-03-15", due_date="2025-03-14"))

        assert result.fields() == ["due_date"]
        assert result.messages() == ["Due date cannot be before invoice date"]

    @pytest.mark.profitability
    def test_due_on_invoice_date_allowed(self):
        """Test an invoice due the day it is issued is valid."""
        assert validate_vendor_invoice_data(_invoice(due_date="2025-03-01")).is_valid

    @pytest.mark.profitability
    @pytest.mark.parametrize("field_name", ["invoice_date", "due_date"])
    @pytest.mark.parametrize("bad_value", ["2025-02-30", "01/03/2025", "soon"])
    def test_malformed_dates(self, field_name, bad_value):
        """Test dates that are not real YYYY-MM-DD dates are reported."""
        result = validate_vendor_invoice_data(_invoice(**{field_name: bad_value}))

        assert result.fields() == [field_name]
        assert "must be a valid date (YYYY-MM-DD)" in result.messages()[0]

    @pytest.mark.profitability
    def test_negative_amounts(self):
        """Test every negative amount is reported, zero is allowed."""
        result = validate_vendor_invoice_data(_invoice(total_amount=-1, subtotal=-2, tax_amount=-3))

        assert result.fields() == ["total_amount", "subtotal", "tax_amount"]
        assert result.messages() == [
            "Total amount cannot be negative",
            "Subtotal cannot be negative",
            "Tax amount cannot be negative",
        ]
        assert validate_vendor_invoice_data(_invoice(total_amount=0, tax_amount=0)).is_valid

    @pytest.mark.profitability
    def test_from_dict_defaults(self):
        """Test defaults for optional form fields."""
        data = VendorInvoiceInput.from_dict({"invoice_number": "VI-1", "vendor_id": "v", "cost_ids": ("c1", "c2")})

        assert data.currency == "IDR"
        assert data.cost_ids == ["c1", "c2"]
        assert data.total_amount is None


class TestDueDates:
    """Test days-until-due and overdue tracking."""

    @pytest.mark.profitability
    @pytest.mark.parametrize(
        "due_date,expected",
        [
            ("2025-03-17", 7),
            ("2025-03-10", 0),
            ("2025-03-01", -9),
            (date(2025, 4, 9), 30),
            (None, 0),
            ("", 0),
        ],
    )
    def test_days_until_due(self, due_date, expected):
        """Test positive, zero, overdue and missing due dates."""
        assert calculate_days_until_due(due_date, today=TODAY) == expected

    @pytest.mark.profitability
    def test_is_overdue(self):
        """Test only past due dates are overdue."""
        assert is_overdue("2025-03-09", today=TODAY) is True
        assert is_overdue("2025-03-10", today=TODAY) is False
        assert is_overdue(None, today=TODAY) is False

    @pytest.mark.profitability
    def test_is_due_soon(self):
        """Test the seven day due-soon window for unpaid invoices."""
        assert is_due_soon("2025-03-17", today=TODAY) is True
        assert is_due_soon("2025-03-10", today=TODAY) is True
        assert is_due_soon("2025-03-18", today=TODAY) is False
        assert is_due_soon("2025-03-09", today=TODAY) is False
        assert is_due_soon(None, today=TODAY) is False

    @pytest.mark.profitability
    def test_paid_invoice_never_due_soon(self):
        """Test a paid invoice is not flagged even inside the window."""
        assert is_due_soon("2025-03-12", VendorInvoicePaymentStatus.PAID, today=TODAY) is False
        assert is_due_soon("2025-03-12", VendorInvoicePaymentStatus.PARTIAL, today=TODAY) is True

    @pytest.mark.profitability
    def test_malformed_due_date_raises(self):
        """Test an unparseable due date is an error, not silently zero days."""
        with pytest.raises(ValueError):
            calculate_days_until_due("31/03/2025", today=TODAY)


class TestVendorInvoicePaymentStatus:
    """Test payment status derived from the amount paid."""

    @pytest.mark.profitability
    @pytest.mark.parametrize(
        "paid,total,expected",
        [
            (0, 1_000_000, VendorInvoicePaymentStatus.UNPAID),
            (250_000, 1_000_000, VendorInvoicePaymentStatus.PARTIAL),
            (1_000_000, 1_000_000, VendorInvoicePaymentStatus.PAID),
            (1_200_000, 1_000_000, VendorInvoicePaymentStatus.PAID),
        ],
    )
    def test_status_from_paid_amount(self, paid, total, expected):
        """Test unpaid, partial, exact and overpaid invoices."""
        assert determine_vendor_invoice_payment_status(paid, total) == expected

    @pytest.mark.profitability
    def test_negative_paid_amount_raises(self):
        """Test a negative payment is rejected."""
        with pytest.raises(ValueError, match="Paid amount cannot be negative"):
            determine_vendor_invoice_payment_status(-1, 1_000_000)

    @pytest.mark.profitability
    def test_status_predicate(self):
        """Test recognition of stored payment status strings."""
        assert is_valid_vendor_invoice_payment_status("partial") is True
        assert is_valid_vendor_invoice_payment_status("billed") is False
