#!/usr/bin/env python3
"""
Unit tests for invoice generation tracking.

Tests per-term VAT totals, invoiced accumulation and the edit-lock gate.
"""

import pytest

from freight_finance.terms import (
    InvoiceTerm,
    PresetType,
    TermStatus,
    TriggerKind,
    build_term_schedule,
    calculate_term_invoice_totals,
    calculate_total_invoiceable_amount,
    calculate_total_invoiced_from_terms,
    calculate_uninvoiced_revenue,
    calculate_vat,
    check_revenue_discrepancy,
    get_preset_terms,
    has_any_invoiced_term,
)


class TestTermInvoiceTotals:
    """Test subtotal, VAT and total of a single term."""

    @pytest.mark.terms
    def test_down_payment_of_ten_million(self):
        """Test 30% of 10M at 11% VAT."""
        totals = calculate_term_invoice_totals(10_000_000, 30, 11)
        assert totals.subtotal == pytest.approx(3_000_000)
        assert totals.vat_amount == pytest.approx(330_000)
        assert totals.total_amount == pytest.approx(3_330_000)

    @pytest.mark.terms
    def test_default_tax_rate(self):
        """Test omitted tax rate uses 11%."""
        assert calculate_term_invoice_totals(1_000, 100).total_amount == pytest.approx(1_110)

    @pytest.mark.terms
    def test_vat_helpers(self):
        """Test VAT and total invoiceable helpers."""
        assert calculate_vat(1_000_000) == pytest.approx(110_000)
        assert calculate_vat(1_000_000, 0) == 0
        assert calculate_total_invoiceable_amount(10_000_000) == pytest.approx(11_100_000)


class TestInvoicedTracking:
    """Test accumulation across a term set."""

    @pytest.mark.terms
    def test_no_terms_invoiced(self, dp_final_terms):
        """Test a fresh set is editable and fully uninvoiced."""
        assert has_any_invoiced_term(dp_final_terms) is False
        assert calculate_total_invoiced_from_terms(dp_final_terms, 10_000_000) == 0
        assert calculate_uninvoiced_revenue(dp_final_terms, 10_000_000) == (pytest.approx(10_000_000), 100)

    @pytest.mark.terms
    def test_partially_invoiced(self, dp_final_terms):
        """Test invoicing the down payment locks the set and moves totals."""
        dp_final_terms[0].invoiced = True

        assert has_any_invoiced_term(dp_final_terms) is True
        assert calculate_total_invoiced_from_terms(dp_final_terms, 10_000_000, 11) == pytest.approx(3_330_000)

        amount, percent = calculate_uninvoiced_revenue(dp_final_terms, 10_000_000)
        assert amount == pytest.approx(7_000_000)
        assert percent == 70

    @pytest.mark.terms
    def test_fully_invoiced_matches_total_invoiceable(self):
        """Test invoicing every term of a valid set covers revenue plus VAT."""
        terms = [t.with_changes(invoiced=True) for t in get_preset_terms(PresetType.DP_DELIVERY_FINAL)]

        assert calculate_total_invoiced_from_terms(terms, 8_000_000, 11) == pytest.approx(
            calculate_total_invoiceable_amount(8_000_000, 11)
        )
        assert calculate_uninvoiced_revenue(terms, 8_000_000) == (pytest.approx(0), 0)

    @pytest.mark.terms
    def test_out_of_order_invoicing_is_allowed(self):
        """Test a later term may be invoiced before an earlier one."""
        terms = get_preset_terms(PresetType.DP_FINAL)
        terms[1].invoiced = True

        assert has_any_invoiced_term(terms) is True
        assert calculate_uninvoiced_revenue(terms, 1_000)[1] == 30


class TestRevenueDiscrepancy:
    """Test PJO revenue against JO final revenue."""

    @pytest.mark.terms
    def test_matching_revenue(self):
        """Test equal totals have no discrepancy."""
        result = check_revenue_discrepancy(10_000_000, 10_000_000)
        assert result.has_discrepancy is False
        assert result.difference == 0
        assert result.difference_percent == 0

    @pytest.mark.terms
    def test_within_tolerance(self):
        """Test a 0.5% drift is within the default 1% tolerance."""
        result = check_revenue_discrepancy(10_050_000, 10_000_000)
        assert result.has_discrepancy is False
        assert result.difference_percent == pytest.approx(0.5)

    @pytest.mark.terms
    def test_beyond_tolerance(self):
        """Test a 5% shortfall is reported."""
        result = check_revenue_discrepancy(9_500_000, 10_000_000)
        assert result.has_discrepancy is True
        assert result.difference == pytest.approx(-500_000)
        assert result.difference_percent == pytest.approx(-5)

    @pytest.mark.terms
    def test_zero_final_revenue(self):
        """Test a missing JO revenue against positive PJO items is 100% off."""
        result = check_revenue_discrepancy(1_000, 0)
        assert result.has_discrepancy is True
        assert result.difference_percent == 100
        assert check_revenue_discrepancy(0, 0).has_discrepancy is False


class TestTermSchedule:
    """Test the combined term schedule view."""

    @pytest.mark.terms
    def test_schedule_entries(self, dp_final_terms):
        """Test each entry pairs status with invoice totals."""
        schedule = build_term_schedule(dp_final_terms, 10_000_000, "in_progress")

        assert [entry.status for entry in schedule] == [TermStatus.READY, TermStatus.LOCKED]
        assert [entry.can_invoice for entry in schedule] == [True, False]
        assert schedule[1].totals.subtotal == pytest.approx(7_000_000)
        assert schedule[1].totals.total_amount == pytest.approx(7_770_000)

    @pytest.mark.terms
    def test_invoiced_entry_cannot_be_invoiced_again(self):
        """Test an invoiced term is never offered for invoicing."""
        terms = [InvoiceTerm("full", 100, "Full Payment", TriggerKind.JO_CREATED, invoiced=True)]
        entry = build_term_schedule(terms, 5_000_000, "draft")[0]

        assert entry.status == TermStatus.INVOICED
        assert entry.can_invoice is False

    @pytest.mark.terms
    def test_schedule_to_dict(self, dp_final_terms):
        """Test flattened dictionary form of an entry."""
        data = build_term_schedule(dp_final_terms, 10_000_000, "completed", tax_rate=0)[0].to_dict()

        assert data["term"] == "down_payment"
        assert data["trigger"] == "jo_created"
        assert data["status"] == "ready"
        assert data["subtotal"] == pytest.approx(3_000_000)
        assert data["vat_amount"] == 0
        assert data["total_amount"] == pytest.approx(3_000_000)
