#!/usr/bin/env python3
"""
Invoice Generation Tracker

Accumulates invoiced totals across a term set and exposes the
"has any term been invoiced" gate that makes a term set immutable.

Also provides the per-term invoice schedule combining allocation, trigger
status, and VAT into a single view for the caller.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..core.tax import DEFAULT_TAX_RATE, calculate_tax, calculate_total_with_tax
from .allocator import calculate_term_amount
from .models import InvoiceTerm, TermStatus
from .triggers import get_term_status


@dataclass(frozen=True)
class TermInvoiceTotals:
    """Subtotal, VAT and tax-inclusive total of a single term."""

    subtotal: float
    vat_amount: float
    total_amount: float

    def to_dict(self) -> dict[str, float]:
        return {
            "subtotal": self.subtotal,
            "vat_amount": self.vat_amount,
            "total_amount": self.total_amount,
        }


@dataclass(frozen=True)
class RevenueDiscrepancy:
    """Comparison of the PJO revenue line total against the JO final revenue."""

    has_discrepancy: bool
    pjo_revenue_total: float
    jo_final_revenue: float
    difference: float
    difference_percent: float


@dataclass(frozen=True)
class TermScheduleEntry:
    """A term together with its current status and invoice totals."""

    term: InvoiceTerm
    status: TermStatus
    totals: TermInvoiceTotals

    @property
    def can_invoice(self) -> bool:
        """True when the term is ready and not yet invoiced."""
        return self.status == TermStatus.READY

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.term.to_dict(),
            "status": self.status.value,
            **self.totals.to_dict(),
        }


def calculate_vat(amount: float, tax_rate: float = DEFAULT_TAX_RATE) -> float:
    """Calculate VAT on an amount."""
    return calculate_tax(amount, tax_rate, True)


def calculate_term_invoice_totals(
    revenue: float, percentage: float, tax_rate: float = DEFAULT_TAX_RATE
) -> TermInvoiceTotals:
    """
    Calculate invoice totals for a term.

    Example:
        calculate_term_invoice_totals(10000000, 30, 11)
        -> TermInvoiceTotals(subtotal=3000000, vat_amount=330000, total_amount=3330000)
    """
    breakdown = calculate_total_with_tax(calculate_term_amount(revenue, percentage), tax_rate, True)
    return TermInvoiceTotals(
        subtotal=breakdown.amount,
        vat_amount=breakdown.tax,
        total_amount=breakdown.total,
    )


def has_any_invoiced_term(terms: Sequence[InvoiceTerm]) -> bool:
    """
    Check if any term has been invoiced.

    Once True, the owning term set must not accept percentage or trigger
    edits; rejecting the edit is the caller's responsibility.
    """
    return any(term.invoiced for term in terms)


def calculate_total_invoiced_from_terms(
    terms: Sequence[InvoiceTerm], revenue: float, tax_rate: float = DEFAULT_TAX_RATE
) -> float:
    """Sum the tax-inclusive totals of all invoiced terms."""
    return sum(
        calculate_term_invoice_totals(revenue, term.percentage, tax_rate).total_amount
        for term in terms
        if term.invoiced
    )


def calculate_total_invoiceable_amount(revenue: float, tax_rate: float = DEFAULT_TAX_RATE) -> float:
    """Calculate the total invoiceable amount (revenue + VAT)."""
    return revenue + calculate_vat(revenue, tax_rate)


def calculate_uninvoiced_revenue(terms: Sequence[InvoiceTerm], revenue: float) -> tuple[float, float]:
    """
    Calculate revenue not yet covered by an invoiced term.

    Returns:
        Tuple of (uninvoiced_amount, uninvoiced_percent), both pre-tax
    """
    invoiced_percent = sum(term.percentage for term in terms if term.invoiced)
    uninvoiced_percent = 100 - invoiced_percent
    return calculate_term_amount(revenue, uninvoiced_percent), uninvoiced_percent


def check_revenue_discrepancy(
    pjo_revenue_total: float, jo_final_revenue: float, tolerance: float = 0.01
) -> RevenueDiscrepancy:
    """
    Check for a discrepancy between PJO revenue items and the JO final revenue.

    Args:
        pjo_revenue_total: Sum of the PJO revenue line items
        jo_final_revenue: Final revenue recorded on the job order
        tolerance: Fractional tolerance (default 0.01 = 1%)

    Returns:
        RevenueDiscrepancy; difference_percent is relative to the JO final
        revenue, or 100 when that is zero and the PJO total is positive
    """
    difference = pjo_revenue_total - jo_final_revenue
    if jo_final_revenue > 0:
        difference_percent = (difference / jo_final_revenue) * 100
    elif pjo_revenue_total > 0:
        difference_percent = 100.0
    else:
        difference_percent = 0.0

    return RevenueDiscrepancy(
        has_discrepancy=abs(difference_percent) > tolerance * 100,
        pjo_revenue_total=pjo_revenue_total,
        jo_final_revenue=jo_final_revenue,
        difference=difference,
        difference_percent=difference_percent,
    )


def build_term_schedule(
    terms: Sequence[InvoiceTerm],
    revenue: float,
    job_order_status: str,
    has_surat_jalan: bool = False,
    has_berita_acara: bool = False,
    tax_rate: float = DEFAULT_TAX_RATE,
) -> list[TermScheduleEntry]:
    """
    Build the invoice schedule for a term set.

    Each entry pairs a term with its computed status and its invoice totals.
    The result is fully determined by the inputs, so callers can safely
    recompute it after a failed conditional write.
    """
    return [
        TermScheduleEntry(
            term=term,
            status=get_term_status(term, job_order_status, has_surat_jalan, has_berita_acara),
            totals=calculate_term_invoice_totals(revenue, term.percentage, tax_rate),
        )
        for term in terms
    ]
