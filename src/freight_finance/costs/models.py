#!/usr/bin/env python3
"""
Cost and Revenue Domain Models

Typed line items for shipment costs and revenue, plus the derived
profitability values computed from them.

Line items are created fully computed by ``line_items.prepare_*`` and
afterwards change only through payment/billing status transitions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CostPaymentStatus(Enum):
    """Payment status of a cost line item."""

    UNPAID = "unpaid"
    PARTIAL = "partial"
    PAID = "paid"


class RevenueBillingStatus(Enum):
    """Billing status of a revenue line item."""

    UNBILLED = "unbilled"
    BILLED = "billed"
    PAID = "paid"


class MarginIndicator(Enum):
    """Color-coded profitability relative to the margin target."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


@dataclass
class LineItemInput:
    """
    Form data for a new cost or revenue line item.

    At least one of booking_id, bl_id or job_order_id must be set.
    unit_price and quantity are None when the form omits them, which
    validation reports. exchange_rate, tax_rate and is_taxable may be
    omitted (None) to use the defaults applied by ``line_items.prepare_*``.
    """

    charge_type_id: str
    currency: str
    unit_price: float | None
    quantity: float | None

    booking_id: str | None = None
    bl_id: str | None = None
    job_order_id: str | None = None
    description: str | None = None
    exchange_rate: float | None = None
    tax_rate: float | None = None
    is_taxable: bool | None = None

    # Cost-only fields
    vendor_id: str | None = None
    vendor_name: str | None = None

    # Revenue-only fields
    invoice_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LineItemInput":
        """Create LineItemInput from a form/JSON dictionary."""
        return cls(
            charge_type_id=data.get("charge_type_id", ""),
            currency=data.get("currency", ""),
            unit_price=data.get("unit_price"),
            quantity=data.get("quantity"),
            booking_id=data.get("booking_id"),
            bl_id=data.get("bl_id"),
            job_order_id=data.get("job_order_id"),
            description=data.get("description"),
            exchange_rate=data.get("exchange_rate"),
            tax_rate=data.get("tax_rate"),
            is_taxable=data.get("is_taxable"),
            vendor_id=data.get("vendor_id"),
            vendor_name=data.get("vendor_name"),
            invoice_id=data.get("invoice_id"),
        )


@dataclass
class CostLineItem:
    """
    Shipment cost line item.

    ``amount_base`` is the amount converted into the base currency; it equals
    ``amount`` when the line is already in the base currency.
    """

    id: str
    booking_id: str | None
    charge_type_id: str
    currency: str
    unit_price: float
    quantity: float
    amount: float
    exchange_rate: float
    amount_base: float
    is_taxable: bool
    tax_rate: float
    tax_amount: float
    total_amount: float
    status: CostPaymentStatus = CostPaymentStatus.UNPAID

    # Optional fields
    description: str | None = None
    bl_id: str | None = None
    job_order_id: str | None = None
    vendor_id: str | None = None
    vendor_name: str | None = None
    paid_amount: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "booking_id": self.booking_id,
            "charge_type_id": self.charge_type_id,
            "currency": self.currency,
            "unit_price": self.unit_price,
            "quantity": self.quantity,
            "amount": self.amount,
            "exchange_rate": self.exchange_rate,
            "amount_base": self.amount_base,
            "is_taxable": self.is_taxable,
            "tax_rate": self.tax_rate,
            "tax_amount": self.tax_amount,
            "total_amount": self.total_amount,
            "status": self.status.value,
            "description": self.description,
            "bl_id": self.bl_id,
            "job_order_id": self.job_order_id,
            "vendor_id": self.vendor_id,
            "vendor_name": self.vendor_name,
            "paid_amount": self.paid_amount,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CostLineItem":
        """Create CostLineItem from a stored row dictionary."""
        return cls(
            id=data["id"],
            booking_id=data.get("booking_id"),
            charge_type_id=data["charge_type_id"],
            currency=data["currency"],
            unit_price=data["unit_price"],
            quantity=data["quantity"],
            amount=data["amount"],
            exchange_rate=data["exchange_rate"],
            amount_base=data["amount_base"],
            is_taxable=data["is_taxable"],
            tax_rate=data["tax_rate"],
            tax_amount=data["tax_amount"],
            total_amount=data["total_amount"],
            status=CostPaymentStatus(data.get("status", "unpaid")),
            description=data.get("description"),
            bl_id=data.get("bl_id"),
            job_order_id=data.get("job_order_id"),
            vendor_id=data.get("vendor_id"),
            vendor_name=data.get("vendor_name"),
            paid_amount=data.get("paid_amount", 0.0),
        )


@dataclass
class RevenueLineItem:
    """
    Shipment revenue line item.

    ``amount_base`` is the amount converted into the base currency; it equals
    ``amount`` when the line is already in the base currency.
    """

    id: str
    booking_id: str | None
    charge_type_id: str
    currency: str
    unit_price: float
    quantity: float
    amount: float
    exchange_rate: float
    amount_base: float
    is_taxable: bool
    tax_rate: float
    tax_amount: float
    total_amount: float
    status: RevenueBillingStatus = RevenueBillingStatus.UNBILLED

    # Optional fields
    description: str | None = None
    bl_id: str | None = None
    job_order_id: str | None = None
    invoice_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "booking_id": self.booking_id,
            "charge_type_id": self.charge_type_id,
            "currency": self.currency,
            "unit_price": self.unit_price,
            "quantity": self.quantity,
            "amount": self.amount,
            "exchange_rate": self.exchange_rate,
            "amount_base": self.amount_base,
            "is_taxable": self.is_taxable,
            "tax_rate": self.tax_rate,
            "tax_amount": self.tax_amount,
            "total_amount": self.total_amount,
            "status": self.status.value,
            "description": self.description,
            "bl_id": self.bl_id,
            "job_order_id": self.job_order_id,
            "invoice_id": self.invoice_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RevenueLineItem":
        """Create RevenueLineItem from a stored row dictionary."""
        return cls(
            id=data["id"],
            booking_id=data.get("booking_id"),
            charge_type_id=data["charge_type_id"],
            currency=data["currency"],
            unit_price=data["unit_price"],
            quantity=data["quantity"],
            amount=data["amount"],
            exchange_rate=data["exchange_rate"],
            amount_base=data["amount_base"],
            is_taxable=data["is_taxable"],
            tax_rate=data["tax_rate"],
            tax_amount=data["tax_amount"],
            total_amount=data["total_amount"],
            status=RevenueBillingStatus(data.get("status", "unbilled")),
            description=data.get("description"),
            bl_id=data.get("bl_id"),
            job_order_id=data.get("job_order_id"),
            invoice_id=data.get("invoice_id"),
        )


@dataclass(frozen=True)
class ProfitabilitySnapshot:
    """
    Profitability of a single booking, derived from its line items.

    Not persisted by this package. The report fields (booking_number,
    customer, status, unbilled_revenue) are carried for filtering and display.
    """

    booking_id: str
    total_revenue: float
    total_cost: float
    gross_profit: float
    profit_margin_pct: float

    # Report fields
    booking_number: str | None = None
    customer_id: str | None = None
    customer_name: str | None = None
    status: str | None = None
    unbilled_revenue: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "booking_id": self.booking_id,
            "booking_number": self.booking_number,
            "customer_id": self.customer_id,
            "customer_name": self.customer_name,
            "status": self.status,
            "total_revenue": self.total_revenue,
            "total_cost": self.total_cost,
            "gross_profit": self.gross_profit,
            "profit_margin_pct": self.profit_margin_pct,
            "unbilled_revenue": self.unbilled_revenue,
        }


@dataclass(frozen=True)
class BookingFinancialSummary:
    """Full financial summary of one booking, including tax and open balances."""

    total_revenue: float
    total_revenue_tax: float
    total_cost: float
    total_cost_tax: float
    gross_profit: float
    profit_margin_pct: float
    target_margin_pct: float
    is_target_met: bool
    margin_indicator: MarginIndicator
    unbilled_revenue: float
    unpaid_costs: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_revenue": self.total_revenue,
            "total_revenue_tax": self.total_revenue_tax,
            "total_cost": self.total_cost,
            "total_cost_tax": self.total_cost_tax,
            "gross_profit": self.gross_profit,
            "profit_margin_pct": self.profit_margin_pct,
            "target_margin_pct": self.target_margin_pct,
            "is_target_met": self.is_target_met,
            "margin_indicator": self.margin_indicator.value,
            "unbilled_revenue": self.unbilled_revenue,
            "unpaid_costs": self.unpaid_costs,
        }


@dataclass
class UnbilledRevenueGroup:
    """Unbilled revenue items of one booking with their base-currency total."""

    booking_id: str
    items: list[RevenueLineItem] = field(default_factory=list)
    total_unbilled: float = 0.0
