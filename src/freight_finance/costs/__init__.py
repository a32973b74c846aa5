"""
Cost & Revenue Package

Multi-currency shipment cost and revenue line items and the profitability
figures derived from them.

Key Components:
- models: Line items, status enums, snapshots and summaries
- line_items: Form validation and fully computed line item preparation
- profitability: Aggregation, margin, indicator, open balances, filters
- vendor_invoices: Vendor invoice validation, due dates, payment status
- charge_types: Charge type master data validation
"""

from .charge_types import (
    ChargeCategory,
    ChargeTypeClass,
    ChargeTypeInput,
    applies_to,
    is_valid_charge_category,
    is_valid_charge_type_class,
    validate_charge_type_data,
)
from .line_items import (
    is_valid_cost_payment_status,
    is_valid_revenue_billing_status,
    is_valid_status_transition,
    prepare_cost_line_item,
    prepare_revenue_line_item,
    validate_cost_data,
    validate_revenue_data,
)
from .models import (
    BookingFinancialSummary,
    CostLineItem,
    CostPaymentStatus,
    LineItemInput,
    MarginIndicator,
    ProfitabilitySnapshot,
    RevenueBillingStatus,
    RevenueLineItem,
    UnbilledRevenueGroup,
)
from .profitability import (
    DEFAULT_MARGIN_TARGET,
    ProfitabilityFilters,
    aggregate_costs,
    aggregate_revenue,
    build_profitability_snapshot,
    calculate_gross_profit,
    calculate_profit_margin,
    calculate_unbilled_total,
    calculate_unpaid_total,
    filter_profitability,
    filter_revenue_items,
    get_margin_indicator,
    get_unbilled_revenue,
    get_unpaid_costs,
    group_unbilled_revenue_by_booking,
    is_margin_target_met,
    summarize_booking_financials,
)
from .vendor_invoices import (
    VENDOR_INVOICE_PAYMENT_STATUS_LABELS,
    VendorInvoiceInput,
    VendorInvoicePaymentStatus,
    calculate_days_until_due,
    determine_vendor_invoice_payment_status,
    is_due_soon,
    is_overdue,
    is_valid_vendor_invoice_payment_status,
    validate_vendor_invoice_data,
)

__all__ = [
    # Domain models
    "BookingFinancialSummary",
    "CostLineItem",
    "CostPaymentStatus",
    "DEFAULT_MARGIN_TARGET",
    "LineItemInput",
    "MarginIndicator",
    "ProfitabilityFilters",
    "ProfitabilitySnapshot",
    "RevenueBillingStatus",
    "RevenueLineItem",
    "UnbilledRevenueGroup",
    # Profitability
    "aggregate_costs",
    "aggregate_revenue",
    "build_profitability_snapshot",
    "calculate_gross_profit",
    "calculate_profit_margin",
    "calculate_unbilled_total",
    "calculate_unpaid_total",
    "filter_profitability",
    "filter_revenue_items",
    "get_margin_indicator",
    "get_unbilled_revenue",
    "get_unpaid_costs",
    "group_unbilled_revenue_by_booking",
    "is_margin_target_met",
    # Line items
    "is_valid_status_transition",
    "prepare_cost_line_item",
    "prepare_revenue_line_item",
    "summarize_booking_financials",
    "validate_cost_data",
    "validate_revenue_data",
    # Charge types
    "ChargeCategory",
    "ChargeTypeClass",
    "ChargeTypeInput",
    "applies_to",
    "is_valid_charge_category",
    "is_valid_charge_type_class",
    "validate_charge_type_data",
    # Status predicates
    "is_valid_cost_payment_status",
    "is_valid_revenue_billing_status",
    # Vendor invoices
    "VENDOR_INVOICE_PAYMENT_STATUS_LABELS",
    "VendorInvoiceInput",
    "VendorInvoicePaymentStatus",
    "calculate_days_until_due",
    "determine_vendor_invoice_payment_status",
    "is_due_soon",
    "is_overdue",
    "is_valid_vendor_invoice_payment_status",
    "validate_vendor_invoice_data",
]
