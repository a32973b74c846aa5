"""
Invoice Terms Package

Invoice splitting for job orders: a job order's revenue is divided into
percentage-weighted terms, each invoiced once its trigger milestone occurs.

Key Components:
- allocator: Preset term sets, percentage validation, term amounts
- triggers: Per-term status (invoiced / ready / locked) from external signals
- tracker: Invoiced totals, immutability gate, term invoice schedule
"""

from .allocator import (
    INVOICE_TERM_PRESETS,
    PERCENTAGE_TOLERANCE,
    calculate_term_amount,
    calculate_terms_percentage_total,
    create_empty_term,
    detect_preset_from_terms,
    get_preset_terms,
    validate_terms,
    validate_terms_total,
)
from .models import (
    PRESET_LABELS,
    TRIGGER_LABELS,
    InvoiceTerm,
    PresetType,
    TermStatus,
    TriggerKind,
)
from .tracker import (
    RevenueDiscrepancy,
    TermInvoiceTotals,
    TermScheduleEntry,
    build_term_schedule,
    calculate_term_invoice_totals,
    calculate_total_invoiceable_amount,
    calculate_total_invoiced_from_terms,
    calculate_uninvoiced_revenue,
    calculate_vat,
    check_revenue_discrepancy,
    has_any_invoiced_term,
)
from .triggers import (
    DELIVERY_READY_STATUSES,
    get_locked_trigger_description,
    get_term_status,
    get_term_status_label,
    get_term_statuses,
)

__all__ = [
    "DELIVERY_READY_STATUSES",
    "INVOICE_TERM_PRESETS",
    "PERCENTAGE_TOLERANCE",
    "PRESET_LABELS",
    "TRIGGER_LABELS",
    # Domain models
    "InvoiceTerm",
    "PresetType",
    "RevenueDiscrepancy",
    "TermInvoiceTotals",
    "TermScheduleEntry",
    "TermStatus",
    "TriggerKind",
    "build_term_schedule",
    # Allocation
    "calculate_term_amount",
    # Tracking
    "calculate_term_invoice_totals",
    "calculate_terms_percentage_total",
    "calculate_total_invoiceable_amount",
    "calculate_total_invoiced_from_terms",
    "calculate_uninvoiced_revenue",
    "calculate_vat",
    "check_revenue_discrepancy",
    "create_empty_term",
    "detect_preset_from_terms",
    "get_locked_trigger_description",
    "get_preset_terms",
    # Trigger status
    "get_term_status",
    "get_term_status_label",
    "get_term_statuses",
    "has_any_invoiced_term",
    "validate_terms",
    "validate_terms_total",
]
