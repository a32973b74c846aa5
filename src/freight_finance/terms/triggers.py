#!/usr/bin/env python3
"""
Term Trigger Status

Determines whether an invoice term can be invoiced, from the job order status
and the existence of milestone documents. Status is recomputed on every call
and never stored on the term, so a newly recorded document or status change
unlocks eligible terms immediately.
"""

import logging
from collections.abc import Sequence

from .models import InvoiceTerm, TermStatus, TriggerKind

logger = logging.getLogger(__name__)

# Job order statuses at or after completion of the delivery
DELIVERY_READY_STATUSES = frozenset({"completed", "submitted_to_finance", "invoiced", "closed"})

TERM_STATUS_LABELS: dict[TermStatus, str] = {
    TermStatus.INVOICED: "Invoiced",
    TermStatus.READY: "Ready",
    TermStatus.LOCKED: "Locked",
    TermStatus.PENDING: "Pending",
}


def get_term_status(
    term: InvoiceTerm,
    job_order_status: str,
    has_surat_jalan: bool = False,
    has_berita_acara: bool = False,
) -> TermStatus:
    """
    Determine the invoicing status of a term.

    An invoiced term is always ``invoiced``, whatever the other signals say.
    Otherwise the term's trigger decides between ``ready`` and ``locked``:

    - jo_created: always ready
    - delivery: ready once the job order is completed or later
    - surat_jalan: ready once a Surat Jalan exists
    - berita_acara: ready once a Berita Acara exists

    Args:
        term: The invoice term
        job_order_status: Current job order status string
        has_surat_jalan: Whether a Surat Jalan document exists
        has_berita_acara: Whether a Berita Acara document exists

    Returns:
        TermStatus for the term
    """
    if term.invoiced:
        return TermStatus.INVOICED

    match term.trigger:
        case TriggerKind.JO_CREATED:
            ready = True
        case TriggerKind.DELIVERY:
            ready = job_order_status in DELIVERY_READY_STATUSES
        case TriggerKind.SURAT_JALAN:
            ready = has_surat_jalan
        case TriggerKind.BERITA_ACARA:
            ready = has_berita_acara
        case _:
            logger.warning("Unknown trigger %r on term %s", term.trigger, term.term)
            return TermStatus.PENDING

    status = TermStatus.READY if ready else TermStatus.LOCKED
    logger.debug("Term %s (%s) is %s", term.term, term.trigger.value, status.value)
    return status


def get_term_statuses(
    terms: Sequence[InvoiceTerm],
    job_order_status: str,
    has_surat_jalan: bool = False,
    has_berita_acara: bool = False,
) -> list[TermStatus]:
    """Determine the status of every term in a set, preserving order."""
    return [get_term_status(term, job_order_status, has_surat_jalan, has_berita_acara) for term in terms]


def get_term_status_label(status: TermStatus) -> str:
    """Get the display label for a term status."""
    return TERM_STATUS_LABELS.get(status, "Unknown")


def get_locked_trigger_description(trigger: TriggerKind) -> str:
    """Describe what a locked term is waiting for; empty for jo_created."""
    match trigger:
        case TriggerKind.SURAT_JALAN:
            return "Requires Surat Jalan document"
        case TriggerKind.BERITA_ACARA:
            return "Requires Berita Acara document"
        case TriggerKind.DELIVERY:
            return "Requires JO completion"
        case _:
            return ""
