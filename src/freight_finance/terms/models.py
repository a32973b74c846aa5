#!/usr/bin/env python3
"""
Invoice Term Domain Models

A term is one percentage-weighted slice of a job order's revenue that is
invoiced separately, once its trigger milestone has occurred.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class TriggerKind(Enum):
    """Operational milestone a term waits on before it can be invoiced."""

    JO_CREATED = "jo_created"
    SURAT_JALAN = "surat_jalan"  # Delivery note
    BERITA_ACARA = "berita_acara"  # Handover report
    DELIVERY = "delivery"


class PresetType(Enum):
    """Term set templates offered when configuring a job order."""

    SINGLE = "single"
    DP_FINAL = "dp_final"
    DP_DELIVERY_FINAL = "dp_delivery_final"
    CUSTOM = "custom"


class TermStatus(Enum):
    """Invoicing eligibility of a term, computed on demand."""

    INVOICED = "invoiced"
    READY = "ready"
    LOCKED = "locked"
    PENDING = "pending"


TRIGGER_LABELS: dict[TriggerKind, str] = {
    TriggerKind.JO_CREATED: "JO Created",
    TriggerKind.SURAT_JALAN: "Surat Jalan",
    TriggerKind.BERITA_ACARA: "Berita Acara",
    TriggerKind.DELIVERY: "Delivery",
}

PRESET_LABELS: dict[PresetType, str] = {
    PresetType.SINGLE: "Single Invoice (100%)",
    PresetType.DP_FINAL: "DP + Final (30/70)",
    PresetType.DP_DELIVERY_FINAL: "DP + Delivery + Final (30/50/20)",
    PresetType.CUSTOM: "Custom",
}


@dataclass
class InvoiceTerm:
    """
    One invoice term of a job order's term set.

    Use ``with_changes`` to derive an edited copy without touching the original.
    Whether the owning set may be edited at all is decided by the caller via
    ``has_any_invoiced_term``.

    ``trigger`` accepts a TriggerKind or its string value; unknown values
    raise ValueError at construction.
    """

    term: str
    percentage: float
    description: str
    trigger: TriggerKind
    invoiced: bool = False

    # Informational link to the generated invoice, if any
    invoice_id: str | None = None

    def __post_init__(self) -> None:
        """Normalize the trigger so string values behave like their enum."""
        self.trigger = TriggerKind(self.trigger)

    def with_changes(self, **changes: Any) -> "InvoiceTerm":
        """Return a copy of this term with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON/YAML serialization."""
        data: dict[str, Any] = {
            "term": self.term,
            "percentage": self.percentage,
            "description": self.description,
            "trigger": self.trigger.value,
            "invoiced": self.invoiced,
        }
        if self.invoice_id is not None:
            data["invoice_id"] = self.invoice_id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InvoiceTerm":
        """
        Create InvoiceTerm from dictionary.

        Args:
            data: Mapping with term, percentage, description, trigger and
                  optional invoiced / invoice_id keys

        Raises:
            KeyError: If a required key is missing
            ValueError: If trigger is not a known TriggerKind
        """
        return cls(
            term=str(data["term"]),
            percentage=float(data["percentage"]),
            description=str(data.get("description", "")),
            trigger=data["trigger"],
            invoiced=bool(data.get("invoiced", False)),
            invoice_id=data.get("invoice_id"),
        )
