#!/usr/bin/env python3
"""
Charge Types

Master data describing what a cost or revenue line is for. Each charge type
belongs to a category and applies to costs, revenue, or both.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.currency import BASE_CURRENCY
from ..core.validation import ValidationResult

logger = logging.getLogger(__name__)


class ChargeCategory(Enum):
    """Grouping of charge types for reporting."""

    FREIGHT = "freight"
    PORT_CHARGES = "port_charges"
    DOCUMENTATION = "documentation"
    CUSTOMS = "customs"
    HANDLING = "handling"
    TRUCKING = "trucking"
    INSURANCE = "insurance"
    OTHER = "other"


class ChargeTypeClass(Enum):
    """Which side of a booking's ledger a charge type may be used on."""

    COST = "cost"
    REVENUE = "revenue"
    BOTH = "both"


@dataclass
class ChargeTypeInput:
    """Form data for creating or editing a charge type."""

    charge_code: str
    charge_name: str
    charge_category: str
    charge_type: str
    default_currency: str = BASE_CURRENCY
    is_taxable: bool = True
    display_order: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChargeTypeInput":
        """Create ChargeTypeInput from a form/JSON dictionary."""
        return cls(
            charge_code=data.get("charge_code", ""),
            charge_name=data.get("charge_name", ""),
            charge_category=data.get("charge_category", ""),
            charge_type=data.get("charge_type", ""),
            default_currency=data.get("default_currency") or BASE_CURRENCY,
            is_taxable=data.get("is_taxable", True),
            display_order=data.get("display_order"),
        )


def is_valid_charge_category(value: str) -> bool:
    """Check if a value is a known charge category."""
    return value in {category.value for category in ChargeCategory}


def is_valid_charge_type_class(value: str) -> bool:
    """Check if a value is a known charge type class."""
    return value in {type_class.value for type_class in ChargeTypeClass}


def validate_charge_type_data(data: ChargeTypeInput) -> ValidationResult:
    """
    Validate charge type form input.

    Returns:
        ValidationResult listing every invalid field; unknown category or
        type values list the accepted values in the message
    """
    result = ValidationResult()

    if not (data.charge_code or "").strip():
        result.add("charge_code", "Charge code is required")

    if not (data.charge_name or "").strip():
        result.add("charge_name", "Charge name is required")

    if not data.charge_category:
        result.add("charge_category", "Charge category is required")
    elif not is_valid_charge_category(data.charge_category):
        valid = ", ".join(category.value for category in ChargeCategory)
        result.add("charge_category", f"Invalid charge category. Valid values: {valid}")

    if not data.charge_type:
        result.add("charge_type", "Charge type is required")
    elif not is_valid_charge_type_class(data.charge_type):
        valid = ", ".join(type_class.value for type_class in ChargeTypeClass)
        result.add("charge_type", f"Invalid charge type. Valid values: {valid}")

    if data.display_order is not None and data.display_order < 0:
        result.add("display_order", "Display order cannot be negative")

    if not result.is_valid:
        logger.warning("Charge type input failed validation: %s", ", ".join(result.fields()))

    return result


def applies_to(charge_type: ChargeTypeClass | str, side: ChargeTypeClass | str) -> bool:
    """
    Check whether a charge type can be used for costs or revenue.

    Example:
        applies_to("both", "cost") -> True
        applies_to("revenue", "cost") -> False
    """
    charge_type = ChargeTypeClass(charge_type)
    return charge_type == ChargeTypeClass.BOTH or charge_type == ChargeTypeClass(side)
