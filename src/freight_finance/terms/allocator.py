#!/usr/bin/env python3
"""
Percentage Allocator for Invoice Terms.

Splits a job order's revenue across percentage-weighted invoice terms and
validates the 100% invariant of a term set.

Key Features:
- Preset templates (single, DP + final, DP + delivery + final)
- Fresh copies on every preset lookup so callers never share term objects
- Percentage-sum validation with a small floating-point tolerance
- Field-level validation for custom term sets
"""

import logging
from collections.abc import Sequence
from dataclasses import replace

from ..core.validation import ValidationResult
from .models import InvoiceTerm, PresetType, TriggerKind

logger = logging.getLogger(__name__)

# Allowed drift of a term set's percentage sum from 100
PERCENTAGE_TOLERANCE = 0.01

INVOICE_TERM_PRESETS: dict[PresetType, tuple[InvoiceTerm, ...]] = {
    PresetType.SINGLE: (
        InvoiceTerm("full", 100, "Full Payment", TriggerKind.JO_CREATED),
    ),
    PresetType.DP_FINAL: (
        InvoiceTerm("down_payment", 30, "Down Payment", TriggerKind.JO_CREATED),
        InvoiceTerm("final", 70, "Final Payment", TriggerKind.DELIVERY),
    ),
    PresetType.DP_DELIVERY_FINAL: (
        InvoiceTerm("down_payment", 30, "Down Payment", TriggerKind.JO_CREATED),
        InvoiceTerm("delivery", 50, "Upon Delivery", TriggerKind.SURAT_JALAN),
        InvoiceTerm("final", 20, "After Handover", TriggerKind.BERITA_ACARA),
    ),
}


def get_preset_terms(preset: PresetType | str) -> list[InvoiceTerm]:
    """
    Get the term set for a preset.

    Every call returns new InvoiceTerm objects, so mutating a returned term
    never affects the template or another caller's copy.

    Args:
        preset: PresetType or its string value

    Returns:
        List of terms for the preset; empty for ``custom``

    Raises:
        ValueError: If preset is not a known PresetType value
    """
    preset = PresetType(preset)
    if preset == PresetType.CUSTOM:
        return []

    terms = [replace(term) for term in INVOICE_TERM_PRESETS[preset]]
    logger.debug("Loaded %d terms for preset %s", len(terms), preset.value)
    return terms


def calculate_terms_percentage_total(terms: Sequence[InvoiceTerm]) -> float:
    """Calculate the sum of all term percentages."""
    return sum(term.percentage for term in terms)


def validate_terms_total(terms: Sequence[InvoiceTerm], tolerance: float = PERCENTAGE_TOLERANCE) -> bool:
    """
    Validate that a term set totals exactly 100%.

    Args:
        terms: Term set to check
        tolerance: Allowed absolute difference from 100 (exclusive)

    Returns:
        True iff terms is non-empty and ``|sum - 100| < tolerance``
    """
    if not terms:
        return False
    return abs(calculate_terms_percentage_total(terms) - 100) < tolerance


def calculate_term_amount(revenue: float, percentage: float) -> float:
    """
    Calculate the pre-tax amount of a term.

    Example:
        calculate_term_amount(10000000, 30) -> 3000000
    """
    return (revenue * percentage) / 100


def create_empty_term() -> InvoiceTerm:
    """Create a blank custom term with default values."""
    return InvoiceTerm(term="", percentage=0, description="", trigger=TriggerKind.JO_CREATED)


def detect_preset_from_terms(terms: Sequence[InvoiceTerm]) -> PresetType:
    """
    Detect which preset a term set was created from.

    A set matches a preset only when its term ids and percentages equal the
    template exactly and in order; anything else is ``custom``.
    """
    shape = [(term.term, term.percentage) for term in terms]

    for preset, template in INVOICE_TERM_PRESETS.items():
        if shape == [(term.term, term.percentage) for term in template]:
            return preset

    return PresetType.CUSTOM


def validate_terms(terms: Sequence[InvoiceTerm], tolerance: float = PERCENTAGE_TOLERANCE) -> ValidationResult:
    """
    Validate a term set for use in invoicing.

    Checks required fields on each term and the 100% invariant of the set.
    Errors are collected, never raised.

    Args:
        terms: Term set to validate
        tolerance: Allowed absolute difference from 100

    Returns:
        ValidationResult with one entry per problem found
    """
    result = ValidationResult()

    if not terms:
        result.add("terms", "At least one invoice term is required")
        return result

    seen_ids: set[str] = set()
    for i, term in enumerate(terms):
        if not term.term.strip():
            result.add(f"terms[{i}].term", "Term name is required")
        elif term.term in seen_ids:
            result.add(f"terms[{i}].term", f"Duplicate term name: {term.term}")
        else:
            seen_ids.add(term.term)

        if not term.description.strip():
            result.add(f"terms[{i}].description", "Description is required")

        if not 0 <= term.percentage <= 100:
            result.add(f"terms[{i}].percentage", "Percentage must be between 0 and 100")

    if not validate_terms_total(terms, tolerance):
        total = calculate_terms_percentage_total(terms)
        result.add("terms", f"Term percentages must total 100% (currently {total:g}%)")

    if not result.is_valid:
        logger.warning("Term set failed validation with %d errors", len(result.errors))

    return result
