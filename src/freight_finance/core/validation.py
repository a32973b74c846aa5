#!/usr/bin/env python3
"""
Validation Result Types

Structured validation output shared by term sets and line item forms.
Validation problems are returned, never raised, so a form can render
every error at once.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """A single field-level validation problem."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    """
    Outcome of validating a term set or a line item form.

    Examples:
        >>> result = ValidationResult()
        >>> result.add("currency", "Currency is required")
        >>> result.is_valid
        False
    """

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no errors were recorded."""
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        """Record a validation error for a field."""
        self.errors.append(ValidationError(field=field_name, message=message))

    def fields(self) -> list[str]:
        """Names of fields with errors, in the order they were recorded."""
        return [error.field for error in self.errors]

    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_valid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
        }
