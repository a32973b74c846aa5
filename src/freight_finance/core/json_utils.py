#!/usr/bin/env python3
"""
JSON Utilities Module

Reads term set and line item files for the CLI and renders ``--json``
output. Enum members (statuses, triggers, indicators) and dates are
written as their plain values.
"""

import json
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any


def _encode_value(value: Any) -> Any:
    """Serialize domain values json cannot handle natively."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def read_json(filepath: str | Path) -> Any:
    """
    Read an input file of terms, line items or bookings.

    Raises:
        ValueError: If the file is not valid JSON; the message names the file
    """
    with open(filepath, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{filepath} is not valid JSON: {e}") from e


def format_json(data: Any, sort_keys: bool = False) -> str:
    """
    Format command output as indented JSON.

    Non-ASCII text (customer and vendor names) is kept as-is.

    Example:
        format_json({"status": TermStatus.READY}) -> '{\\n  "status": "ready"\\n}'
    """
    return json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys, default=_encode_value)
