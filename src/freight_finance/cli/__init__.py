"""
Command-Line Interface Package

Click-based CLI for invoice term planning and profitability reporting.

Commands:
- terms: Preset term sets and invoice schedules
- profit: Booking summaries and cross-booking reports
"""

from .main import main

__all__ = ["main"]
