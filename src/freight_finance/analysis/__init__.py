"""
Analysis Package

Cross-booking profitability reporting built on pandas.
"""

from .report import margin_by_customer, snapshots_to_dataframe, summarize_profitability

__all__ = [
    "margin_by_customer",
    "snapshots_to_dataframe",
    "summarize_profitability",
]
