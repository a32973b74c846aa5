#!/usr/bin/env python3
"""
Profitability Report

Tabulates profitability snapshots across bookings with pandas and computes
portfolio-level totals, margin statistics and indicator counts.
"""

import logging
from collections.abc import Sequence
from typing import Any

import pandas as pd

from ..costs.models import MarginIndicator, ProfitabilitySnapshot
from ..costs.profitability import (
    DEFAULT_MARGIN_TARGET,
    calculate_profit_margin,
    get_margin_indicator,
)

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "booking_id",
    "booking_number",
    "customer_id",
    "customer_name",
    "status",
    "total_revenue",
    "total_cost",
    "gross_profit",
    "profit_margin_pct",
    "unbilled_revenue",
    "margin_indicator",
]


def snapshots_to_dataframe(
    snapshots: Sequence[ProfitabilitySnapshot], target: float = DEFAULT_MARGIN_TARGET
) -> pd.DataFrame:
    """
    Convert profitability snapshots to a DataFrame.

    Rows keep the input order. A ``margin_indicator`` column is added using
    the given margin target.

    Args:
        snapshots: Profitability snapshots, one per booking
        target: Margin target percentage for the indicator column

    Returns:
        DataFrame with REPORT_COLUMNS (empty but typed when no snapshots)
    """
    records = []
    for snapshot in snapshots:
        record = snapshot.to_dict()
        record["margin_indicator"] = get_margin_indicator(snapshot.profit_margin_pct, target).value
        records.append(record)

    df = pd.DataFrame(records, columns=REPORT_COLUMNS)
    logger.info("Tabulated %d profitability snapshots", len(df))
    return df


def summarize_profitability(
    snapshots: Sequence[ProfitabilitySnapshot], target: float = DEFAULT_MARGIN_TARGET
) -> dict[str, Any]:
    """
    Summarize profitability across bookings.

    The overall margin is computed from the summed totals, not by averaging
    per-booking margins; ``average_margin_pct`` is the plain mean for reference.

    Returns:
        Dictionary with booking_count, totals, overall and average margin, and
        a count of bookings per margin indicator
    """
    df = snapshots_to_dataframe(snapshots, target)
    indicator_counts = {indicator.value: 0 for indicator in MarginIndicator}

    if df.empty:
        return {
            "booking_count": 0,
            "total_revenue": 0.0,
            "total_cost": 0.0,
            "gross_profit": 0.0,
            "overall_margin_pct": 0.0,
            "average_margin_pct": 0.0,
            "unbilled_revenue": 0.0,
            "indicator_counts": indicator_counts,
        }

    total_revenue = float(df["total_revenue"].sum())
    total_cost = float(df["total_cost"].sum())
    indicator_counts.update({str(k): int(v) for k, v in df["margin_indicator"].value_counts().items()})

    return {
        "booking_count": int(len(df)),
        "total_revenue": total_revenue,
        "total_cost": total_cost,
        "gross_profit": total_revenue - total_cost,
        "overall_margin_pct": calculate_profit_margin(total_revenue, total_cost),
        "average_margin_pct": float(df["profit_margin_pct"].mean()),
        "unbilled_revenue": float(df["unbilled_revenue"].sum()),
        "indicator_counts": indicator_counts,
    }


def margin_by_customer(snapshots: Sequence[ProfitabilitySnapshot]) -> pd.DataFrame:
    """
    Aggregate revenue, cost and margin per customer.

    Bookings without a customer are grouped under an empty customer id.
    The result is sorted by gross profit, highest first.
    """
    df = snapshots_to_dataframe(snapshots)
    if df.empty:
        return pd.DataFrame(columns=["customer_id", "total_revenue", "total_cost", "gross_profit", "profit_margin_pct"])

    df["customer_id"] = df["customer_id"].fillna("")
    grouped = (
        df.groupby("customer_id", sort=False)[["total_revenue", "total_cost"]].sum().reset_index()
    )
    grouped["gross_profit"] = grouped["total_revenue"] - grouped["total_cost"]
    grouped["profit_margin_pct"] = [
        calculate_profit_margin(revenue, cost)
        for revenue, cost in zip(grouped["total_revenue"], grouped["total_cost"])
    ]
    return grouped.sort_values("gross_profit", ascending=False).reset_index(drop=True)
