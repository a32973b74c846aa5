#!/usr/bin/env python3
"""
Profitability CLI

Summarize a booking's cost/revenue line items, or report profitability
across bookings with optional filters.
"""

from pathlib import Path
from typing import Any

import click

from ..analysis.report import summarize_profitability
from ..core.config import get_config
from ..core.currency import format_currency
from ..core.json_utils import format_json, read_json
from ..costs import (
    CostLineItem,
    ProfitabilityFilters,
    ProfitabilitySnapshot,
    RevenueLineItem,
    build_profitability_snapshot,
    filter_profitability,
    summarize_booking_financials,
)


def _read_input(path: Path) -> Any:
    try:
        return read_json(path)
    except ValueError as e:
        raise click.ClickException(str(e))


def _load_line_items(data: dict[str, Any], source: Path) -> tuple[list[CostLineItem], list[RevenueLineItem]]:
    try:
        costs = [CostLineItem.from_dict(row) for row in data.get("costs", [])]
        revenue = [RevenueLineItem.from_dict(row) for row in data.get("revenue", [])]
    except (KeyError, TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid line item in {source}: {e}")
    return costs, revenue


@click.group()
def profit() -> None:
    """Booking profitability commands."""
    pass


@profit.command()
@click.argument("items_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--target", type=float, help="Margin target percentage (default: configured target)")
@click.option("--json", "as_json", is_flag=True, help="Output the summary as JSON")
def summary(items_file: Path, target: float | None, as_json: bool) -> None:
    """
    Summarize one booking's finances from ITEMS_FILE.

    ITEMS_FILE is JSON with "costs" and "revenue" lists of line items.

    Example:
      freight-finance profit summary booking_items.json --target 25
    """
    config = get_config()
    currency = config.invoicing.base_currency
    if target is None:
        target = config.profitability.margin_target

    data = _read_input(items_file)
    if not isinstance(data, dict):
        raise click.ClickException(f"{items_file} must contain an object with 'costs' and 'revenue'")
    costs, revenue = _load_line_items(data, items_file)

    result = summarize_booking_financials(costs, revenue, target)

    if as_json:
        click.echo(format_json(result.to_dict()))
        return

    click.echo("Booking Financial Summary")
    click.echo("=" * 60)
    click.echo(f"Revenue:      {format_currency(result.total_revenue, currency)}")
    click.echo(f"Revenue tax:  {format_currency(result.total_revenue_tax, currency)}")
    click.echo(f"Cost:         {format_currency(result.total_cost, currency)}")
    click.echo(f"Cost tax:     {format_currency(result.total_cost_tax, currency)}")
    click.echo(f"Gross profit: {format_currency(result.gross_profit, currency)}")
    click.echo(
        f"Margin:       {result.profit_margin_pct:.2f}% "
        f"(target {result.target_margin_pct:g}%, {result.margin_indicator.value})"
    )
    click.echo(f"Unbilled revenue: {format_currency(result.unbilled_revenue, currency)}")
    click.echo(f"Unpaid costs:     {format_currency(result.unpaid_costs, currency)}")


@profit.command()
@click.argument("bookings_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--customer", "customer_id", help="Only bookings for this customer id")
@click.option("--status", help="Only bookings with this status")
@click.option("--min-margin", type=float, help="Minimum profit margin percentage")
@click.option("--max-margin", type=float, help="Maximum profit margin percentage")
@click.option("--unbilled-only", is_flag=True, help="Only bookings with unbilled revenue")
@click.option("--json", "as_json", is_flag=True, help="Output the report as JSON")
def report(
    bookings_file: Path,
    customer_id: str | None,
    status: str | None,
    min_margin: float | None,
    max_margin: float | None,
    unbilled_only: bool,
    as_json: bool,
) -> None:
    """
    Report profitability across the bookings in BOOKINGS_FILE.

    BOOKINGS_FILE is a JSON list of bookings, each with booking_id, optional
    booking_number / customer_id / customer_name / status, and "costs" and
    "revenue" line item lists.

    Example:
      freight-finance profit report bookings.json --min-margin 10 --unbilled-only
    """
    config = get_config()
    currency = config.invoicing.base_currency
    target = config.profitability.margin_target

    data = _read_input(bookings_file)
    if not isinstance(data, list):
        raise click.ClickException(f"{bookings_file} must contain a list of bookings")

    snapshots: list[ProfitabilitySnapshot] = []
    for booking in data:
        if "booking_id" not in booking:
            raise click.ClickException(f"Booking without booking_id in {bookings_file}")
        costs, revenue = _load_line_items(booking, bookings_file)
        snapshots.append(
            build_profitability_snapshot(
                booking["booking_id"],
                costs,
                revenue,
                booking_number=booking.get("booking_number"),
                customer_id=booking.get("customer_id"),
                customer_name=booking.get("customer_name"),
                status=booking.get("status"),
            )
        )

    filters = ProfitabilityFilters(
        customer_id=customer_id,
        status=status,
        min_margin=min_margin,
        max_margin=max_margin,
        unbilled_only=unbilled_only,
    )
    matched = filter_profitability(snapshots, filters)
    totals = summarize_profitability(matched, target)

    if as_json:
        click.echo(format_json({"bookings": [s.to_dict() for s in matched], "summary": totals}))
        return

    click.echo(f"Profitability Report ({len(matched)} of {len(snapshots)} bookings)")
    click.echo("=" * 60)
    for snapshot in matched:
        label = snapshot.booking_number or snapshot.booking_id
        click.echo(
            f"{label}: revenue {format_currency(snapshot.total_revenue, currency)}, "
            f"cost {format_currency(snapshot.total_cost, currency)}, "
            f"margin {snapshot.profit_margin_pct:.2f}%"
        )

    click.echo("-" * 60)
    click.echo(f"Gross profit: {format_currency(totals['gross_profit'], currency)}")
    click.echo(f"Overall margin: {totals['overall_margin_pct']:.2f}%")
    counts = totals["indicator_counts"]
    click.echo(f"Indicators: {counts['green']} green, {counts['yellow']} yellow, {counts['red']} red")
