#!/usr/bin/env python3
"""
Profitability Aggregation

Sums cost and revenue line items in the base currency and derives gross
profit, profit margin, and the margin indicator used for color coding.

Also provides open-balance helpers (unbilled revenue, unpaid costs) and
pure filters over profitability snapshots and revenue line items.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .models import (
    BookingFinancialSummary,
    CostLineItem,
    CostPaymentStatus,
    MarginIndicator,
    ProfitabilitySnapshot,
    RevenueBillingStatus,
    RevenueLineItem,
    UnbilledRevenueGroup,
)

# Minimum acceptable profit margin percentage
DEFAULT_MARGIN_TARGET = 20.0


def aggregate_costs(costs: Iterable[CostLineItem]) -> float:
    """Total cost in the base currency; 0 for no costs."""
    return sum((cost.amount_base or 0.0 for cost in costs), 0.0)


def aggregate_revenue(revenue: Iterable[RevenueLineItem]) -> float:
    """Total revenue in the base currency; 0 for no revenue."""
    return sum((item.amount_base or 0.0 for item in revenue), 0.0)


def calculate_gross_profit(revenue: float, cost: float) -> float:
    """Calculate gross profit (revenue - cost)."""
    return revenue - cost


def calculate_profit_margin(revenue: float, cost: float) -> float:
    """
    Calculate profit margin as a percentage of revenue.

    Returns 0 when revenue is zero or negative. The margin is negative when
    cost exceeds revenue and may exceed 100 when cost is negative.
    """
    if revenue <= 0:
        return 0.0
    return (calculate_gross_profit(revenue, cost) / revenue) * 100


def get_margin_indicator(margin: float, target: float = DEFAULT_MARGIN_TARGET) -> MarginIndicator:
    """
    Get the margin indicator color for a margin against its target.

    - green: margin >= target
    - yellow: target * 0.5 <= margin < target
    - red: margin < target * 0.5
    """
    if margin >= target:
        return MarginIndicator.GREEN
    if margin >= target * 0.5:
        return MarginIndicator.YELLOW
    return MarginIndicator.RED


def is_margin_target_met(margin: float, target: float = DEFAULT_MARGIN_TARGET) -> bool:
    """Check if the margin target is met."""
    return margin >= target


def get_unbilled_revenue(revenue: Iterable[RevenueLineItem]) -> list[RevenueLineItem]:
    """Revenue items whose billing status is ``unbilled``."""
    return [item for item in revenue if item.status == RevenueBillingStatus.UNBILLED]


def get_unpaid_costs(costs: Iterable[CostLineItem]) -> list[CostLineItem]:
    """Cost items that are unpaid or only partially paid."""
    return [
        cost for cost in costs if cost.status in (CostPaymentStatus.UNPAID, CostPaymentStatus.PARTIAL)
    ]


def calculate_unbilled_total(revenue: Iterable[RevenueLineItem]) -> float:
    """Total unbilled revenue in the base currency."""
    return aggregate_revenue(get_unbilled_revenue(revenue))


def calculate_unpaid_total(costs: Iterable[CostLineItem]) -> float:
    """Outstanding cost balance: total_amount minus paid_amount over unpaid/partial costs."""
    return sum(
        ((cost.total_amount or 0.0) - (cost.paid_amount or 0.0) for cost in get_unpaid_costs(costs)),
        0.0,
    )


def build_profitability_snapshot(
    booking_id: str,
    costs: Sequence[CostLineItem],
    revenue: Sequence[RevenueLineItem],
    booking_number: str | None = None,
    customer_id: str | None = None,
    customer_name: str | None = None,
    status: str | None = None,
) -> ProfitabilitySnapshot:
    """
    Build the profitability snapshot of one booking from its line items.

    Args:
        booking_id: Booking the line items belong to
        costs: All cost line items of the booking
        revenue: All revenue line items of the booking
        booking_number, customer_id, customer_name, status: Report fields

    Returns:
        ProfitabilitySnapshot with totals, gross profit and margin
    """
    total_revenue = aggregate_revenue(revenue)
    total_cost = aggregate_costs(costs)
    return ProfitabilitySnapshot(
        booking_id=booking_id,
        total_revenue=total_revenue,
        total_cost=total_cost,
        gross_profit=calculate_gross_profit(total_revenue, total_cost),
        profit_margin_pct=calculate_profit_margin(total_revenue, total_cost),
        booking_number=booking_number,
        customer_id=customer_id,
        customer_name=customer_name,
        status=status,
        unbilled_revenue=calculate_unbilled_total(revenue),
    )


def summarize_booking_financials(
    costs: Sequence[CostLineItem],
    revenue: Sequence[RevenueLineItem],
    target: float = DEFAULT_MARGIN_TARGET,
) -> BookingFinancialSummary:
    """
    Summarize a booking's finances against a margin target.

    Args:
        costs: All cost line items of the booking
        revenue: All revenue line items of the booking
        target: Margin target percentage (default 20)

    Returns:
        BookingFinancialSummary including tax totals and open balances
    """
    total_revenue = aggregate_revenue(revenue)
    total_cost = aggregate_costs(costs)
    margin = calculate_profit_margin(total_revenue, total_cost)

    return BookingFinancialSummary(
        total_revenue=total_revenue,
        total_revenue_tax=sum((item.tax_amount or 0.0 for item in revenue), 0.0),
        total_cost=total_cost,
        total_cost_tax=sum((cost.tax_amount or 0.0 for cost in costs), 0.0),
        gross_profit=calculate_gross_profit(total_revenue, total_cost),
        profit_margin_pct=margin,
        target_margin_pct=target,
        is_target_met=is_margin_target_met(margin, target),
        margin_indicator=get_margin_indicator(margin, target),
        unbilled_revenue=calculate_unbilled_total(revenue),
        unpaid_costs=calculate_unpaid_total(costs),
    )


def group_unbilled_revenue_by_booking(revenue: Iterable[RevenueLineItem]) -> list[UnbilledRevenueGroup]:
    """
    Group unbilled revenue items by booking.

    Items without a booking are skipped. Groups appear in the order their
    booking is first seen, and items keep their input order.
    """
    groups: dict[str, UnbilledRevenueGroup] = {}

    for item in get_unbilled_revenue(revenue):
        if not item.booking_id:
            continue
        group = groups.setdefault(item.booking_id, UnbilledRevenueGroup(booking_id=item.booking_id))
        group.items.append(item)
        group.total_unbilled += item.amount_base or 0.0

    return list(groups.values())


@dataclass(frozen=True)
class ProfitabilityFilters:
    """
    Filters for the profitability report.

    Unset (None/False) filters are ignored; all set filters must match.
    """

    customer_id: str | None = None
    status: str | None = None
    min_margin: float | None = None
    max_margin: float | None = None
    unbilled_only: bool = False

    def matches(self, snapshot: ProfitabilitySnapshot) -> bool:
        """Check whether a snapshot satisfies every set filter."""
        if self.customer_id is not None and snapshot.customer_id != self.customer_id:
            return False
        if self.status is not None and snapshot.status != self.status:
            return False
        if self.min_margin is not None and snapshot.profit_margin_pct < self.min_margin:
            return False
        if self.max_margin is not None and snapshot.profit_margin_pct > self.max_margin:
            return False
        if self.unbilled_only and snapshot.unbilled_revenue <= 0:
            return False
        return True


def filter_profitability(
    snapshots: Iterable[ProfitabilitySnapshot], filters: ProfitabilityFilters | None = None
) -> list[ProfitabilitySnapshot]:
    """
    Filter profitability snapshots.

    Matching snapshots are returned as-is and in input order, so filtering
    an already filtered list returns an equal list.
    """
    if filters is None:
        return list(snapshots)
    return [snapshot for snapshot in snapshots if filters.matches(snapshot)]


def filter_revenue_items(
    revenue: Iterable[RevenueLineItem],
    booking_id: str | None = None,
    status: RevenueBillingStatus | None = None,
    unbilled_only: bool = False,
) -> list[RevenueLineItem]:
    """Filter revenue line items by booking, billing status, and unbilled flag (all ANDed)."""
    result = []
    for item in revenue:
        if booking_id is not None and item.booking_id != booking_id:
            continue
        if status is not None and item.status != status:
            continue
        if unbilled_only and item.status != RevenueBillingStatus.UNBILLED:
            continue
        result.append(item)
    return result
