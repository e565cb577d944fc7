"""
Text formatting utilities for dashboard output.

This module renders dashboard overviews, stat cards and customer rankings
as plain text for the command line.
"""

from decimal import Decimal
from typing import List, Optional, Sequence, Union

from src.models.metrics import CustomerSegments, DashboardTotals
from src.models.tenant import Customer
from src.services.dashboard_service import DashboardOverview, EmptyState


def format_currency(
    amount: Optional[Union[Decimal, float]], currency_symbol: str = "$"
) -> str:
    """
    Format a number as currency.

    Args:
        amount: The amount to format
        currency_symbol: Currency symbol (default: $)

    Returns:
        Formatted currency string (e.g., "$1,234.56")
    """
    if amount is None:
        return f"{currency_symbol}0.00"

    return f"{currency_symbol}{amount:,.2f}"


def format_stat_cards(totals: DashboardTotals, currency_symbol: str = "$") -> List[str]:
    """Render the four headline figures, one per line."""
    return [
        f"Total Revenue:          {format_currency(totals.total_revenue, currency_symbol)}",
        f"Avg. Order Value (AOV): {format_currency(totals.average_order_value, currency_symbol)}",
        f"Total Orders:           {totals.order_count:,}",
        f"Total Customers:        {totals.customer_count:,}",
    ]


def format_top_customers(
    customers: Sequence[Customer], currency_symbol: str = "$"
) -> List[str]:
    lines = ["Top Customers"]

    for idx, customer in enumerate(customers, 1):
        spend = format_currency(customer.total_spend or Decimal("0"), currency_symbol)
        lines.append(f"  {idx}. {customer.display_name}  {spend}")

    if not customers:
        lines.append("  No customer data available.")

    return lines


def format_segments(segments: CustomerSegments) -> List[str]:
    """Render customer segment counts with their share of all customers."""
    lines = ["Customer Segments"]
    total = segments.total

    for label, count in (
        ("New", segments.new),
        ("Returning", segments.returning),
        ("Inactive", segments.inactive),
    ):
        share = (count / total * 100) if total else 0.0
        lines.append(f"  {label + ':':<11}{count:,} ({share:.1f}%)")

    return lines


def format_overview(overview: DashboardOverview, currency_symbol: str = "$") -> str:
    lines = [f"Dashboard: {overview.tenant_name}", ""]
    lines.extend(format_stat_cards(overview.totals, currency_symbol))
    lines.append("")
    lines.extend(format_segments(overview.segments))
    lines.append("")
    lines.extend(format_top_customers(overview.totals.top_customers, currency_symbol))
    return "\n".join(lines)


def format_empty_state(state: EmptyState) -> str:
    return f"{state.title}\n\n{state.message}"


def format_dashboard(
    result: Union[DashboardOverview, EmptyState], currency_symbol: str = "$"
) -> str:
    """Render whatever the dashboard service returned."""
    if isinstance(result, EmptyState):
        return format_empty_state(result)
    return format_overview(result, currency_symbol)
