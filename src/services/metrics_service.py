"""
Tenant metrics aggregation.

Pure functions that turn a tenant's orders and customers into the figures
the dashboard displays: revenue, average order value, per-customer spend
and the top-customer ranking. Nothing here performs I/O or mutates the
snapshot it is given.
"""

from collections import defaultdict
from dataclasses import replace
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from src.models.metrics import CustomerSegments, DashboardTotals, RevenueMetrics
from src.models.tenant import Customer, Order
from src.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TOP_CUSTOMERS_LIMIT = 5

ZERO = Decimal("0")


def compute_revenue_metrics(orders: Sequence[Order]) -> RevenueMetrics:
    """
    Compute revenue figures for a sequence of orders.

    Args:
        orders: Orders of a single tenant (order is irrelevant)

    Returns:
        RevenueMetrics with the exact Decimal sum of order totals, the
        average order value (0 when there are no orders) and the order count.
        Amounts are not converted between currencies; a warning is logged
        when the orders mix them.
    """
    currencies = {order.currency for order in orders}
    if len(currencies) > 1:
        logger.warning(
            "Orders span multiple currencies, revenue is summed as-is",
            currencies=sorted(currencies),
            order_count=len(orders),
        )

    total_revenue = sum((order.total_price for order in orders), ZERO)
    order_count = len(orders)
    aov = total_revenue / order_count if order_count > 0 else ZERO

    return RevenueMetrics(
        total_revenue=total_revenue,
        average_order_value=aov,
        order_count=order_count,
    )


def _spend_by_customer(orders: Iterable[Order]) -> Dict[str, Decimal]:
    spend: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for order in orders:
        if order.customer_id is not None:
            spend[order.customer_id] += order.total_price
    return spend


def attribute_spend_to_customers(
    customers: Sequence[Customer],
    orders: Sequence[Order],
) -> List[Customer]:
    """
    Attach ``total_spend`` to a copy of every customer.

    Orders are grouped by customer id in one pass and then joined onto the
    customers, so the cost is O(customers + orders). Orders referencing an
    unknown customer are ignored here; they still count toward revenue.

    Args:
        customers: Customers of the tenant
        orders: Orders of the tenant

    Returns:
        New Customer records in input order, each with ``total_spend`` set
        (0 for customers without orders). The inputs are left untouched.
    """
    spend = _spend_by_customer(orders)
    return [
        replace(customer, total_spend=spend.get(customer.id, ZERO))
        for customer in customers
    ]


def rank_top_customers(
    customers_with_spend: Sequence[Customer],
    limit: int = DEFAULT_TOP_CUSTOMERS_LIMIT,
) -> List[Customer]:
    """
    Rank customers by total spend, highest first.

    The sort is stable, so customers with equal spend keep their input
    order. Missing spend compares as 0. The result is truncated to
    ``limit`` entries and never padded.

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    ranked = sorted(
        customers_with_spend,
        key=lambda customer: customer.total_spend or ZERO,
        reverse=True,
    )
    return ranked[:limit]


def segment_customers(
    customers: Sequence[Customer],
    orders: Sequence[Order],
) -> CustomerSegments:
    """Count new (one order), returning (2+) and inactive (no orders) customers."""
    order_counts: Dict[str, int] = defaultdict(int)
    for order in orders:
        if order.customer_id is not None:
            order_counts[order.customer_id] += 1

    new = returning = inactive = 0
    for customer in customers:
        count = order_counts.get(customer.id, 0)
        if count == 0:
            inactive += 1
        elif count == 1:
            new += 1
        else:
            returning += 1

    return CustomerSegments(new=new, returning=returning, inactive=inactive)


def compute_totals(
    customers: Sequence[Customer],
    orders: Sequence[Order],
    limit: int = DEFAULT_TOP_CUSTOMERS_LIMIT,
) -> DashboardTotals:
    """
    Compute the full dashboard payload for one tenant snapshot.

    Args:
        customers: Customers of the tenant
        orders: Orders of the tenant
        limit: Number of top customers to return (default: 5)

    Returns:
        DashboardTotals with revenue, AOV, order and customer counts and
        the top customers by spend.
    """
    revenue = compute_revenue_metrics(orders)
    customers_with_spend = attribute_spend_to_customers(customers, orders)
    top_customers = rank_top_customers(customers_with_spend, limit)

    logger.debug(
        "Tenant totals computed",
        total_revenue=str(revenue.total_revenue),
        order_count=revenue.order_count,
        customer_count=len(customers),
        top_customers_count=len(top_customers),
    )

    return DashboardTotals(
        total_revenue=revenue.total_revenue,
        average_order_value=revenue.average_order_value,
        order_count=revenue.order_count,
        customer_count=len(customers),
        top_customers=tuple(top_customers),
    )
