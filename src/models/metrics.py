"""Derived dashboard figures produced by the metrics service."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Tuple

from src.models.tenant import Customer


@dataclass(frozen=True)
class RevenueMetrics:
    total_revenue: Decimal
    average_order_value: Decimal
    order_count: int


@dataclass(frozen=True)
class CustomerSegments:
    """Customer counts by number of attributed orders."""

    new: int = 0
    returning: int = 0
    inactive: int = 0

    @property
    def total(self) -> int:
        return self.new + self.returning + self.inactive


@dataclass(frozen=True)
class DashboardTotals:
    """The full aggregate record consumed by the dashboard."""

    total_revenue: Decimal
    average_order_value: Decimal
    order_count: int
    customer_count: int
    top_customers: Tuple[Customer, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain, JSON-serialisable record.

        Decimal amounts become floats here, at the edge, so that all
        accumulation upstream stays exact.
        """
        return {
            "totalRevenue": float(self.total_revenue),
            "averageOrderValue": float(self.average_order_value),
            "orderCount": self.order_count,
            "customerCount": self.customer_count,
            "topCustomers": [
                {
                    "id": customer.id,
                    "name": customer.display_name,
                    "email": customer.email,
                    "totalSpend": float(customer.total_spend or 0),
                }
                for customer in self.top_customers
            ],
        }
