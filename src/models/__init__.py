"""Domain models for tenant snapshots and dashboard metrics."""

from src.models.metrics import CustomerSegments, DashboardTotals, RevenueMetrics
from src.models.tenant import Customer, Order, Tenant

__all__ = [
    "Customer",
    "CustomerSegments",
    "DashboardTotals",
    "Order",
    "RevenueMetrics",
    "Tenant",
]
