"""
Tenant snapshot models.

A tenant is a single Shopify store using the dashboard. For one render pass
the tenant data service hands over a read-only snapshot of the store's
customers and orders; these frozen dataclasses are that snapshot.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Order:
    """A single order of a tenant."""

    id: str
    total_price: Decimal
    customer_id: Optional[str] = None
    currency: str = "USD"
    created_at: Optional[datetime] = None

    @property
    def has_customer(self) -> bool:
        return self.customer_id is not None


@dataclass(frozen=True)
class Customer:
    """
    A customer of a tenant.

    ``total_spend`` is derived data. It is None on the canonical record and
    only set on the copies returned by the metrics service.
    """

    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    attributes: Mapping[str, Any] = field(default_factory=dict)
    total_spend: Optional[Decimal] = None

    @property
    def display_name(self) -> str:
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or self.email or self.id


@dataclass(frozen=True)
class Tenant:
    """A tenant (Shopify store) with its customers and orders."""

    id: str
    name: str
    customers: Tuple[Customer, ...] = ()
    orders: Tuple[Order, ...] = ()
