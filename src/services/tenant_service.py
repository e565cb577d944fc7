"""Tenant data ingestion: raw tenant payloads to validated snapshots."""

import json
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from src.models.tenant import Customer, Order, Tenant
from src.utils.logger import get_logger

logger = get_logger(__name__)

_CUSTOMER_FIELDS = {"id", "first_name", "firstName", "last_name", "lastName", "email"}


class TenantDataError(ValueError):
    """Raised when a tenant payload cannot be turned into a snapshot."""


def _first(payload: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def _require_id(payload: Dict[str, Any], kind: str) -> str:
    value = payload.get("id")
    if value is None or value == "":
        raise TenantDataError(f"{kind} is missing an id")
    return str(value)


def _parse_price(value: Any, order_id: str) -> Decimal:
    if value is None:
        raise TenantDataError(f"Order {order_id} has no total price")
    if isinstance(value, bool):
        raise TenantDataError(f"Order {order_id} has a non-numeric total price: {value!r}")
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        raise TenantDataError(
            f"Order {order_id} has a non-numeric total price: {value!r}"
        ) from None
    if not price.is_finite():
        raise TenantDataError(f"Order {order_id} has a non-numeric total price: {value!r}")
    if price < 0:
        raise TenantDataError(f"Order {order_id} has a negative total price: {value}")
    return price


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        raise TenantDataError(f"Invalid timestamp: {value!r}") from None


def parse_order(payload: Dict[str, Any]) -> Order:
    """
    Build an Order from a Shopify-shaped order dictionary.

    Accepts snake_case and camelCase keys. The customer reference may be a
    nested ``customer`` object or a flat ``customer_id``.

    Raises:
        TenantDataError: If the id is missing or the price is not a
            non-negative number
    """
    order_id = _require_id(payload, "Order")

    customer = payload.get("customer")
    customer_ref = customer.get("id") if isinstance(customer, dict) else None
    if customer_ref is None:
        customer_ref = _first(payload, "customer_id", "customerId")

    return Order(
        id=order_id,
        total_price=_parse_price(_first(payload, "total_price", "totalPrice"), order_id),
        customer_id=str(customer_ref) if customer_ref is not None else None,
        currency=payload.get("currency") or "USD",
        created_at=_parse_timestamp(_first(payload, "created_at", "createdAt")),
    )


def parse_customer(payload: Dict[str, Any]) -> Customer:
    """Build a Customer from a Shopify-shaped customer dictionary."""
    return Customer(
        id=_require_id(payload, "Customer"),
        first_name=_first(payload, "first_name", "firstName"),
        last_name=_first(payload, "last_name", "lastName"),
        email=payload.get("email"),
        attributes={k: v for k, v in payload.items() if k not in _CUSTOMER_FIELDS},
    )


def parse_tenant(payload: Dict[str, Any]) -> Tenant:
    """
    Build a Tenant snapshot from a tenant dictionary.

    Args:
        payload: Dictionary with ``id``, a name (``name``/``shop_domain``)
            and optional ``customers`` and ``orders`` lists

    Returns:
        Frozen Tenant snapshot

    Raises:
        TenantDataError: If the tenant or any of its records is malformed
    """
    if not isinstance(payload, dict):
        raise TenantDataError("Tenant payload must be an object")

    tenant_id = _require_id(payload, "Tenant")
    try:
        customers = tuple(parse_customer(c) for c in payload.get("customers") or [])
        orders = tuple(parse_order(o) for o in payload.get("orders") or [])
    except (TenantDataError, TypeError, AttributeError) as e:
        logger.error(
            "Failed to parse tenant payload",
            tenant_id=tenant_id,
            error=str(e),
        )
        raise TenantDataError(f"Tenant {tenant_id}: {e}") from e

    name = _first(payload, "name", "shop_domain", "shopDomain") or tenant_id
    return Tenant(id=tenant_id, name=str(name), customers=customers, orders=orders)


class TenantDataService:
    """Holds the tenant snapshots supplied for one dashboard request."""

    def __init__(self, tenants: Sequence[Tenant]):
        """
        Initialize the tenant data service.

        Args:
            tenants: Parsed tenant snapshots, in display order
        """
        self._tenants = tuple(tenants)

    @classmethod
    def from_payload(cls, payload: Union[List[Dict[str, Any]], Dict[str, Any]]) -> "TenantDataService":
        """Create the service from a list of tenants or ``{"tenants": [...]}``."""
        if isinstance(payload, dict):
            payload = payload.get("tenants", [])
        if not isinstance(payload, list):
            raise TenantDataError("Tenant payload must be a list of tenants")

        tenants = [parse_tenant(item) for item in payload]
        logger.info("Tenant snapshots loaded", tenant_count=len(tenants))
        return cls(tenants)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TenantDataService":
        """
        Load tenant snapshots from a JSON file.

        Raises:
            OSError: If the file cannot be read
            TenantDataError: If the content is not valid tenant JSON
        """
        path = Path(path)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Invalid tenant snapshot file", path=str(path), error=str(e))
            raise TenantDataError(f"{path} is not valid UTF-8 JSON: {e}") from e
        return cls.from_payload(payload)

    def list_tenants(self) -> List[Tenant]:
        return list(self._tenants)

    def select_tenant(self, tenant_id: Optional[str] = None) -> Optional[Tenant]:
        """
        Select the tenant to display.

        Without an id the first tenant is selected. Returns None when there
        are no tenants or none has the given id.
        """
        if tenant_id is None:
            return self._tenants[0] if self._tenants else None

        for tenant in self._tenants:
            if tenant.id == str(tenant_id):
                return tenant

        logger.warning("Tenant not found", tenant_id=tenant_id)
        return None
