"""Pytest configuration and shared fixtures for tenant dashboard tests."""

import json

import pytest

from src.config.settings import Settings
from src.services.tenant_service import parse_tenant


@pytest.fixture
def sample_tenant_payload():
    """Return a Shopify-shaped tenant payload.

    Three customers (A, B, C) and three orders: A spends 100 + 25,
    B spends 50, C has no orders.
    """
    return {
        "id": "tenant-1",
        "name": "test-shop.myshopify.com",
        "customers": [
            {"id": "A", "firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com"},
            {"id": "B", "firstName": "Bob", "lastName": "Builder", "email": "bob@example.com"},
            {"id": "C", "firstName": "Cy", "email": "cy@example.com", "tags": "wholesale"},
        ],
        "orders": [
            {"id": 1001, "totalPrice": "100.00", "customer": {"id": "A"}, "currency": "USD"},
            {"id": 1002, "totalPrice": "50.00", "customer": {"id": "B"}, "currency": "USD"},
            {"id": 1003, "totalPrice": "25.00", "customer": {"id": "A"}, "currency": "USD"},
        ],
    }


@pytest.fixture
def sample_tenant(sample_tenant_payload):
    """Return the sample payload parsed into a Tenant snapshot."""
    return parse_tenant(sample_tenant_payload)


@pytest.fixture
def empty_tenant():
    return parse_tenant({"id": "tenant-empty", "name": "empty-shop.myshopify.com"})


@pytest.fixture
def snapshot_file(tmp_path, sample_tenant_payload):
    """Write a two-tenant snapshot file and return its path."""
    path = tmp_path / "tenants.json"
    payload = {
        "tenants": [
            sample_tenant_payload,
            {"id": "tenant-2", "name": "other-shop.myshopify.com"},
        ]
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def test_settings(monkeypatch):
    """Settings built from a clean environment."""
    for var in (
        "DASHBOARD_TOP_CUSTOMERS_LIMIT",
        "DASHBOARD_CURRENCY_SYMBOL",
        "TENANT_SNAPSHOT_PATH",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    return Settings()
