"""Tests for the structured logging utilities."""

import pytest
import structlog

from src.services.dashboard_service import DashboardService
from src.utils.logger import REDACTED, new_render_context, redact_sensitive, setup_logging


@pytest.fixture(autouse=True)
def clean_log_context():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


class TestRedaction:
    """Test suite for the redaction processor."""

    def test_redacts_sensitive_keys(self):
        event = redact_sensitive(None, "info", {"event": "x", "access_token": "abc", "email": "a@b.co"})

        assert event["access_token"] == REDACTED
        assert event["email"] == REDACTED

    def test_redacts_sensitive_values(self):
        event = redact_sensitive(
            None,
            "info",
            {"event": "Loaded customer ada@example.com", "error": "bad token shpat_abc123"},
        )

        assert event["event"] == f"Loaded customer {REDACTED}"
        assert "shpat_abc123" not in event["error"]

    def test_leaves_other_values(self):
        event = redact_sensitive(None, "info", {"event": "ok", "order_count": 3})

        assert event == {"event": "ok", "order_count": 3}


class TestRenderContext:
    """Test suite for per-render log context."""

    def test_binds_correlation_and_tenant(self):
        cid = new_render_context("tenant-1")

        context = structlog.contextvars.get_contextvars()
        assert len(cid) == 8
        assert context == {"correlation_id": cid, "tenant_id": "tenant-1"}

    def test_new_render_replaces_previous_context(self):
        new_render_context("tenant-1")
        cid = new_render_context()

        assert structlog.contextvars.get_contextvars() == {"correlation_id": cid}

    def test_dashboard_binds_tenant(self, test_settings, sample_tenant):
        DashboardService(test_settings).get_overview(sample_tenant)

        assert structlog.contextvars.get_contextvars()["tenant_id"] == "tenant-1"


class TestSetupLogging:
    """Test suite for setup_logging."""

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            setup_logging(level="LOUD")
