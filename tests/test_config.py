"""Tests for settings."""

from src.config.settings import Settings


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self, test_settings):
        assert test_settings.dashboard.top_customers_limit == 5
        assert test_settings.dashboard.currency_symbol == "$"
        assert test_settings.logging.level == "INFO"
        assert test_settings.validate() == []

    def test_environment_overrides(self, test_settings, monkeypatch):
        monkeypatch.setenv("DASHBOARD_TOP_CUSTOMERS_LIMIT", "10")
        monkeypatch.setenv("DASHBOARD_CURRENCY_SYMBOL", "£")
        monkeypatch.setenv("TENANT_SNAPSHOT_PATH", "/tmp/tenants.json")

        settings = Settings()

        assert settings.dashboard.top_customers_limit == 10
        assert settings.dashboard.currency_symbol == "£"
        assert settings.dashboard.snapshot_path == "/tmp/tenants.json"

    def test_invalid_limit(self, test_settings, monkeypatch):
        monkeypatch.setenv("DASHBOARD_TOP_CUSTOMERS_LIMIT", "many")

        problems = Settings().validate()

        assert any("must be an integer" in p for p in problems)

    def test_negative_limit(self, test_settings, monkeypatch):
        monkeypatch.setenv("DASHBOARD_TOP_CUSTOMERS_LIMIT", "-2")

        assert any("negative" in p for p in Settings().validate())

    def test_invalid_log_level(self, test_settings, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        assert any("LOG_LEVEL" in p for p in Settings().validate())
