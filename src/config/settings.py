"""
Configuration management for the tenant metrics dashboard.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root
PROJECT_ROOT = Path(__file__).parent.parent.parent
load_dotenv(PROJECT_ROOT / ".env")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DashboardConfig:
    top_customers_limit: int = 5
    currency_symbol: str = "$"
    snapshot_path: str = ""
    errors: list = field(default_factory=list, repr=False)

    def __post_init__(self):
        limit_str = os.getenv("DASHBOARD_TOP_CUSTOMERS_LIMIT", "")
        if limit_str:
            try:
                self.top_customers_limit = int(limit_str)
            except ValueError:
                self.errors.append(
                    f"DASHBOARD_TOP_CUSTOMERS_LIMIT must be an integer, got {limit_str!r}"
                )
        self.currency_symbol = os.getenv("DASHBOARD_CURRENCY_SYMBOL", self.currency_symbol)
        self.snapshot_path = os.getenv("TENANT_SNAPSHOT_PATH", self.snapshot_path)


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_file: str = ""

    def __post_init__(self):
        self.level = os.getenv("LOG_LEVEL", self.level)
        self.log_file = os.getenv("LOG_FILE", self.log_file)


@dataclass
class Settings:
    dashboard: DashboardConfig = field(default_factory=DashboardConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> list[str]:
        """Validate configuration. Returns list of problems."""
        problems = list(self.dashboard.errors)
        if self.dashboard.top_customers_limit < 0:
            problems.append("DASHBOARD_TOP_CUSTOMERS_LIMIT must not be negative")
        if self.logging.level.upper() not in _LOG_LEVELS:
            problems.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return problems


# Global settings singleton
settings = Settings()
