"""
Structured logging built on structlog.

Log lines are rendered as JSON. Every line emitted while a dashboard
overview is built carries the render's correlation ID (and tenant ID, when
one is selected), and values that look like Shopify credentials or
customer email addresses are masked before rendering.
"""

import logging
import re
import sys
import uuid
from pathlib import Path
from typing import Optional

import structlog

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

REDACTED = "[REDACTED]"

_SENSITIVE_PATTERNS = [
    re.compile(r"shpat_[A-Za-z0-9]+"),        # Shopify access tokens
    re.compile(r"shpss_[A-Za-z0-9]+"),        # Shopify shared secrets
    re.compile(r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}"),  # Emails
]

_SENSITIVE_KEYS = {
    "access_token", "api_key", "token", "secret", "password",
    "authorization", "cookie", "email",
}


def _mask(value: str) -> str:
    for pattern in _SENSITIVE_PATTERNS:
        value = pattern.sub(REDACTED, value)
    return value


def redact_sensitive(logger, method_name, event_dict):
    """Structlog processor masking credential keys and sensitive string values."""
    for key, value in event_dict.items():
        if key.lower() in _SENSITIVE_KEYS:
            event_dict[key] = REDACTED
        elif isinstance(value, str):
            event_dict[key] = _mask(value)
    return event_dict


def new_render_context(tenant_id: Optional[str] = None) -> str:
    """Start the logging context for one dashboard render.

    Clears whatever the previous render bound and binds a fresh
    correlation ID, plus the tenant ID when given.

    Returns:
        The generated correlation ID (8-char hex).
    """
    cid = uuid.uuid4().hex[:8]
    structlog.contextvars.clear_contextvars()
    context = {"correlation_id": cid}
    if tenant_id is not None:
        context["tenant_id"] = tenant_id
    structlog.contextvars.bind_contextvars(**context)
    return cid


def _file_handler(log_file: str, level: str) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(level)
    # Lines are already rendered JSON
    handler.setFormatter(logging.Formatter("%(message)s"))
    log_path.chmod(0o600)
    return handler


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure structured logging to stderr and, optionally, a file.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a file that receives the same JSON lines

    Raises:
        ValueError: If level is not a valid logging level.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LEVELS:
        raise ValueError(f"Invalid logging level: {level}")

    # stdout is reserved for the dashboard output itself
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level_upper)
    if log_file:
        logging.getLogger().addHandler(_file_handler(log_file, level_upper))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            redact_sensitive,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ from the calling module.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Dashboard overview built", order_count=3)
    """
    return structlog.get_logger(name)
