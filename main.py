"""
Tenant Metrics Dashboard - Main Entry Point

Loads a snapshot of tenant data (customers and orders per Shopify store),
selects a tenant and prints its dashboard overview: revenue, average order
value, order and customer counts, customer segments and top customers.
"""

import argparse
import json
import sys
from typing import List, Optional

from src.config.settings import settings
from src.services.dashboard_service import DashboardService, EmptyState
from src.services.tenant_service import TenantDataError, TenantDataService
from src.utils.formatters import format_dashboard
from src.utils.logger import setup_logging, get_logger


logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the dashboard overview for a tenant snapshot.",
    )
    parser.add_argument(
        "snapshot",
        nargs="?",
        default=settings.dashboard.snapshot_path or None,
        help="Path to the tenant snapshot JSON (default: $TENANT_SNAPSHOT_PATH)",
    )
    parser.add_argument(
        "--tenant",
        dest="tenant_id",
        help="Tenant id to display (default: first tenant)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Number of top customers to show",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the aggregate record as JSON instead of text",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)

    problems = settings.validate()
    if args.limit is not None and args.limit < 0:
        problems.append("--limit must not be negative")
    if problems:
        print(f"Invalid configuration: {'; '.join(problems)}", file=sys.stderr)
        return 1

    setup_logging(
        level=settings.logging.level,
        log_file=settings.logging.log_file or None,
    )

    if not args.snapshot:
        print("No snapshot given. Pass a path or set TENANT_SNAPSHOT_PATH.", file=sys.stderr)
        return 1

    try:
        tenant_service = TenantDataService.from_file(args.snapshot)
    except (OSError, TenantDataError) as e:
        logger.error("Failed to load tenant snapshot", path=args.snapshot, error=str(e))
        print(f"Could not load {args.snapshot}: {e}", file=sys.stderr)
        return 1

    tenant = tenant_service.select_tenant(args.tenant_id)
    overview = DashboardService(settings, args.limit).get_overview(tenant)

    if args.json:
        if isinstance(overview, EmptyState):
            payload = {"tenant": None, "emptyState": {"title": overview.title, "message": overview.message}}
        else:
            payload = {
                "tenant": {"id": overview.tenant_id, "name": overview.tenant_name},
                **overview.totals.to_dict(),
                "customerSegments": {
                    "new": overview.segments.new,
                    "returning": overview.segments.returning,
                    "inactive": overview.segments.inactive,
                },
            }
        print(json.dumps(payload, indent=2))
    else:
        print(format_dashboard(overview, settings.dashboard.currency_symbol))

    return 0


if __name__ == "__main__":
    sys.exit(main())
