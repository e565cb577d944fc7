"""Dashboard overview service for the selected tenant."""

from dataclasses import dataclass
from typing import Optional, Union

from src.config.settings import Settings
from src.models.metrics import CustomerSegments, DashboardTotals
from src.models.tenant import Tenant
from src.services.metrics_service import compute_totals, segment_customers
from src.utils.logger import get_logger, new_render_context

logger = get_logger(__name__)

EMPTY_STATE_TITLE = "No store selected"
EMPTY_STATE_MESSAGE = (
    "Connect a Shopify store or pick one from the store list to see its "
    "revenue, orders and customers."
)


@dataclass(frozen=True)
class DashboardOverview:
    tenant_id: str
    tenant_name: str
    totals: DashboardTotals
    segments: CustomerSegments


@dataclass(frozen=True)
class EmptyState:
    """Placeholder shown when no tenant is available."""

    title: str = EMPTY_STATE_TITLE
    message: str = EMPTY_STATE_MESSAGE


class DashboardService:
    """Builds the overview page data for a tenant."""

    def __init__(self, settings: Settings, top_customers_limit: Optional[int] = None):
        """
        Initialize the dashboard service.

        Args:
            settings: Application settings
            top_customers_limit: Overrides the configured top customer limit
        """
        self.settings = settings
        self._top_customers_limit = top_customers_limit

    @property
    def top_customers_limit(self) -> int:
        if self._top_customers_limit is not None:
            return self._top_customers_limit
        return self.settings.dashboard.top_customers_limit

    def get_overview(
        self, tenant: Optional[Tenant]
    ) -> Union[DashboardOverview, EmptyState]:
        """
        Build the overview for the selected tenant.

        Args:
            tenant: The selected tenant snapshot, or None if no tenant is
                selected

        Returns:
            DashboardOverview with totals and segments, or EmptyState when
            there is no tenant.
        """
        new_render_context(tenant.id if tenant is not None else None)

        if tenant is None:
            logger.info("No tenant selected, rendering empty state")
            return EmptyState()

        totals = compute_totals(
            tenant.customers,
            tenant.orders,
            limit=self.top_customers_limit,
        )
        segments = segment_customers(tenant.customers, tenant.orders)

        logger.info(
            "Dashboard overview built",
            total_revenue=float(totals.total_revenue),
            order_count=totals.order_count,
            customer_count=totals.customer_count,
        )

        return DashboardOverview(
            tenant_id=tenant.id,
            tenant_name=tenant.name,
            totals=totals,
            segments=segments,
        )
