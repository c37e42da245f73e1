"""API routes."""

from wage_reports.api.routes.health import router as health_router
from wage_reports.api.routes.reports import router as reports_router

__all__ = ["health_router", "reports_router"]
