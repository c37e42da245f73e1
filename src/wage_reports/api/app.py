"""FastAPI application factory."""

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wage_reports import __version__
from wage_reports.api.routes import health_router, reports_router
from wage_reports.config import get_settings
from wage_reports.database import dispose_db, init_db
from wage_reports.services.ledger_repository import fetch_salary_payments
from wage_reports.services.salary_payments import SalaryPaymentFeed

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup: salary payments load in the background
    init_db()
    feed: SalaryPaymentFeed = app.state.salary_payments
    task = asyncio.create_task(feed.load(fetch_salary_payments))
    yield
    # Shutdown
    if not task.done():
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task
    await dispose_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="Wage Reports API",
        description="Monthly wage reconciliation and payslip export",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.salary_payments = SalaryPaymentFeed(settings.salary_payments_collection)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(reports_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
