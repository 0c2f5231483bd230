"""FastAPI application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from investsim.config.settings import get_settings
from investsim.config.logging_config import setup_logging
from investsim.repositories.sqlalchemy.database import init_db
from investsim.api.deps import get_uow_factory
from investsim.api.routers import (
    portfolio_router,
    trades_router,
    bank_router,
    instruments_router,
)
from investsim.core.exceptions import AppError
from investsim.services import PriceUpdateService

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    "VALIDATION_ERROR": 400,
    "INSUFFICIENT_FUNDS": 400,
    "INSUFFICIENT_SHARES": 400,
    "INSUFFICIENT_BALANCE": 400,
    "NOT_FOUND": 404,
    "STORE_FAILURE": 503,
}


async def _run_price_updates(service: PriceUpdateService, interval_seconds: int) -> None:
    """Walk prices every interval until cancelled."""
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            await asyncio.to_thread(service.update_prices)
        except AppError as e:
            logger.error("Scheduled price update failed: %s", e.message)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    setup_logging()
    init_db()

    price_service = PriceUpdateService(
        get_uow_factory(),
        max_change=settings.price_walk_max_change,
        price_floor=settings.price_floor,
    )
    price_service.seed_instruments()

    task = None
    if settings.enable_price_updates:
        task = asyncio.create_task(
            _run_price_updates(price_service, settings.price_update_interval_seconds)
        )
        logger.info("Price updates every %ss", settings.price_update_interval_seconds)

    yield

    # Shutdown
    if task is not None:
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Educational investing simulator: virtual cash, trades, savings and fixed deposits",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(portfolio_router)
app.include_router(trades_router)
app.include_router(bank_router)
app.include_router(instruments_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(exc.code, 400),
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
