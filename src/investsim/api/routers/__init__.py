"""API routers package."""

from investsim.api.routers.portfolio import router as portfolio_router
from investsim.api.routers.trades import router as trades_router
from investsim.api.routers.bank import router as bank_router
from investsim.api.routers.instruments import router as instruments_router

__all__ = [
    "portfolio_router",
    "trades_router",
    "bank_router",
    "instruments_router",
]
