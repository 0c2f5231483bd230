"""Dependency injection for FastAPI."""

from fastapi import Depends

from investsim.config.settings import get_settings
from investsim.repositories.protocols import UnitOfWorkFactory
from investsim.repositories.sqlalchemy import SqlAlchemyUnitOfWork
from investsim.repositories.sqlalchemy.database import get_session_factory
from investsim.services import (
    PortfolioService,
    TradingService,
    BankingService,
    PriceUpdateService,
)


def get_uow_factory() -> UnitOfWorkFactory:
    """Provide a factory opening one unit of work per call."""
    session_factory = get_session_factory()
    return lambda: SqlAlchemyUnitOfWork(session_factory)


def get_portfolio_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(uow_factory, initial_funding=get_settings().initial_funding)


def get_trading_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> TradingService:
    """Provide TradingService instance."""
    return TradingService(uow_factory)


def get_banking_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> BankingService:
    """Provide BankingService instance."""
    return BankingService(uow_factory)


def get_price_update_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> PriceUpdateService:
    """Provide PriceUpdateService instance."""
    settings = get_settings()
    return PriceUpdateService(
        uow_factory,
        max_change=settings.price_walk_max_change,
        price_floor=settings.price_floor,
    )
