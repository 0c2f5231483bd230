"""
Pytest configuration and fixtures for investing simulator tests.

This module provides:
- In-memory SQLite database fixtures
- Unit of work and service fixtures
- A small deterministic instrument catalog
- Time helpers for Eastern timezone
- FastAPI test client wired to the test database
"""

import random
from datetime import datetime
from decimal import Decimal
from typing import Callable

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from investsim.api.main import app
from investsim.api.deps import get_uow_factory
from investsim.repositories.sqlalchemy.database import Base, create_db_engine, reset_database
# Import ORM models to register them with Base before creating tables
from investsim.repositories.sqlalchemy import orm_models  # noqa: F401
from investsim.repositories.sqlalchemy import SqlAlchemyUnitOfWork
from investsim.domain.models import Account, Instrument
from investsim.services import (
    PortfolioService,
    TradingService,
    BankingService,
    PriceUpdateService,
)
from investsim.core.timezone import EASTERN_TZ
from investsim.config.settings import Settings, set_settings, reset_settings


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return eastern_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_db_engine("sqlite:///:memory:", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine) -> sessionmaker:
    """Session factory bound to the test engine."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=test_engine,
    )


@pytest.fixture
def uow_factory(test_session_factory) -> Callable[[], SqlAlchemyUnitOfWork]:
    """Factory opening a unit of work on the test database."""
    return lambda: SqlAlchemyUnitOfWork(test_session_factory)


# =============================================================================
# INSTRUMENT FIXTURES
# =============================================================================


def make_instruments() -> list[Instrument]:
    """Deterministic catalog: round prices and one delisted symbol."""
    return [
        Instrument(symbol="AAPL", name="Apple Inc.", current_price=Decimal("150.00")),
        Instrument(symbol="MSFT", name="Microsoft Corporation", current_price=Decimal("300.00")),
        Instrument(symbol="TSLA", name="Tesla, Inc.", current_price=Decimal("200.00")),
        Instrument(symbol="OLDCO", name="Delisted Co.", current_price=Decimal("10.00"), is_active=False),
    ]


@pytest.fixture
def seeded_instruments(uow_factory) -> list[Instrument]:
    """Load the deterministic catalog into the test database."""
    instruments = make_instruments()
    PriceUpdateService(uow_factory).seed_instruments(instruments)
    return instruments


@pytest.fixture
def set_price(uow_factory) -> Callable[[str, str], None]:
    """Set an instrument's current price directly in the store."""

    def _set_price(symbol: str, price: str) -> None:
        with uow_factory() as uow:
            instrument = uow.instruments.get(symbol)
            instrument.current_price = Decimal(price)
            uow.instruments.update_price(instrument)

    return _set_price


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def portfolio_service(uow_factory) -> PortfolioService:
    """Provide test PortfolioService."""
    return PortfolioService(uow_factory)


@pytest.fixture
def trading_service(uow_factory, seeded_instruments) -> TradingService:
    """Provide test TradingService with the instrument catalog loaded."""
    return TradingService(uow_factory)


@pytest.fixture
def banking_service(uow_factory) -> BankingService:
    """Provide test BankingService."""
    return BankingService(uow_factory)


@pytest.fixture
def price_update_service(uow_factory) -> PriceUpdateService:
    """Provide PriceUpdateService with a seeded random generator."""
    return PriceUpdateService(uow_factory, rng=random.Random(42))


# =============================================================================
# PRESET DATA FIXTURES
# =============================================================================


@pytest.fixture
def funded_account(portfolio_service) -> Account:
    """An account provisioned with the default $10,000 cash."""
    return portfolio_service.get_or_create_account("alice")


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(uow_factory, seeded_instruments) -> TestClient:
    """Provide FastAPI test client with test database."""
    # Keep app startup off the user's data directory
    set_settings(Settings(database_url="sqlite://", enable_price_updates=False))
    reset_database()

    app.dependency_overrides[get_uow_factory] = lambda: uow_factory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def make_account(
    cash: str = "10000.00",
    savings: str = "0",
    user_id: str = "alice",
) -> Account:
    """Build an in-memory account snapshot for executor tests."""
    return Account(
        account_id="acct-1",
        user_id=user_id,
        portfolio_id="pf-1",
        cash_balance=Decimal(cash),
        savings_balance=Decimal(savings),
    )
