"""Portfolio service: account provisioning and portfolio reads."""

import logging
import uuid
from decimal import Decimal
from typing import Optional

from investsim.core.exceptions import NotFoundError
from investsim.core.timezone import now_eastern
from investsim.domain.models import Account, Holding, Transaction
from investsim.domain.views import PortfolioSummary
from investsim.providers import InstrumentPriceFeed, PriceFeedFactory
from investsim.repositories.protocols import LedgerUnitOfWork, UnitOfWorkFactory
from investsim.services.valuation import INITIAL_FUNDING, compute_portfolio_summary

logger = logging.getLogger(__name__)


def load_account(uow: LedgerUnitOfWork, user_id: str, for_update: bool = False) -> Account:
    """Read a user's account inside an open unit of work, or raise NotFoundError."""
    account = uow.accounts.get_by_user_id(user_id, for_update=for_update)
    if account is None:
        raise NotFoundError("Account", user_id)
    return account


def ensure_account(
    uow: LedgerUnitOfWork,
    user_id: str,
    initial_funding: Decimal = INITIAL_FUNDING,
) -> Account:
    """Return the user's account, creating it with the starting balance on first access."""
    account = uow.accounts.get_by_user_id(user_id)
    if account is not None:
        return account

    account = Account(
        account_id=str(uuid.uuid4()),
        user_id=user_id,
        portfolio_id=str(uuid.uuid4()),
        cash_balance=initial_funding,
        savings_balance=Decimal("0"),
        created_at_est=now_eastern(),
    )
    logger.info("Provisioned account for user %s with %s cash", user_id, initial_funding)
    return uow.accounts.create(account)


class PortfolioService:
    """
    Read-side service for a user's portfolio.

    Loads a consistent snapshot (account, holdings, instrument prices) in one
    unit of work and hands it to the valuation engine.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        initial_funding: Decimal = INITIAL_FUNDING,
        price_feed_factory: PriceFeedFactory = InstrumentPriceFeed,
    ):
        self._uow_factory = uow_factory
        self._initial_funding = initial_funding
        self._price_feed_factory = price_feed_factory

    def get_or_create_account(self, user_id: str) -> Account:
        """Get the user's account, provisioning it on first access."""
        with self._uow_factory() as uow:
            return ensure_account(uow, user_id, self._initial_funding)

    def get_account(self, user_id: str) -> Account:
        """Get the user's account; raises NotFoundError if never provisioned."""
        with self._uow_factory() as uow:
            return load_account(uow, user_id)

    def get_holdings(self, user_id: str) -> list[Holding]:
        """Current holdings, ordered by symbol."""
        with self._uow_factory() as uow:
            account = load_account(uow, user_id)
            return uow.holdings.list_by_portfolio(account.portfolio_id)

    def list_transactions(self, user_id: str, limit: Optional[int] = 50) -> list[Transaction]:
        """Trade history, newest first."""
        with self._uow_factory() as uow:
            account = load_account(uow, user_id)
            return uow.transactions.list_by_portfolio(account.portfolio_id, limit=limit)

    def get_summary(self, user_id: str) -> PortfolioSummary:
        """
        Value the user's portfolio at current instrument prices.

        Provisions the account on first access, like the dashboard does.
        """
        with self._uow_factory() as uow:
            account = ensure_account(uow, user_id, self._initial_funding)
            holdings = uow.holdings.list_by_portfolio(account.portfolio_id)
            price_feed = self._price_feed_factory(uow.instruments)
            prices = price_feed.get_prices([h.symbol for h in holdings])

        return compute_portfolio_summary(
            account,
            holdings,
            prices,
            initial_funding=self._initial_funding,
        )
