"""Trading service: runs buy/sell against the ledger store as one unit of work."""

import logging

from investsim.core.exceptions import AppError, NotFoundError, ValidationError
from investsim.core.money import Number
from investsim.domain.views import TradeResult
from investsim.providers import InstrumentPriceFeed, PriceFeedFactory
from investsim.repositories.protocols import LedgerUnitOfWork, UnitOfWorkFactory
from investsim.services.portfolio_service import load_account
from investsim.services.trade_executor import execute_buy, execute_sell, normalize_symbol

logger = logging.getLogger(__name__)


class TradingService:
    """
    Executes trades at the instrument's current price.

    Each call opens one unit of work, locks and re-reads the account,
    reads holdings and the current price, applies the pure trade executor
    and writes the balance, the holding change and the trade log entry
    together. Any failure leaves all three untouched.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        price_feed_factory: PriceFeedFactory = InstrumentPriceFeed,
    ):
        self._uow_factory = uow_factory
        self._price_feed_factory = price_feed_factory

    def buy(self, user_id: str, symbol: str, shares: Number) -> TradeResult:
        """
        Buy shares of a symbol for a user.

        Raises:
            NotFoundError: unknown account or instrument
            ValidationError: bad quantity or inactive instrument
            InsufficientFundsError: cash does not cover the purchase
        """
        symbol = normalize_symbol(symbol)
        try:
            with self._uow_factory() as uow:
                account = load_account(uow, user_id, for_update=True)
                company_name = self._require_tradable(uow, symbol)
                quote = self._price_feed_factory(uow.instruments).get_current_price(symbol)
                holdings = uow.holdings.list_by_portfolio(account.portfolio_id)

                result = execute_buy(
                    account,
                    holdings,
                    symbol,
                    company_name,
                    shares,
                    quote.price,
                )
                self._persist(uow, result)
        except AppError as e:
            logger.warning("Buy rejected for %s %s x%s: %s", user_id, symbol, shares, e.message)
            raise

        logger.info(
            "BUY %s %s @ %s (total %s) for %s",
            result.transaction.shares,
            symbol,
            result.transaction.price,
            result.transaction.total,
            user_id,
        )
        return result

    def sell(self, user_id: str, symbol: str, shares: Number) -> TradeResult:
        """
        Sell shares of a symbol for a user.

        Raises:
            NotFoundError: unknown account or instrument
            ValidationError: bad quantity or inactive instrument
            InsufficientSharesError: position absent or too small
        """
        symbol = normalize_symbol(symbol)
        try:
            with self._uow_factory() as uow:
                account = load_account(uow, user_id, for_update=True)
                self._require_tradable(uow, symbol)
                quote = self._price_feed_factory(uow.instruments).get_current_price(symbol)
                holdings = uow.holdings.list_by_portfolio(account.portfolio_id)

                result = execute_sell(account, holdings, symbol, shares, quote.price)
                self._persist(uow, result)
        except AppError as e:
            logger.warning("Sell rejected for %s %s x%s: %s", user_id, symbol, shares, e.message)
            raise

        logger.info(
            "SELL %s %s @ %s (total %s) for %s",
            result.transaction.shares,
            symbol,
            result.transaction.price,
            result.transaction.total,
            user_id,
        )
        return result

    @staticmethod
    def _require_tradable(uow: LedgerUnitOfWork, symbol: str) -> str:
        """Return the instrument's name if it exists and is active."""
        instrument = uow.instruments.get(symbol)
        if instrument is None:
            raise NotFoundError("Instrument", symbol)
        if not instrument.is_active:
            raise ValidationError(f"{symbol} is not currently tradable")
        return instrument.name

    @staticmethod
    def _persist(uow: LedgerUnitOfWork, result: TradeResult) -> None:
        uow.accounts.update(result.account)
        if result.holding is not None:
            uow.holdings.upsert(result.holding)
        if result.removed_holding_id is not None:
            uow.holdings.delete(result.removed_holding_id)
        uow.transactions.append(result.transaction)
