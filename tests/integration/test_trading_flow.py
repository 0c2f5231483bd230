"""
Integration tests for trading, banking and portfolio services on SQLite.

Tests cover:
- Account provisioning with initial funding
- Buy/sell through the store at the instrument's current price
- Atomic rollback when a write fails mid-operation
- Transfers, fixed deposits and maturity payouts
- Portfolio valuation after trades and price moves
- Injected price feeds for trading and valuation
"""

import pytest
from decimal import Decimal

from sqlalchemy.exc import OperationalError

from investsim.core.exceptions import (
    NotFoundError,
    StoreError,
    ValidationError,
    InsufficientFundsError,
    InsufficientSharesError,
    InsufficientBalanceError,
)
from investsim.domain.models import TransactionType, TransferType, DepositStatus
from investsim.repositories.sqlalchemy import SqlAlchemyTransactionRepository
from investsim.domain.views import PriceQuote
from investsim.services import PortfolioService, TradingService
from tests.conftest import eastern_datetime


class FixedPriceFeed:
    """Price feed quoting every symbol at one price."""

    def __init__(self, price: str):
        self.price = Decimal(price)

    def get_current_price(self, symbol: str) -> PriceQuote:
        return PriceQuote(symbol=symbol, price=self.price)

    def get_prices(self, symbols: list[str]) -> dict[str, PriceQuote]:
        return {symbol: self.get_current_price(symbol) for symbol in symbols}


# =============================================================================
# PROVISIONING TESTS
# =============================================================================


class TestAccountProvisioning:

    def test_first_access_creates_funded_account(self, portfolio_service):
        """
        GIVEN a user with no account
        WHEN the portfolio summary is requested
        THEN an account with $10,000 cash is created
        """
        summary = portfolio_service.get_summary("new-user")

        assert summary.cash_balance == Decimal("10000.00")
        assert summary.total_value == Decimal("10000.00")
        assert portfolio_service.get_account("new-user").cash_balance == Decimal("10000.00")

    def test_get_or_create_is_idempotent(self, portfolio_service):
        first = portfolio_service.get_or_create_account("alice")
        second = portfolio_service.get_or_create_account("alice")

        assert first.account_id == second.account_id
        assert first.portfolio_id != first.account_id

    def test_unknown_account_reads_raise(self, portfolio_service):
        with pytest.raises(NotFoundError):
            portfolio_service.get_holdings("ghost")
        with pytest.raises(NotFoundError):
            portfolio_service.list_transactions("ghost")


# =============================================================================
# TRADING TESTS
# =============================================================================


class TestTrading:

    def test_buy_persists_all_three_writes(self, trading_service, portfolio_service, funded_account):
        """
        GIVEN alice with $10,000 and AAPL at $150
        WHEN she buys 10 AAPL
        THEN cash, holding and trade log are all stored
        """
        result = trading_service.buy("alice", "aapl", "10")

        assert result.transaction.price == Decimal("150.00")
        assert result.transaction.total == Decimal("1500.00")

        account = portfolio_service.get_account("alice")
        holdings = portfolio_service.get_holdings("alice")
        txns = portfolio_service.list_transactions("alice")

        assert account.cash_balance == Decimal("8500.00")
        assert len(holdings) == 1
        assert holdings[0].symbol == "AAPL"
        assert holdings[0].shares == Decimal("10")
        assert holdings[0].company_name == "Apple Inc."
        assert len(txns) == 1
        assert txns[0].txn_type == TransactionType.BUY

    def test_buy_at_new_price_reaverages(self, trading_service, portfolio_service, funded_account, set_price):
        trading_service.buy("alice", "AAPL", "10")
        set_price("AAPL", "180.00")
        trading_service.buy("alice", "AAPL", "5")

        holding = portfolio_service.get_holdings("alice")[0]
        assert holding.shares == Decimal("15")
        assert holding.avg_price == Decimal("160")
        assert holding.current_price == Decimal("180")

    def test_sell_all_removes_holding(self, trading_service, portfolio_service, funded_account, set_price):
        trading_service.buy("alice", "MSFT", "2")
        set_price("MSFT", "310.00")
        result = trading_service.sell("alice", "MSFT", "2")

        assert result.holding is None
        assert portfolio_service.get_holdings("alice") == []
        assert portfolio_service.get_account("alice").cash_balance == Decimal("10020.00")
        assert [t.txn_type for t in portfolio_service.list_transactions("alice")] == [
            TransactionType.SELL,
            TransactionType.BUY,
        ]

    def test_insufficient_funds_leaves_store_untouched(self, trading_service, portfolio_service, funded_account):
        with pytest.raises(InsufficientFundsError):
            trading_service.buy("alice", "MSFT", "100")

        assert portfolio_service.get_account("alice").cash_balance == Decimal("10000.00")
        assert portfolio_service.get_holdings("alice") == []
        assert portfolio_service.list_transactions("alice") == []

    def test_sell_unheld(self, trading_service, funded_account):
        with pytest.raises(InsufficientSharesError):
            trading_service.sell("alice", "TSLA", "1")

    def test_unknown_symbol(self, trading_service, funded_account):
        with pytest.raises(NotFoundError):
            trading_service.buy("alice", "NOPE", "1")

    def test_inactive_symbol(self, trading_service, funded_account):
        with pytest.raises(ValidationError):
            trading_service.buy("alice", "OLDCO", "1")

    def test_unknown_account(self, trading_service):
        with pytest.raises(NotFoundError):
            trading_service.buy("ghost", "AAPL", "1")

    def test_failed_log_write_rolls_back_balance_and_holding(
        self,
        trading_service,
        portfolio_service,
        funded_account,
        monkeypatch,
    ):
        """
        GIVEN a store that fails when appending to the trade log
        WHEN alice buys AAPL
        THEN StoreError is raised and neither cash nor holdings change
        """
        def failing_append(self, transaction):
            raise OperationalError("INSERT INTO transactions", {}, Exception("disk I/O error"))

        monkeypatch.setattr(SqlAlchemyTransactionRepository, "append", failing_append)

        with pytest.raises(StoreError) as exc_info:
            trading_service.buy("alice", "AAPL", "10")

        assert isinstance(exc_info.value.__cause__, OperationalError)
        monkeypatch.undo()
        assert portfolio_service.get_account("alice").cash_balance == Decimal("10000.00")
        assert portfolio_service.get_holdings("alice") == []

    def test_trades_execute_at_injected_price_feed(self, seeded_instruments, uow_factory, funded_account):
        service = TradingService(
            uow_factory,
            price_feed_factory=lambda instruments: FixedPriceFeed("120.00"),
        )

        result = service.buy("alice", "MSFT", "10")

        assert result.transaction.price == Decimal("120.00")
        assert result.account.cash_balance == Decimal("8800.00")


# =============================================================================
# BANKING TESTS
# =============================================================================


class TestBanking:

    def test_transfer_round_trip(self, banking_service, portfolio_service, funded_account):
        banking_service.transfer("alice", TransferType.CASH_TO_SAVINGS, "2500.00")
        banking_service.transfer("alice", TransferType.SAVINGS_TO_CASH, "500.00")

        account = portfolio_service.get_account("alice")
        assert account.cash_balance == Decimal("8000.00")
        assert account.savings_balance == Decimal("2000.00")

        transfers = banking_service.list_transfers("alice")
        assert [t.transfer_type for t in transfers] == [
            TransferType.SAVINGS_TO_CASH,
            TransferType.CASH_TO_SAVINGS,
        ]

    def test_transfer_insufficient_savings(self, banking_service, portfolio_service, funded_account):
        with pytest.raises(InsufficientBalanceError):
            banking_service.transfer("alice", TransferType.SAVINGS_TO_CASH, "1.00")

        assert banking_service.list_transfers("alice") == []

    def test_transfer_unknown_account(self, banking_service):
        with pytest.raises(NotFoundError):
            banking_service.transfer("ghost", TransferType.CASH_TO_SAVINGS, "1.00")

    def test_fixed_deposit_lifecycle(self, banking_service, portfolio_service, funded_account):
        """
        GIVEN alice with $10,000 cash
        WHEN she opens a $4,000 12-month deposit and it later matures
        THEN cash drops to $6,000, then rises by $4,260, with both moves logged
        """
        opened = banking_service.create_fixed_deposit("alice", "4000", 12)
        assert portfolio_service.get_account("alice").cash_balance == Decimal("6000.00")

        # Not due yet
        assert banking_service.mature_deposits(as_of=opened.deposit.created_at_est) == []

        matured = banking_service.mature_deposits(as_of=opened.deposit.maturity_date)

        assert len(matured) == 1
        assert matured[0].deposit.status == DepositStatus.MATURED
        assert portfolio_service.get_account("alice").cash_balance == Decimal("10260.00")

        deposits = banking_service.list_deposits("alice")
        assert deposits[0].status == DepositStatus.MATURED
        assert {t.transfer_type for t in banking_service.list_transfers("alice")} == {
            TransferType.FD_CREATION,
            TransferType.FD_MATURITY,
        }

    def test_maturing_twice_pays_once(self, banking_service, portfolio_service, funded_account):
        deposit = banking_service.create_fixed_deposit("alice", "1000", 6).deposit
        later = eastern_datetime(2099, 1, 1)

        assert len(banking_service.mature_deposits(as_of=later)) == 1
        assert banking_service.mature_deposits(as_of=later) == []
        assert portfolio_service.get_account("alice").cash_balance == (
            Decimal("9000.00") + deposit.maturity_amount
        )

    def test_deposit_insufficient_cash(self, banking_service, funded_account):
        with pytest.raises(InsufficientFundsError):
            banking_service.create_fixed_deposit("alice", "10000.01", 12)

        assert banking_service.list_deposits("alice") == []


# =============================================================================
# VALUATION TESTS
# =============================================================================


class TestPortfolioValuation:

    def test_summary_marks_to_market(
        self,
        trading_service,
        banking_service,
        portfolio_service,
        funded_account,
        set_price,
    ):
        """
        GIVEN alice bought 10 AAPL @ $150 and moved $1,000 to savings
        WHEN AAPL rises to $165
        THEN total value is $10,150 and gain is $150 (1.5%)
        """
        trading_service.buy("alice", "AAPL", "10")
        banking_service.transfer("alice", TransferType.CASH_TO_SAVINGS, "1000")
        set_price("AAPL", "165.00")

        summary = portfolio_service.get_summary("alice")

        assert summary.cash_balance == Decimal("7500.00")
        assert summary.savings_balance == Decimal("1000.00")
        assert summary.total_holdings_value == Decimal("1650.00")
        assert summary.total_value == Decimal("10150.00")
        assert summary.total_gain_loss == Decimal("150.00")
        assert summary.total_gain_loss_percent == Decimal("1.50")
        assert summary.holdings[0].gain_loss == Decimal("150.00")
        assert summary.holdings[0].gain_loss_percent == Decimal("10.00")

    def test_summary_repeatable(self, trading_service, portfolio_service, funded_account):
        trading_service.buy("alice", "TSLA", "0.125")

        assert portfolio_service.get_summary("alice") == portfolio_service.get_summary("alice")

    def test_summary_uses_injected_price_feed(self, trading_service, uow_factory, funded_account):
        """
        GIVEN alice bought 10 AAPL @ $150
        WHEN the portfolio is valued with a feed quoting $200
        THEN holdings are marked at $200
        """
        trading_service.buy("alice", "AAPL", "10")
        service = PortfolioService(
            uow_factory,
            price_feed_factory=lambda instruments: FixedPriceFeed("200.00"),
        )

        summary = service.get_summary("alice")

        assert summary.total_holdings_value == Decimal("2000.00")
        assert summary.total_gain_loss == Decimal("500.00")
        assert summary.holdings[0].current_price == Decimal("200.00")
