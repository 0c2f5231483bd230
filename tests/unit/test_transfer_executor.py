"""
Unit tests for transfers and fixed deposits.

Tests cover:
- Cash <-> savings transfers and balance conservation
- Fixed deposit rates, maturity amounts and maturity dates
- Deposit maturity payouts
- Validation and insufficient balance errors
"""

import pytest
from decimal import Decimal

from investsim.services.transfer_executor import (
    calculate_maturity_amount,
    execute_transfer,
    get_interest_rate,
    mature_fixed_deposit,
    open_fixed_deposit,
    quote_fixed_deposit,
)
from investsim.domain.models import TransferType, MoneyAccount, DepositStatus
from investsim.core.exceptions import (
    ValidationError,
    InsufficientFundsError,
    InsufficientBalanceError,
)
from tests.conftest import eastern_datetime, make_account


# =============================================================================
# CASH / SAVINGS TRANSFER TESTS
# =============================================================================


class TestExecuteTransfer:
    """Tests for cash/savings transfers."""

    def test_cash_to_savings(self):
        """
        GIVEN $10,000 cash and no savings
        WHEN I move $1,000 to savings
        THEN cash is $9,000, savings $1,000, and a transfer is recorded
        """
        result = execute_transfer(make_account(), TransferType.CASH_TO_SAVINGS, "1000")

        assert result.account.cash_balance == Decimal("9000.00")
        assert result.account.savings_balance == Decimal("1000")
        assert result.transfer.transfer_type == TransferType.CASH_TO_SAVINGS
        assert result.transfer.from_account == MoneyAccount.CASH
        assert result.transfer.to_account == MoneyAccount.SAVINGS
        assert result.transfer.amount == Decimal("1000")
        assert result.transfer.user_id == "alice"
        assert result.transfer.description == "Transfer from cash to savings"

    def test_savings_to_cash(self):
        account = make_account(cash="0", savings="250.50")
        result = execute_transfer(account, "SAVINGS_TO_CASH", "250.50")

        assert result.account.cash_balance == Decimal("250.50")
        assert result.account.savings_balance == Decimal("0")
        assert result.transfer.from_account == MoneyAccount.SAVINGS

    def test_transfer_conserves_total(self):
        """
        GIVEN cash $1,234.56 and savings $78.90
        WHEN I move $34.56 either way
        THEN cash + savings is unchanged
        """
        account = make_account(cash="1234.56", savings="78.90")
        for direction in (TransferType.CASH_TO_SAVINGS, TransferType.SAVINGS_TO_CASH):
            result = execute_transfer(account, direction, "34.56")
            assert (
                result.account.cash_balance + result.account.savings_balance
                == account.cash_balance + account.savings_balance
            )

    def test_insufficient_savings(self):
        """
        GIVEN $100 savings
        WHEN I move $100.01 to cash
        THEN InsufficientBalanceError is raised
        """
        account = make_account(savings="100.00")
        with pytest.raises(InsufficientBalanceError) as exc_info:
            execute_transfer(account, TransferType.SAVINGS_TO_CASH, "100.01")

        assert exc_info.value.code == "INSUFFICIENT_BALANCE"
        assert "savings" in exc_info.value.message

    def test_deposit_types_are_not_transfer_directions(self):
        with pytest.raises(ValidationError):
            execute_transfer(make_account(), TransferType.FD_CREATION, "10")

    def test_unknown_direction(self):
        with pytest.raises(ValidationError):
            execute_transfer(make_account(), "CASH_TO_MOON", "10")

    @pytest.mark.parametrize("amount", ["0", "-5", "1.001"])
    def test_invalid_amount(self, amount):
        with pytest.raises(ValidationError):
            execute_transfer(make_account(), TransferType.CASH_TO_SAVINGS, amount)


# =============================================================================
# INTEREST / QUOTE TESTS
# =============================================================================


class TestFixedDepositTerms:
    """Tests for rates and maturity amounts."""

    @pytest.mark.parametrize(
        "tenure,rate",
        [(6, "5.5"), (12, "6.5"), (24, "7.2"), (36, "7.8")],
    )
    def test_listed_rates(self, tenure, rate):
        assert get_interest_rate(tenure) == Decimal(rate)

    def test_unlisted_tenure_uses_twelve_month_rate(self):
        assert get_interest_rate(18) == Decimal("6.5")

    def test_maturity_one_year(self):
        """
        GIVEN $10,000 for 12 months at 6.5%
        WHEN I compute the maturity amount
        THEN it is $10,650.00
        """
        assert calculate_maturity_amount("10000", 12) == Decimal("10650.00")

    def test_maturity_two_years_compounds_annually(self):
        assert calculate_maturity_amount("10000", 24) == Decimal("11491.84")

    def test_maturity_three_years(self):
        assert calculate_maturity_amount("10000", 36) == Decimal("12527.27")

    def test_maturity_six_months_uses_fractional_year(self):
        assert calculate_maturity_amount("10000", 6) == Decimal("10271.32")

    def test_quote(self):
        quote = quote_fixed_deposit("5000", 12)

        assert quote.interest_rate == Decimal("6.5")
        assert quote.maturity_amount == Decimal("5325.00")
        assert quote.interest_earned == Decimal("325.00")

    @pytest.mark.parametrize("tenure", [0, -12, True, "12"])
    def test_invalid_tenure(self, tenure):
        with pytest.raises(ValidationError):
            calculate_maturity_amount("1000", tenure)


# =============================================================================
# OPEN DEPOSIT TESTS
# =============================================================================


class TestOpenFixedDeposit:
    """Tests for opening fixed deposits."""

    def test_open_deposit_debits_cash(self):
        """
        GIVEN $10,000 cash
        WHEN I open a $2,000 deposit for 12 months on 2024-06-15
        THEN cash is $8,000 and the deposit matures 2025-06-15 paying $2,130
        """
        opened_at = eastern_datetime(2024, 6, 15)
        result = open_fixed_deposit(make_account(), "2000", 12, at=opened_at)

        assert result.account.cash_balance == Decimal("8000.00")
        assert result.deposit.status == DepositStatus.ACTIVE
        assert result.deposit.interest_rate == Decimal("6.5")
        assert result.deposit.maturity_amount == Decimal("2130.00")
        assert result.deposit.interest_earned == Decimal("130.00")
        assert result.deposit.maturity_date == eastern_datetime(2025, 6, 15)
        assert result.transfer.transfer_type == TransferType.FD_CREATION
        assert result.transfer.to_account == MoneyAccount.FIXED_DEPOSIT
        assert result.transfer.description == "Fixed Deposit created for 12 months"

    def test_maturity_date_clamps_to_month_end(self):
        """
        GIVEN a deposit opened on 2024-08-31
        WHEN the tenure is 6 months
        THEN it matures on 2025-02-28
        """
        result = open_fixed_deposit(make_account(), "100", 6, at=eastern_datetime(2024, 8, 31))

        assert result.deposit.maturity_date.date().isoformat() == "2025-02-28"

    def test_insufficient_cash(self):
        with pytest.raises(InsufficientFundsError):
            open_fixed_deposit(make_account(cash="999.99"), "1000", 12)


# =============================================================================
# MATURITY TESTS
# =============================================================================


class TestMatureFixedDeposit:
    """Tests for paying out matured deposits."""

    @pytest.fixture
    def opened(self):
        return open_fixed_deposit(make_account(), "1000", 12, at=eastern_datetime(2024, 1, 10))

    def test_matures_on_due_date(self, opened):
        """
        GIVEN a $1,000 12-month deposit opened 2024-01-10
        WHEN it is matured on 2025-01-10
        THEN $1,065 is credited to cash and the deposit is MATURED
        """
        result = mature_fixed_deposit(opened.account, opened.deposit, at=eastern_datetime(2025, 1, 10))

        assert result.account.cash_balance == Decimal("10065.00")
        assert result.deposit.status == DepositStatus.MATURED
        assert result.transfer.transfer_type == TransferType.FD_MATURITY
        assert result.transfer.amount == Decimal("1065.00")
        assert result.transfer.from_account == MoneyAccount.FIXED_DEPOSIT
        assert result.transfer.to_account == MoneyAccount.CASH

    def test_not_yet_due(self, opened):
        with pytest.raises(ValidationError):
            mature_fixed_deposit(opened.account, opened.deposit, at=eastern_datetime(2025, 1, 9))

    def test_already_matured(self, opened):
        matured = mature_fixed_deposit(opened.account, opened.deposit, at=eastern_datetime(2025, 2, 1))

        with pytest.raises(ValidationError):
            mature_fixed_deposit(matured.account, matured.deposit, at=eastern_datetime(2025, 2, 1))

    def test_other_users_deposit(self, opened):
        with pytest.raises(ValidationError):
            mature_fixed_deposit(make_account(user_id="bob"), opened.deposit, at=eastern_datetime(2025, 2, 1))
