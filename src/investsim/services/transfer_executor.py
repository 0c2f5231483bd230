"""Fund transfer and fixed deposit executor: pure functions over account snapshots."""

import dataclasses
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from investsim.core.exceptions import (
    ValidationError,
    InsufficientFundsError,
    InsufficientBalanceError,
)
from investsim.core.money import (
    HUNDRED,
    MONEY_PLACES,
    Number,
    require_positive,
    quantize_money,
)
from investsim.core.timezone import now_eastern, add_months, to_eastern
from investsim.domain.models import (
    Account,
    FundTransfer,
    FixedDeposit,
    TransferType,
    MoneyAccount,
    DepositStatus,
)
from investsim.domain.views import TransferResult, DepositResult, DepositQuote

# Annual rate (percent) by tenure in months
FD_INTEREST_RATES: dict[int, Decimal] = {
    6: Decimal("5.5"),
    12: Decimal("6.5"),
    24: Decimal("7.2"),
    36: Decimal("7.8"),
}
DEFAULT_FD_TENURE_MONTHS = 12

_TRANSFER_ROUTES = {
    TransferType.CASH_TO_SAVINGS: (MoneyAccount.CASH, MoneyAccount.SAVINGS),
    TransferType.SAVINGS_TO_CASH: (MoneyAccount.SAVINGS, MoneyAccount.CASH),
}


def get_interest_rate(tenure_months: int) -> Decimal:
    """Annual rate for a tenure; unlisted tenures get the 12-month rate."""
    return FD_INTEREST_RATES.get(tenure_months, FD_INTEREST_RATES[DEFAULT_FD_TENURE_MONTHS])


def _validate_tenure(tenure_months: int) -> int:
    if isinstance(tenure_months, bool) or not isinstance(tenure_months, int):
        raise ValidationError("tenure_months must be a whole number of months")
    if tenure_months <= 0:
        raise ValidationError("tenure_months must be greater than 0")
    return tenure_months


def calculate_maturity_amount(amount: Number, tenure_months: int) -> Decimal:
    """
    Value of a deposit at maturity with annual compounding.

    amount × (1 + rate/100) ^ (tenure_months / 12), rounded to cents.
    """
    amount = require_positive(amount, "amount", MONEY_PLACES)
    tenure_months = _validate_tenure(tenure_months)
    rate = get_interest_rate(tenure_months)
    years = Decimal(tenure_months) / Decimal(12)
    return quantize_money(amount * (1 + rate / HUNDRED) ** years)


def quote_fixed_deposit(amount: Number, tenure_months: int) -> DepositQuote:
    """Preview deposit terms without touching any account."""
    amount = require_positive(amount, "amount", MONEY_PLACES)
    maturity_amount = calculate_maturity_amount(amount, tenure_months)
    return DepositQuote(
        amount=amount,
        tenure_months=tenure_months,
        interest_rate=get_interest_rate(tenure_months),
        maturity_amount=maturity_amount,
        interest_earned=maturity_amount - amount,
    )


def execute_transfer(
    account: Account,
    direction: TransferType,
    amount: Number,
    at: Optional[datetime] = None,
) -> TransferResult:
    """
    Move `amount` between cash and savings.

    cash + savings is the same before and after.

    Raises:
        ValidationError: unsupported direction, or amount not positive
        InsufficientBalanceError: source balance below amount
    """
    try:
        direction = TransferType(direction)
    except ValueError:
        raise ValidationError(f"Unknown transfer direction: {direction}")
    if direction not in _TRANSFER_ROUTES:
        raise ValidationError(f"Unsupported transfer direction: {direction.value}")
    amount = require_positive(amount, "amount", MONEY_PLACES)

    source, destination = _TRANSFER_ROUTES[direction]
    if source == MoneyAccount.CASH:
        available = account.cash_balance
        cash = account.cash_balance - amount
        savings = account.savings_balance + amount
    else:
        available = account.savings_balance
        cash = account.cash_balance + amount
        savings = account.savings_balance - amount

    if available < amount:
        raise InsufficientBalanceError(source.value, str(amount), str(available))

    at = at or now_eastern()
    new_account = dataclasses.replace(
        account,
        cash_balance=cash,
        savings_balance=savings,
        updated_at_est=at,
    )
    transfer = FundTransfer(
        transfer_id=str(uuid.uuid4()),
        user_id=account.user_id,
        transfer_type=direction,
        amount=amount,
        from_account=source,
        to_account=destination,
        description=f"Transfer from {source.value} to {destination.value}",
        created_at_est=at,
    )
    return TransferResult(account=new_account, transfer=transfer)


def open_fixed_deposit(
    account: Account,
    amount: Number,
    tenure_months: int,
    at: Optional[datetime] = None,
) -> DepositResult:
    """
    Lock `amount` of cash into a fixed deposit.

    Raises:
        ValidationError: amount not positive or tenure not a positive int
        InsufficientFundsError: cash below amount
    """
    amount = require_positive(amount, "amount", MONEY_PLACES)
    tenure_months = _validate_tenure(tenure_months)
    if account.cash_balance < amount:
        raise InsufficientFundsError(str(amount), str(account.cash_balance))

    at = at or now_eastern()
    deposit = FixedDeposit(
        deposit_id=str(uuid.uuid4()),
        user_id=account.user_id,
        amount=amount,
        tenure_months=tenure_months,
        interest_rate=get_interest_rate(tenure_months),
        maturity_amount=calculate_maturity_amount(amount, tenure_months),
        maturity_date=add_months(at, tenure_months),
        status=DepositStatus.ACTIVE,
        created_at_est=at,
    )
    new_account = dataclasses.replace(
        account,
        cash_balance=account.cash_balance - amount,
        updated_at_est=at,
    )
    transfer = FundTransfer(
        transfer_id=str(uuid.uuid4()),
        user_id=account.user_id,
        transfer_type=TransferType.FD_CREATION,
        amount=amount,
        from_account=MoneyAccount.CASH,
        to_account=MoneyAccount.FIXED_DEPOSIT,
        description=f"Fixed Deposit created for {tenure_months} months",
        created_at_est=at,
    )
    return DepositResult(account=new_account, deposit=deposit, transfer=transfer)


def mature_fixed_deposit(
    account: Account,
    deposit: FixedDeposit,
    at: Optional[datetime] = None,
) -> DepositResult:
    """
    Close out a deposit whose maturity date has passed, paying maturity_amount into cash.

    Raises:
        ValidationError: deposit belongs to another user, is not active, or is not yet due
    """
    if deposit.user_id != account.user_id:
        raise ValidationError("Deposit does not belong to this account")
    if deposit.status != DepositStatus.ACTIVE:
        raise ValidationError(f"Deposit {deposit.deposit_id} is already {deposit.status.value}")

    at = at or now_eastern()
    if to_eastern(deposit.maturity_date) > to_eastern(at):
        raise ValidationError(
            f"Deposit {deposit.deposit_id} matures on {deposit.maturity_date.date().isoformat()}"
        )

    matured = dataclasses.replace(deposit, status=DepositStatus.MATURED)
    new_account = dataclasses.replace(
        account,
        cash_balance=account.cash_balance + deposit.maturity_amount,
        updated_at_est=at,
    )
    transfer = FundTransfer(
        transfer_id=str(uuid.uuid4()),
        user_id=account.user_id,
        transfer_type=TransferType.FD_MATURITY,
        amount=deposit.maturity_amount,
        from_account=MoneyAccount.FIXED_DEPOSIT,
        to_account=MoneyAccount.CASH,
        description=f"Fixed Deposit matured after {deposit.tenure_months} months",
        created_at_est=at,
    )
    return DepositResult(account=new_account, deposit=matured, transfer=transfer)
