"""Fund transfer and fixed deposit domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from investsim.domain.models.enums import TransferType, MoneyAccount, DepositStatus


@dataclass(frozen=True)
class FundTransfer:
    """Append-only audit record of money moving between cash, savings and deposits."""

    transfer_id: str
    user_id: str
    transfer_type: TransferType
    amount: Decimal
    from_account: MoneyAccount
    to_account: MoneyAccount
    description: str = ""
    created_at_est: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.transfer_type, str):
            object.__setattr__(self, "transfer_type", TransferType(self.transfer_type))
        if isinstance(self.from_account, str):
            object.__setattr__(self, "from_account", MoneyAccount(self.from_account))
        if isinstance(self.to_account, str):
            object.__setattr__(self, "to_account", MoneyAccount(self.to_account))


@dataclass
class FixedDeposit:
    """
    Locked-term cash deposit.

    Terms (amount, rate, maturity) are fixed at creation; only status
    moves, from ACTIVE to MATURED once maturity_date has passed.
    """

    deposit_id: str
    user_id: str
    amount: Decimal
    tenure_months: int
    interest_rate: Decimal
    maturity_amount: Decimal
    maturity_date: datetime
    status: DepositStatus = DepositStatus.ACTIVE
    created_at_est: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.status, str):
            self.status = DepositStatus(self.status)

    @property
    def interest_earned(self) -> Decimal:
        return self.maturity_amount - self.amount
