"""Domain models package."""

from investsim.domain.models.enums import (
    TransactionType,
    TransferType,
    MoneyAccount,
    DepositStatus,
)
from investsim.domain.models.account import Account
from investsim.domain.models.holding import Holding
from investsim.domain.models.transaction import Transaction
from investsim.domain.models.instrument import Instrument
from investsim.domain.models.transfer import FundTransfer, FixedDeposit

__all__ = [
    "TransactionType",
    "TransferType",
    "MoneyAccount",
    "DepositStatus",
    "Account",
    "Holding",
    "Transaction",
    "Instrument",
    "FundTransfer",
    "FixedDeposit",
]
