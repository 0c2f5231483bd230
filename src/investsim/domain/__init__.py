"""Domain layer - pure business models with no external dependencies."""

from investsim.domain.models import (
    Account,
    Holding,
    Transaction,
    Instrument,
    FundTransfer,
    FixedDeposit,
    TransactionType,
    TransferType,
    MoneyAccount,
    DepositStatus,
)

__all__ = [
    "Account",
    "Holding",
    "Transaction",
    "Instrument",
    "FundTransfer",
    "FixedDeposit",
    "TransactionType",
    "TransferType",
    "MoneyAccount",
    "DepositStatus",
]
