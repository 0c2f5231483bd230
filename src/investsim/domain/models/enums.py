"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Types of trade ledger entries."""

    BUY = "BUY"
    SELL = "SELL"


class TransferType(str, Enum):
    """Types of fund movements between the user's money accounts."""

    CASH_TO_SAVINGS = "CASH_TO_SAVINGS"
    SAVINGS_TO_CASH = "SAVINGS_TO_CASH"
    FD_CREATION = "FD_CREATION"
    FD_MATURITY = "FD_MATURITY"


class MoneyAccount(str, Enum):
    """Named money buckets a fund transfer moves between."""

    CASH = "cash"
    SAVINGS = "savings"
    FIXED_DEPOSIT = "fixed_deposit"


class DepositStatus(str, Enum):
    """Lifecycle states of a fixed deposit."""

    ACTIVE = "ACTIVE"
    MATURED = "MATURED"
