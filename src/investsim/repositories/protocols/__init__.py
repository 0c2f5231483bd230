"""Repository protocol definitions (interfaces)."""

from investsim.repositories.protocols.account_repo import AccountRepository
from investsim.repositories.protocols.holding_repo import HoldingRepository
from investsim.repositories.protocols.transaction_repo import TransactionRepository
from investsim.repositories.protocols.transfer_repo import (
    FundTransferRepository,
    FixedDepositRepository,
)
from investsim.repositories.protocols.instrument_repo import InstrumentRepository
from investsim.repositories.protocols.unit_of_work import LedgerUnitOfWork, UnitOfWorkFactory

__all__ = [
    "AccountRepository",
    "HoldingRepository",
    "TransactionRepository",
    "FundTransferRepository",
    "FixedDepositRepository",
    "InstrumentRepository",
    "LedgerUnitOfWork",
    "UnitOfWorkFactory",
]
