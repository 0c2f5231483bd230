"""Repository layer - data access abstractions and implementations."""

from investsim.repositories.protocols import (
    AccountRepository,
    HoldingRepository,
    TransactionRepository,
    FundTransferRepository,
    FixedDepositRepository,
    InstrumentRepository,
    LedgerUnitOfWork,
    UnitOfWorkFactory,
)

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
