"""Unit of work protocol binding all ledger repositories to one store transaction."""

from typing import Callable, Protocol

from investsim.repositories.protocols.account_repo import AccountRepository
from investsim.repositories.protocols.holding_repo import HoldingRepository
from investsim.repositories.protocols.transaction_repo import TransactionRepository
from investsim.repositories.protocols.transfer_repo import (
    FundTransferRepository,
    FixedDepositRepository,
)
from investsim.repositories.protocols.instrument_repo import InstrumentRepository


class LedgerUnitOfWork(Protocol):
    """
    One atomic store transaction.

    Used as a context manager: writes made through the repositories are
    committed together when the block exits cleanly, and all discarded
    when it raises.
    """

    accounts: AccountRepository
    holdings: HoldingRepository
    transactions: TransactionRepository
    transfers: FundTransferRepository
    deposits: FixedDepositRepository
    instruments: InstrumentRepository

    def __enter__(self) -> "LedgerUnitOfWork":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...


UnitOfWorkFactory = Callable[[], LedgerUnitOfWork]
