"""SQLAlchemy unit of work: one session, one commit per ledger operation."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from investsim.core.exceptions import StoreError
from investsim.repositories.sqlalchemy.database import get_session_factory
from investsim.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from investsim.repositories.sqlalchemy.holding_repo import SqlAlchemyHoldingRepository
from investsim.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from investsim.repositories.sqlalchemy.transfer_repo import (
    SqlAlchemyFundTransferRepository,
    SqlAlchemyFixedDepositRepository,
)
from investsim.repositories.sqlalchemy.instrument_repo import SqlAlchemyInstrumentRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork:
    """
    Context manager wrapping one database transaction.

    Repositories only flush; the block's writes are committed together on a
    clean exit and rolled back together on any exception. SQLAlchemy errors
    are re-raised as StoreError with the original chained as __cause__.
    """

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self._session_factory = session_factory
        self._session: Optional[Session] = None

    def __enter__(self) -> "SqlAlchemyUnitOfWork":
        factory = self._session_factory or get_session_factory()
        self._session = factory()
        self.accounts = SqlAlchemyAccountRepository(self._session)
        self.holdings = SqlAlchemyHoldingRepository(self._session)
        self.transactions = SqlAlchemyTransactionRepository(self._session)
        self.transfers = SqlAlchemyFundTransferRepository(self._session)
        self.deposits = SqlAlchemyFixedDepositRepository(self._session)
        self.instruments = SqlAlchemyInstrumentRepository(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        session = self._session
        try:
            if exc_type is None:
                try:
                    session.commit()
                except SQLAlchemyError as e:
                    session.rollback()
                    logger.error("Ledger commit failed: %s", e)
                    raise StoreError(f"Ledger store commit failed: {e}") from e
            else:
                session.rollback()
                if isinstance(exc, SQLAlchemyError):
                    logger.error("Ledger store failure, rolled back: %s", exc)
                    raise StoreError(f"Ledger store failure: {exc}") from exc
        finally:
            session.close()
            self._session = None
