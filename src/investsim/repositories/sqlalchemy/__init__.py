"""SQLAlchemy repository implementations."""

from investsim.repositories.sqlalchemy.database import (
    create_db_engine,
    get_engine,
    get_session_factory,
    init_db,
    reset_database,
    Base,
)
from investsim.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from investsim.repositories.sqlalchemy.holding_repo import SqlAlchemyHoldingRepository
from investsim.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from investsim.repositories.sqlalchemy.transfer_repo import (
    SqlAlchemyFundTransferRepository,
    SqlAlchemyFixedDepositRepository,
)
from investsim.repositories.sqlalchemy.instrument_repo import SqlAlchemyInstrumentRepository
from investsim.repositories.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "create_db_engine",
    "get_engine",
    "get_session_factory",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyHoldingRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyFundTransferRepository",
    "SqlAlchemyFixedDepositRepository",
    "SqlAlchemyInstrumentRepository",
    "SqlAlchemyUnitOfWork",
]
