"""SQLAlchemy implementation of TransactionRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from investsim.domain.models import Transaction
from investsim.repositories.sqlalchemy.orm_models import (
    TransactionORM,
    to_db_time,
    from_db_time,
    from_db_decimal,
)


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed trade log. Rows are inserted and read, never updated."""

    def __init__(self, db: Session):
        self._db = db

    def append(self, transaction: Transaction) -> Transaction:
        """Append a trade to the log."""
        orm_txn = TransactionORM(
            txn_id=transaction.txn_id,
            portfolio_id=transaction.portfolio_id,
            symbol=transaction.symbol,
            company_name=transaction.company_name,
            txn_type=transaction.txn_type,
            shares=transaction.shares,
            price=transaction.price,
            total=transaction.total,
            created_at_est=to_db_time(transaction.created_at_est),
        )
        self._db.add(orm_txn)
        self._db.flush()
        return self._to_domain(orm_txn)

    def list_by_portfolio(
        self,
        portfolio_id: str,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List trades for a portfolio, newest first."""
        query = (
            self._db.query(TransactionORM)
            .filter(TransactionORM.portfolio_id == portfolio_id)
            .order_by(TransactionORM.created_at_est.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(t) for t in query.all()]

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            txn_id=orm.txn_id,
            portfolio_id=orm.portfolio_id,
            symbol=orm.symbol,
            txn_type=orm.txn_type,
            shares=from_db_decimal(orm.shares),
            price=from_db_decimal(orm.price),
            total=from_db_decimal(orm.total),
            company_name=orm.company_name,
            created_at_est=from_db_time(orm.created_at_est),
        )
