"""SQLAlchemy implementation of AccountRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from investsim.core.exceptions import NotFoundError
from investsim.domain.models import Account
from investsim.repositories.sqlalchemy.orm_models import (
    AccountORM,
    to_db_time,
    from_db_time,
    from_db_decimal,
)


class SqlAlchemyAccountRepository:
    """SQLAlchemy-backed account repository. Flushes only; the unit of work commits."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        orm_account = AccountORM(
            account_id=account.account_id,
            user_id=account.user_id,
            portfolio_id=account.portfolio_id,
            cash_balance=account.cash_balance,
            savings_balance=account.savings_balance,
            created_at_est=to_db_time(account.created_at_est),
            updated_at_est=to_db_time(account.updated_at_est),
        )
        self._db.add(orm_account)
        self._db.flush()
        return self._to_domain(orm_account)

    def get_by_user_id(self, user_id: str, for_update: bool = False) -> Optional[Account]:
        """Retrieve the account owned by a user, optionally locking the row."""
        query = self._db.query(AccountORM).filter(AccountORM.user_id == user_id)
        if for_update:
            query = query.with_for_update()
        orm_account = query.first()
        return self._to_domain(orm_account) if orm_account else None

    def update(self, account: Account) -> Account:
        """Write new balances for an existing account."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.account_id == account.account_id
        ).first()
        if not orm_account:
            raise NotFoundError("Account", account.account_id)

        orm_account.cash_balance = account.cash_balance
        orm_account.savings_balance = account.savings_balance
        orm_account.updated_at_est = to_db_time(account.updated_at_est)
        self._db.flush()
        return self._to_domain(orm_account)

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            account_id=orm.account_id,
            user_id=orm.user_id,
            portfolio_id=orm.portfolio_id,
            cash_balance=from_db_decimal(orm.cash_balance),
            savings_balance=from_db_decimal(orm.savings_balance),
            created_at_est=from_db_time(orm.created_at_est),
            updated_at_est=from_db_time(orm.updated_at_est),
        )
