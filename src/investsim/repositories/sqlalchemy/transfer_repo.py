"""SQLAlchemy implementations of FundTransferRepository and FixedDepositRepository."""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from investsim.core.exceptions import NotFoundError
from investsim.domain.models import FundTransfer, FixedDeposit, DepositStatus
from investsim.repositories.sqlalchemy.orm_models import (
    FundTransferORM,
    FixedDepositORM,
    to_db_time,
    from_db_time,
    from_db_decimal,
)


class SqlAlchemyFundTransferRepository:
    """SQLAlchemy-backed fund transfer log."""

    def __init__(self, db: Session):
        self._db = db

    def append(self, transfer: FundTransfer) -> FundTransfer:
        """Append a transfer record."""
        orm_transfer = FundTransferORM(
            transfer_id=transfer.transfer_id,
            user_id=transfer.user_id,
            transfer_type=transfer.transfer_type,
            amount=transfer.amount,
            from_account=transfer.from_account,
            to_account=transfer.to_account,
            description=transfer.description,
            created_at_est=to_db_time(transfer.created_at_est),
        )
        self._db.add(orm_transfer)
        self._db.flush()
        return self._to_domain(orm_transfer)

    def list_by_user(self, user_id: str, limit: Optional[int] = None) -> list[FundTransfer]:
        """List transfers for a user, newest first."""
        query = (
            self._db.query(FundTransferORM)
            .filter(FundTransferORM.user_id == user_id)
            .order_by(FundTransferORM.created_at_est.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(t) for t in query.all()]

    @staticmethod
    def _to_domain(orm: FundTransferORM) -> FundTransfer:
        return FundTransfer(
            transfer_id=orm.transfer_id,
            user_id=orm.user_id,
            transfer_type=orm.transfer_type,
            amount=from_db_decimal(orm.amount),
            from_account=orm.from_account,
            to_account=orm.to_account,
            description=orm.description,
            created_at_est=from_db_time(orm.created_at_est),
        )


class SqlAlchemyFixedDepositRepository:
    """SQLAlchemy-backed fixed deposit repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, deposit: FixedDeposit) -> FixedDeposit:
        """Persist a new deposit."""
        orm_deposit = FixedDepositORM(
            deposit_id=deposit.deposit_id,
            user_id=deposit.user_id,
            amount=deposit.amount,
            tenure_months=deposit.tenure_months,
            interest_rate=deposit.interest_rate,
            maturity_amount=deposit.maturity_amount,
            maturity_date=to_db_time(deposit.maturity_date),
            status=deposit.status,
            created_at_est=to_db_time(deposit.created_at_est),
        )
        self._db.add(orm_deposit)
        self._db.flush()
        return self._to_domain(orm_deposit)

    def get(self, deposit_id: str) -> Optional[FixedDeposit]:
        """Retrieve a deposit by ID."""
        orm_deposit = self._db.query(FixedDepositORM).filter(
            FixedDepositORM.deposit_id == deposit_id
        ).first()
        return self._to_domain(orm_deposit) if orm_deposit else None

    def update_status(self, deposit: FixedDeposit) -> FixedDeposit:
        """Persist a deposit's status change; the deposit's terms are never rewritten."""
        orm_deposit = self._db.query(FixedDepositORM).filter(
            FixedDepositORM.deposit_id == deposit.deposit_id
        ).first()
        if not orm_deposit:
            raise NotFoundError("FixedDeposit", deposit.deposit_id)
        orm_deposit.status = deposit.status
        self._db.flush()
        return self._to_domain(orm_deposit)

    def list_by_user(self, user_id: str) -> list[FixedDeposit]:
        """List a user's deposits, newest first."""
        orm_deposits = (
            self._db.query(FixedDepositORM)
            .filter(FixedDepositORM.user_id == user_id)
            .order_by(FixedDepositORM.created_at_est.desc())
            .all()
        )
        return [self._to_domain(d) for d in orm_deposits]

    def list_due(self, as_of: datetime, user_id: Optional[str] = None) -> list[FixedDeposit]:
        """List ACTIVE deposits whose maturity_date is on or before as_of."""
        query = self._db.query(FixedDepositORM).filter(
            FixedDepositORM.status == DepositStatus.ACTIVE,
            FixedDepositORM.maturity_date <= to_db_time(as_of),
        )
        if user_id is not None:
            query = query.filter(FixedDepositORM.user_id == user_id)
        query = query.order_by(FixedDepositORM.maturity_date)
        return [self._to_domain(d) for d in query.all()]

    @staticmethod
    def _to_domain(orm: FixedDepositORM) -> FixedDeposit:
        return FixedDeposit(
            deposit_id=orm.deposit_id,
            user_id=orm.user_id,
            amount=from_db_decimal(orm.amount),
            tenure_months=orm.tenure_months,
            interest_rate=from_db_decimal(orm.interest_rate),
            maturity_amount=from_db_decimal(orm.maturity_amount),
            maturity_date=from_db_time(orm.maturity_date),
            status=orm.status,
            created_at_est=from_db_time(orm.created_at_est),
        )
