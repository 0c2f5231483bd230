"""SQLAlchemy ORM model definitions."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Boolean,
    Integer,
    ForeignKey,
    Numeric,
    CheckConstraint,
    UniqueConstraint,
    Enum as SqlEnum,
)
from sqlalchemy.types import TypeDecorator

from investsim.core.timezone import to_eastern
from investsim.repositories.sqlalchemy.database import Base
from investsim.domain.models.enums import (
    TransactionType,
    TransferType,
    MoneyAccount,
    DepositStatus,
)


def to_db_time(value: Optional[datetime]) -> Optional[datetime]:
    """Store times as naive US/Eastern wall-clock values."""
    if value is None:
        return None
    return to_eastern(value).replace(tzinfo=None)


def from_db_time(value: Optional[datetime]) -> Optional[datetime]:
    return to_eastern(value) if value is not None else None


def from_db_decimal(value) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")


class ExactDecimal(TypeDecorator):
    """
    NUMERIC column that round-trips Decimal values exactly on every backend.

    SQLite stores NUMERIC as an 8-byte float, which cannot hold high-scale
    values such as a 10-place average price on a five-digit share price,
    so on SQLite the value is kept as its decimal string instead.
    """

    impl = Numeric
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(40))
        return dialect.type_descriptor(self.impl_instance)

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return Decimal(value)


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("cash_balance >= 0", name="ck_accounts_cash_non_negative"),
        CheckConstraint("savings_balance >= 0", name="ck_accounts_savings_non_negative"),
    )

    account_id = Column(String(36), primary_key=True)
    user_id = Column(String(255), unique=True, nullable=False)
    portfolio_id = Column(String(36), unique=True, nullable=False)
    cash_balance = Column(Numeric(precision=18, scale=2), nullable=False, default=Decimal("0"))
    savings_balance = Column(Numeric(precision=18, scale=2), nullable=False, default=Decimal("0"))
    created_at_est = Column(DateTime, nullable=False)
    updated_at_est = Column(DateTime, nullable=True)


class HoldingORM(Base):
    """SQLAlchemy model for Holding."""

    __tablename__ = "holdings"
    __table_args__ = (
        UniqueConstraint("portfolio_id", "symbol", name="uq_holdings_portfolio_symbol"),
        CheckConstraint("shares > 0", name="ck_holdings_shares_positive"),
    )

    holding_id = Column(String(36), primary_key=True)
    portfolio_id = Column(String(36), ForeignKey("accounts.portfolio_id"), nullable=False)
    symbol = Column(String(20), nullable=False)
    company_name = Column(String(255), nullable=True)
    shares = Column(Numeric(precision=18, scale=8), nullable=False)
    avg_price = Column(ExactDecimal(precision=28, scale=10), nullable=False)
    current_price = Column(Numeric(precision=18, scale=4), nullable=False)
    updated_at_est = Column(DateTime, nullable=True)


class TransactionORM(Base):
    """SQLAlchemy model for Transaction (trade log entry)."""

    __tablename__ = "transactions"

    txn_id = Column(String(36), primary_key=True)
    portfolio_id = Column(String(36), ForeignKey("accounts.portfolio_id"), nullable=False)
    symbol = Column(String(20), nullable=False)
    company_name = Column(String(255), nullable=True)
    txn_type = Column(SqlEnum(TransactionType), nullable=False)
    shares = Column(Numeric(precision=18, scale=8), nullable=False)
    price = Column(Numeric(precision=18, scale=4), nullable=False)
    total = Column(Numeric(precision=18, scale=2), nullable=False)
    created_at_est = Column(DateTime, nullable=False)


class InstrumentORM(Base):
    """SQLAlchemy model for Instrument."""

    __tablename__ = "instruments"

    symbol = Column(String(20), primary_key=True)
    name = Column(String(255), nullable=False)
    current_price = Column(Numeric(precision=18, scale=4), nullable=False)
    price_change = Column(Numeric(precision=18, scale=4), nullable=False, default=Decimal("0"))
    price_change_percent = Column(Numeric(precision=9, scale=4), nullable=False, default=Decimal("0"))
    is_active = Column(Boolean, nullable=False, default=True)
    updated_at_est = Column(DateTime, nullable=True)


class FundTransferORM(Base):
    """SQLAlchemy model for FundTransfer (audit log entry)."""

    __tablename__ = "fund_transfers"

    transfer_id = Column(String(36), primary_key=True)
    user_id = Column(String(255), ForeignKey("accounts.user_id"), nullable=False)
    transfer_type = Column(SqlEnum(TransferType), nullable=False)
    amount = Column(Numeric(precision=18, scale=2), nullable=False)
    from_account = Column(SqlEnum(MoneyAccount), nullable=False)
    to_account = Column(SqlEnum(MoneyAccount), nullable=False)
    description = Column(String(255), nullable=False, default="")
    created_at_est = Column(DateTime, nullable=False)


class FixedDepositORM(Base):
    """SQLAlchemy model for FixedDeposit."""

    __tablename__ = "fixed_deposits"

    deposit_id = Column(String(36), primary_key=True)
    user_id = Column(String(255), ForeignKey("accounts.user_id"), nullable=False)
    amount = Column(Numeric(precision=18, scale=2), nullable=False)
    tenure_months = Column(Integer, nullable=False)
    interest_rate = Column(Numeric(precision=6, scale=3), nullable=False)
    maturity_amount = Column(Numeric(precision=18, scale=2), nullable=False)
    maturity_date = Column(DateTime, nullable=False)
    status = Column(SqlEnum(DepositStatus), nullable=False, default=DepositStatus.ACTIVE)
    created_at_est = Column(DateTime, nullable=False)
