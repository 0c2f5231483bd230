"""SQLAlchemy implementation of InstrumentRepository."""

from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from investsim.core.exceptions import NotFoundError
from investsim.domain.models import Instrument
from investsim.repositories.sqlalchemy.orm_models import (
    InstrumentORM,
    to_db_time,
    from_db_time,
    from_db_decimal,
)


class SqlAlchemyInstrumentRepository:
    """SQLAlchemy-backed instrument repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, instrument: Instrument) -> Instrument:
        """Persist a new instrument."""
        orm_instrument = InstrumentORM(
            symbol=instrument.symbol.upper(),
            name=instrument.name,
            current_price=instrument.current_price,
            price_change=instrument.price_change,
            price_change_percent=instrument.price_change_percent,
            is_active=instrument.is_active,
            updated_at_est=to_db_time(instrument.updated_at_est),
        )
        self._db.add(orm_instrument)
        self._db.flush()
        return self._to_domain(orm_instrument)

    def get(self, symbol: str) -> Optional[Instrument]:
        """Retrieve an instrument by symbol."""
        orm_instrument = self._db.query(InstrumentORM).filter(
            InstrumentORM.symbol == symbol.upper()
        ).first()
        return self._to_domain(orm_instrument) if orm_instrument else None

    def list_all(self, active_only: bool = False) -> list[Instrument]:
        """List instruments ordered by symbol."""
        query = self._db.query(InstrumentORM)
        if active_only:
            query = query.filter(InstrumentORM.is_active == True)  # noqa: E712
        return [self._to_domain(i) for i in query.order_by(InstrumentORM.symbol).all()]

    def search(self, query: str, active_only: bool = False) -> list[Instrument]:
        """Instruments whose symbol or name contains query (case-insensitive), ordered by symbol."""
        needle = query.strip().lower()
        db_query = self._db.query(InstrumentORM).filter(
            or_(
                func.lower(InstrumentORM.symbol).contains(needle, autoescape=True),
                func.lower(InstrumentORM.name).contains(needle, autoescape=True),
            )
        )
        if active_only:
            db_query = db_query.filter(InstrumentORM.is_active == True)  # noqa: E712
        return [self._to_domain(i) for i in db_query.order_by(InstrumentORM.symbol).all()]

    def update_price(self, instrument: Instrument) -> Instrument:
        """Write an instrument's price fields."""
        orm_instrument = self._db.query(InstrumentORM).filter(
            InstrumentORM.symbol == instrument.symbol
        ).first()
        if not orm_instrument:
            raise NotFoundError("Instrument", instrument.symbol)

        orm_instrument.current_price = instrument.current_price
        orm_instrument.price_change = instrument.price_change
        orm_instrument.price_change_percent = instrument.price_change_percent
        orm_instrument.updated_at_est = to_db_time(instrument.updated_at_est)
        self._db.flush()
        return self._to_domain(orm_instrument)

    def count(self) -> int:
        """Number of instruments stored."""
        return self._db.query(InstrumentORM).count()

    @staticmethod
    def _to_domain(orm: InstrumentORM) -> Instrument:
        """Convert ORM model to domain model."""
        return Instrument(
            symbol=orm.symbol,
            name=orm.name,
            current_price=from_db_decimal(orm.current_price),
            price_change=from_db_decimal(orm.price_change),
            price_change_percent=from_db_decimal(orm.price_change_percent),
            is_active=orm.is_active,
            updated_at_est=from_db_time(orm.updated_at_est),
        )
