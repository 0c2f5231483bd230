"""SQLAlchemy implementation of HoldingRepository."""

from sqlalchemy.orm import Session

from investsim.domain.models import Holding
from investsim.repositories.sqlalchemy.orm_models import (
    HoldingORM,
    to_db_time,
    from_db_time,
    from_db_decimal,
)


class SqlAlchemyHoldingRepository:
    """SQLAlchemy-backed holding repository."""

    def __init__(self, db: Session):
        self._db = db

    def list_by_portfolio(self, portfolio_id: str) -> list[Holding]:
        """List all holdings of a portfolio, ordered by symbol."""
        orm_holdings = (
            self._db.query(HoldingORM)
            .filter(HoldingORM.portfolio_id == portfolio_id)
            .order_by(HoldingORM.symbol)
            .all()
        )
        return [self._to_domain(h) for h in orm_holdings]

    def upsert(self, holding: Holding) -> Holding:
        """Insert a holding or overwrite the one with the same holding_id."""
        orm_holding = self._db.query(HoldingORM).filter(
            HoldingORM.holding_id == holding.holding_id
        ).first()

        if orm_holding:
            orm_holding.shares = holding.shares
            orm_holding.avg_price = holding.avg_price
            orm_holding.current_price = holding.current_price
            orm_holding.company_name = holding.company_name
            orm_holding.updated_at_est = to_db_time(holding.updated_at_est)
        else:
            orm_holding = HoldingORM(
                holding_id=holding.holding_id,
                portfolio_id=holding.portfolio_id,
                symbol=holding.symbol,
                company_name=holding.company_name,
                shares=holding.shares,
                avg_price=holding.avg_price,
                current_price=holding.current_price,
                updated_at_est=to_db_time(holding.updated_at_est),
            )
            self._db.add(orm_holding)

        self._db.flush()
        return self._to_domain(orm_holding)

    def delete(self, holding_id: str) -> None:
        """Delete a holding."""
        self._db.query(HoldingORM).filter(
            HoldingORM.holding_id == holding_id
        ).delete()
        self._db.flush()

    @staticmethod
    def _to_domain(orm: HoldingORM) -> Holding:
        """Convert ORM model to domain model."""
        return Holding(
            holding_id=orm.holding_id,
            portfolio_id=orm.portfolio_id,
            symbol=orm.symbol,
            shares=from_db_decimal(orm.shares),
            avg_price=from_db_decimal(orm.avg_price),
            current_price=from_db_decimal(orm.current_price),
            company_name=orm.company_name,
            updated_at_est=from_db_time(orm.updated_at_est),
        )
