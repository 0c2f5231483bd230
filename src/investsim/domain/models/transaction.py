"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from investsim.domain.models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """
    Trade ledger entry. Append-only: never edited or deleted.

    total is shares * price rounded to cents.
    """

    txn_id: str
    portfolio_id: str
    symbol: str
    txn_type: TransactionType
    shares: Decimal
    price: Decimal
    total: Decimal
    company_name: Optional[str] = None
    created_at_est: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.txn_type, str):
            object.__setattr__(self, "txn_type", TransactionType(self.txn_type))

    @property
    def net_cash_impact(self) -> Decimal:
        """
        Cash effect of this trade.

        Positive = cash added, Negative = cash removed.
        """
        if self.txn_type == TransactionType.BUY:
            return -self.total
        return self.total
