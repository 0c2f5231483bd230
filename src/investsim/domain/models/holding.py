"""Holding domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Holding:
    """
    Open position in one symbol, unique per (portfolio_id, symbol).

    avg_price is the weighted-average cost per share; it changes on buys only.
    current_price is the price of the last trade that touched the holding.
    """

    holding_id: str
    portfolio_id: str
    symbol: str
    shares: Decimal
    avg_price: Decimal
    current_price: Decimal
    company_name: Optional[str] = None
    updated_at_est: Optional[datetime] = field(default=None)

    @property
    def cost_basis(self) -> Decimal:
        """Total amount paid for the shares still held."""
        return self.shares * self.avg_price
