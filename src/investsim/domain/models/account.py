"""Account domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Account:
    """
    A user's money account.

    One per user. Holds the spendable cash balance and the savings balance;
    holdings are attached through portfolio_id. Both balances stay >= 0:
    operations that would overdraw are rejected, never clamped.
    """

    account_id: str
    user_id: str
    portfolio_id: str
    cash_balance: Decimal = field(default_factory=lambda: Decimal("0"))
    savings_balance: Decimal = field(default_factory=lambda: Decimal("0"))
    created_at_est: Optional[datetime] = field(default=None)
    updated_at_est: Optional[datetime] = field(default=None)
