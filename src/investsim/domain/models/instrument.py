"""Instrument domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Instrument:
    """Tradable symbol with its current simulated market price."""

    symbol: str
    name: str
    current_price: Decimal
    price_change: Decimal = field(default_factory=lambda: Decimal("0"))
    price_change_percent: Decimal = field(default_factory=lambda: Decimal("0"))
    is_active: bool = True
    updated_at_est: Optional[datetime] = field(default=None)
