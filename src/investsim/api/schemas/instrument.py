"""Pydantic schemas for instrument endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class InstrumentResponse(BaseModel):
    """Response schema for an instrument and its current price."""

    model_config = {"from_attributes": True}

    symbol: str
    name: str
    current_price: Decimal
    price_change: Decimal
    price_change_percent: Decimal
    is_active: bool
    updated_at_est: Optional[datetime] = None


class InstrumentListResponse(BaseModel):
    instruments: list[InstrumentResponse]
    count: int
