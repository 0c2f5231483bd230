"""Pydantic schemas for trade endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from investsim.domain.models.enums import TransactionType
from investsim.api.schemas.account import AccountResponse, HoldingResponse


class TradeRequest(BaseModel):
    """Request schema for a buy or sell at the current price."""

    user_id: str = Field(..., min_length=1, max_length=255, description="Account owner")
    symbol: str = Field(..., min_length=1, max_length=20, description="Instrument symbol")
    shares: Decimal = Field(..., gt=0, description="Number of shares (fractional allowed)")

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()


class TransactionResponse(BaseModel):
    """Response schema for a single trade log entry."""

    model_config = {"from_attributes": True}

    txn_id: str
    portfolio_id: str
    symbol: str
    company_name: Optional[str] = None
    txn_type: TransactionType
    shares: Decimal
    price: Decimal
    total: Decimal
    created_at_est: Optional[datetime] = None


class TransactionListResponse(BaseModel):
    """Response schema for listing trades."""

    transactions: list[TransactionResponse]
    count: int


class TradeResponse(BaseModel):
    """Response schema for an executed trade."""

    transaction: TransactionResponse
    account: AccountResponse
    holding: Optional[HoldingResponse] = None
