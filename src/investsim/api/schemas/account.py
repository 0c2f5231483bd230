"""Pydantic schemas for account and portfolio endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class AccountResponse(BaseModel):
    """Response schema for a user's money account."""

    model_config = {"from_attributes": True}

    account_id: str
    user_id: str
    portfolio_id: str
    cash_balance: Decimal
    savings_balance: Decimal
    created_at_est: Optional[datetime] = None
    updated_at_est: Optional[datetime] = None


class HoldingResponse(BaseModel):
    """Response schema for a stored holding."""

    model_config = {"from_attributes": True}

    holding_id: str
    symbol: str
    company_name: Optional[str] = None
    shares: Decimal
    avg_price: Decimal
    current_price: Decimal
    updated_at_est: Optional[datetime] = None


class HoldingMetricsResponse(BaseModel):
    """Response schema for a holding marked to market."""

    model_config = {"from_attributes": True}

    symbol: str
    company_name: Optional[str] = None
    shares: Decimal
    avg_price: Decimal
    current_price: Decimal
    current_value: Decimal
    total_invested: Decimal
    gain_loss: Decimal
    gain_loss_percent: Decimal


class PortfolioSummaryResponse(BaseModel):
    """Response schema for portfolio totals."""

    model_config = {"from_attributes": True}

    cash_balance: Decimal
    savings_balance: Decimal
    total_holdings_value: Decimal
    total_value: Decimal
    total_gain_loss: Decimal
    total_gain_loss_percent: Decimal
    total_invested_in_holdings: Decimal
    holdings: list[HoldingMetricsResponse]
