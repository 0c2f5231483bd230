"""Pydantic schemas for transfer and fixed deposit endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from investsim.domain.models.enums import TransferType, MoneyAccount, DepositStatus
from investsim.api.schemas.account import AccountResponse


class TransferRequest(BaseModel):
    """Request schema for a cash/savings transfer."""

    user_id: str = Field(..., min_length=1, max_length=255)
    direction: TransferType = Field(..., description="CASH_TO_SAVINGS or SAVINGS_TO_CASH")
    amount: Decimal = Field(..., gt=0)


class FundTransferResponse(BaseModel):
    """Response schema for a transfer audit record."""

    model_config = {"from_attributes": True}

    transfer_id: str
    user_id: str
    transfer_type: TransferType
    amount: Decimal
    from_account: MoneyAccount
    to_account: MoneyAccount
    description: str
    created_at_est: Optional[datetime] = None


class TransferResponse(BaseModel):
    """Response schema for an executed transfer."""

    account: AccountResponse
    transfer: FundTransferResponse


class FundTransferListResponse(BaseModel):
    transfers: list[FundTransferResponse]
    count: int


class FixedDepositRequest(BaseModel):
    """Request schema for opening a fixed deposit."""

    user_id: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., gt=0)
    tenure_months: int = Field(default=12, gt=0, le=120)


class FixedDepositResponse(BaseModel):
    """Response schema for a fixed deposit."""

    model_config = {"from_attributes": True}

    deposit_id: str
    user_id: str
    amount: Decimal
    tenure_months: int
    interest_rate: Decimal
    maturity_amount: Decimal
    maturity_date: datetime
    status: DepositStatus
    created_at_est: Optional[datetime] = None


class FixedDepositResultResponse(BaseModel):
    """Response schema for an opened or matured deposit."""

    account: AccountResponse
    deposit: FixedDepositResponse
    transfer: FundTransferResponse


class FixedDepositListResponse(BaseModel):
    deposits: list[FixedDepositResponse]
    count: int


class DepositQuoteResponse(BaseModel):
    """Response schema for a deposit preview."""

    model_config = {"from_attributes": True}

    amount: Decimal
    tenure_months: int
    interest_rate: Decimal
    maturity_amount: Decimal
    interest_earned: Decimal


class MatureDepositsRequest(BaseModel):
    """Request schema for paying out due deposits."""

    as_of: Optional[datetime] = Field(default=None, description="Defaults to now (US/Eastern)")
    user_id: Optional[str] = None


class MatureDepositsResponse(BaseModel):
    matured: list[FixedDepositResultResponse]
    count: int
