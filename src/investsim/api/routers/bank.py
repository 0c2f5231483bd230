"""Bank endpoints: cash/savings transfers and fixed deposits."""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query

from investsim.api.deps import get_banking_service
from investsim.api.schemas import (
    AccountResponse,
    TransferRequest,
    TransferResponse,
    FundTransferResponse,
    FundTransferListResponse,
    FixedDepositRequest,
    FixedDepositResponse,
    FixedDepositResultResponse,
    FixedDepositListResponse,
    DepositQuoteResponse,
    MatureDepositsRequest,
    MatureDepositsResponse,
)
from investsim.domain.views import DepositResult
from investsim.services import BankingService

router = APIRouter(prefix="/bank", tags=["bank"])


def _deposit_result(result: DepositResult) -> FixedDepositResultResponse:
    return FixedDepositResultResponse(
        account=AccountResponse.model_validate(result.account),
        deposit=FixedDepositResponse.model_validate(result.deposit),
        transfer=FundTransferResponse.model_validate(result.transfer),
    )


@router.post("/transfers", response_model=TransferResponse, status_code=201)
def create_transfer(
    data: TransferRequest,
    service: BankingService = Depends(get_banking_service),
) -> TransferResponse:
    """Move money between cash and savings."""
    result = service.transfer(data.user_id, data.direction, data.amount)
    return TransferResponse(
        account=AccountResponse.model_validate(result.account),
        transfer=FundTransferResponse.model_validate(result.transfer),
    )


@router.get("/{user_id}/transfers", response_model=FundTransferListResponse)
def list_transfers(
    user_id: str,
    limit: Optional[int] = Query(10, ge=1, le=500),
    service: BankingService = Depends(get_banking_service),
) -> FundTransferListResponse:
    """Transfer history, newest first."""
    transfers = service.list_transfers(user_id, limit=limit)
    return FundTransferListResponse(
        transfers=[FundTransferResponse.model_validate(t) for t in transfers],
        count=len(transfers),
    )


@router.post("/deposits", response_model=FixedDepositResultResponse, status_code=201)
def create_fixed_deposit(
    data: FixedDepositRequest,
    service: BankingService = Depends(get_banking_service),
) -> FixedDepositResultResponse:
    """Lock cash into a fixed deposit."""
    return _deposit_result(service.create_fixed_deposit(data.user_id, data.amount, data.tenure_months))


@router.get("/deposits/quote", response_model=DepositQuoteResponse)
def quote_fixed_deposit(
    amount: Decimal = Query(..., gt=0),
    tenure_months: int = Query(12, gt=0, le=120),
    service: BankingService = Depends(get_banking_service),
) -> DepositQuoteResponse:
    """Preview rate and maturity amount for a deposit."""
    return DepositQuoteResponse.model_validate(service.quote_fixed_deposit(amount, tenure_months))


@router.post("/deposits/mature", response_model=MatureDepositsResponse)
def mature_deposits(
    data: MatureDepositsRequest,
    service: BankingService = Depends(get_banking_service),
) -> MatureDepositsResponse:
    """Pay out every active deposit due on or before as_of."""
    results = service.mature_deposits(as_of=data.as_of, user_id=data.user_id)
    return MatureDepositsResponse(
        matured=[_deposit_result(r) for r in results],
        count=len(results),
    )


@router.get("/{user_id}/deposits", response_model=FixedDepositListResponse)
def list_deposits(
    user_id: str,
    service: BankingService = Depends(get_banking_service),
) -> FixedDepositListResponse:
    deposits = service.list_deposits(user_id)
    return FixedDepositListResponse(
        deposits=[FixedDepositResponse.model_validate(d) for d in deposits],
        count=len(deposits),
    )
