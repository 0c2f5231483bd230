"""Portfolio endpoints: account, holdings, valuation and trade history."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from investsim.api.deps import get_portfolio_service
from investsim.api.schemas import (
    AccountResponse,
    HoldingResponse,
    PortfolioSummaryResponse,
    TransactionResponse,
    TransactionListResponse,
)
from investsim.services import PortfolioService

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("/{user_id}", response_model=PortfolioSummaryResponse)
def get_portfolio_summary(
    user_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioSummaryResponse:
    """Value the portfolio at current prices. Creates the account on first access."""
    summary = service.get_summary(user_id)
    return PortfolioSummaryResponse.model_validate(summary)


@router.get("/{user_id}/account", response_model=AccountResponse)
def get_account(
    user_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> AccountResponse:
    """Get (or provision) the user's account balances."""
    return AccountResponse.model_validate(service.get_or_create_account(user_id))


@router.get("/{user_id}/holdings", response_model=list[HoldingResponse])
def list_holdings(
    user_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> list[HoldingResponse]:
    return [HoldingResponse.model_validate(h) for h in service.get_holdings(user_id)]


@router.get("/{user_id}/transactions", response_model=TransactionListResponse)
def list_transactions(
    user_id: str,
    limit: Optional[int] = Query(50, ge=1, le=500),
    service: PortfolioService = Depends(get_portfolio_service),
) -> TransactionListResponse:
    """Trade history, newest first."""
    transactions = service.list_transactions(user_id, limit=limit)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        count=len(transactions),
    )
