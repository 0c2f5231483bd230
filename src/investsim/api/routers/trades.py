"""Trade endpoints: buy and sell at the current price."""

from fastapi import APIRouter, Depends

from investsim.api.deps import get_trading_service
from investsim.api.schemas import (
    AccountResponse,
    HoldingResponse,
    TradeRequest,
    TradeResponse,
    TransactionResponse,
)
from investsim.domain.views import TradeResult
from investsim.services import TradingService

router = APIRouter(prefix="/trades", tags=["trades"])


def _to_response(result: TradeResult) -> TradeResponse:
    return TradeResponse(
        transaction=TransactionResponse.model_validate(result.transaction),
        account=AccountResponse.model_validate(result.account),
        holding=HoldingResponse.model_validate(result.holding) if result.holding else None,
    )


@router.post("/buy", response_model=TradeResponse, status_code=201)
def buy(
    data: TradeRequest,
    service: TradingService = Depends(get_trading_service),
) -> TradeResponse:
    """Buy shares at the instrument's current price."""
    return _to_response(service.buy(data.user_id, data.symbol, data.shares))


@router.post("/sell", response_model=TradeResponse, status_code=201)
def sell(
    data: TradeRequest,
    service: TradingService = Depends(get_trading_service),
) -> TradeResponse:
    """Sell shares at the instrument's current price. Holding is omitted once fully sold."""
    return _to_response(service.sell(data.user_id, data.symbol, data.shares))
