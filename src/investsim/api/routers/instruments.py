"""Instrument endpoints: catalog listing, search and simulated price refresh."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from investsim.api.deps import get_price_update_service
from investsim.api.schemas import InstrumentResponse, InstrumentListResponse
from investsim.services import PriceUpdateService

router = APIRouter(prefix="/instruments", tags=["instruments"])


@router.get("", response_model=InstrumentListResponse)
def list_instruments(
    active_only: bool = Query(False),
    q: Optional[str] = Query(None, max_length=100, description="Match symbol or company name"),
    service: PriceUpdateService = Depends(get_price_update_service),
) -> InstrumentListResponse:
    """List instruments with their current prices, optionally filtered by a search term."""
    instruments = service.list_instruments(active_only=active_only, query=q)
    return InstrumentListResponse(
        instruments=[InstrumentResponse.model_validate(i) for i in instruments],
        count=len(instruments),
    )


@router.post("/refresh", response_model=InstrumentListResponse)
def refresh_prices(
    service: PriceUpdateService = Depends(get_price_update_service),
) -> InstrumentListResponse:
    """Advance the simulated market by one random-walk step."""
    instruments = service.update_prices()
    return InstrumentListResponse(
        instruments=[InstrumentResponse.model_validate(i) for i in instruments],
        count=len(instruments),
    )
