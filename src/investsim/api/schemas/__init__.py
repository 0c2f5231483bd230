"""Pydantic schemas for API request/response."""

from investsim.api.schemas.account import (
    AccountResponse,
    HoldingResponse,
    HoldingMetricsResponse,
    PortfolioSummaryResponse,
)
from investsim.api.schemas.transaction import (
    TradeRequest,
    TradeResponse,
    TransactionResponse,
    TransactionListResponse,
)
from investsim.api.schemas.bank import (
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
from investsim.api.schemas.instrument import InstrumentResponse, InstrumentListResponse

__all__ = [
    "AccountResponse",
    "HoldingResponse",
    "HoldingMetricsResponse",
    "PortfolioSummaryResponse",
    "TradeRequest",
    "TradeResponse",
    "TransactionResponse",
    "TransactionListResponse",
    "TransferRequest",
    "TransferResponse",
    "FundTransferResponse",
    "FundTransferListResponse",
    "FixedDepositRequest",
    "FixedDepositResponse",
    "FixedDepositResultResponse",
    "FixedDepositListResponse",
    "DepositQuoteResponse",
    "MatureDepositsRequest",
    "MatureDepositsResponse",
    "InstrumentResponse",
    "InstrumentListResponse",
]
