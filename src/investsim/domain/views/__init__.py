"""View models for service outputs."""

from investsim.domain.views.portfolio import (
    PriceQuote,
    HoldingMetrics,
    PortfolioSummary,
    TradeResult,
    TransferResult,
    DepositResult,
    DepositQuote,
)

__all__ = [
    "PriceQuote",
    "HoldingMetrics",
    "PortfolioSummary",
    "TradeResult",
    "TransferResult",
    "DepositResult",
    "DepositQuote",
]
