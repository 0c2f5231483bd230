"""View models for valuation and executor outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from investsim.domain.models import (
    Account,
    Holding,
    Transaction,
    FundTransfer,
    FixedDeposit,
)


@dataclass(frozen=True)
class PriceQuote:
    """Current price of a symbol as reported by a price feed."""

    symbol: str
    price: Decimal
    change: Decimal = field(default_factory=lambda: Decimal("0"))
    change_percent: Decimal = field(default_factory=lambda: Decimal("0"))
    name: Optional[str] = None
    as_of: Optional[datetime] = None


@dataclass(frozen=True)
class HoldingMetrics:
    """Mark-to-market figures for a single holding."""

    symbol: str
    shares: Decimal
    avg_price: Decimal
    current_price: Decimal
    current_value: Decimal
    total_invested: Decimal
    gain_loss: Decimal
    gain_loss_percent: Decimal
    company_name: Optional[str] = None


@dataclass(frozen=True)
class PortfolioSummary:
    """Portfolio-level totals derived from one account/holdings/prices snapshot."""

    cash_balance: Decimal
    savings_balance: Decimal
    total_holdings_value: Decimal
    total_value: Decimal
    total_gain_loss: Decimal
    total_gain_loss_percent: Decimal
    total_invested_in_holdings: Decimal
    holdings: tuple[HoldingMetrics, ...] = ()


@dataclass(frozen=True)
class TradeResult:
    """
    Snapshot after a buy or sell.

    holding is the upserted position, or None when a sell closed it out
    (removed_holding_id then names the deleted record).
    """

    account: Account
    holdings: list[Holding]
    transaction: Transaction
    holding: Optional[Holding] = None
    removed_holding_id: Optional[str] = None


@dataclass(frozen=True)
class TransferResult:
    """Snapshot after a cash/savings transfer."""

    account: Account
    transfer: FundTransfer


@dataclass(frozen=True)
class DepositResult:
    """Snapshot after opening or maturing a fixed deposit."""

    account: Account
    deposit: FixedDeposit
    transfer: FundTransfer


@dataclass(frozen=True)
class DepositQuote:
    """Preview of a fixed deposit's terms before it is opened."""

    amount: Decimal
    tenure_months: int
    interest_rate: Decimal
    maturity_amount: Decimal
    interest_earned: Decimal
