"""Portfolio valuation: pure functions over account/holding/price snapshots."""

from decimal import Decimal
from typing import Iterable, Mapping, Optional, Union

from investsim.core.money import (
    ZERO,
    HUNDRED,
    quantize_money,
    quantize_percent,
)
from investsim.domain.models import Account, Holding
from investsim.domain.views import HoldingMetrics, PortfolioSummary, PriceQuote

INITIAL_FUNDING = Decimal("10000.00")


def _gain_loss_percent(gain_loss: Decimal, invested: Decimal) -> Decimal:
    # Zero cost basis (e.g. a zero-priced holding) reports 0%, not an error
    if invested > ZERO:
        return gain_loss / invested * HUNDRED
    return ZERO


def compute_holding_metrics(
    holding: Holding,
    instrument_price: Union[PriceQuote, Decimal],
) -> HoldingMetrics:
    """
    Mark a holding to market.

    current_value = shares × current price
    total_invested = shares × avg_price
    gain_loss = current_value - total_invested
    gain_loss_percent = gain_loss / total_invested × 100 (0 when nothing invested)
    """
    price = instrument_price.price if isinstance(instrument_price, PriceQuote) else instrument_price

    current_value = holding.shares * price
    total_invested = holding.cost_basis
    gain_loss = current_value - total_invested

    return HoldingMetrics(
        symbol=holding.symbol,
        shares=holding.shares,
        avg_price=holding.avg_price,
        current_price=price,
        current_value=quantize_money(current_value),
        total_invested=quantize_money(total_invested),
        gain_loss=quantize_money(gain_loss),
        gain_loss_percent=quantize_percent(_gain_loss_percent(gain_loss, total_invested)),
        company_name=holding.company_name,
    )


def compute_portfolio_summary(
    account: Account,
    holdings: Iterable[Holding],
    prices: Optional[Mapping[str, Union[PriceQuote, Decimal]]] = None,
    initial_funding: Decimal = INITIAL_FUNDING,
) -> PortfolioSummary:
    """
    Aggregate an account and its holdings into portfolio totals.

    Holdings without an entry in `prices` are valued at their last
    execution price. Sums run at full precision and are rounded once,
    so identical inputs always give identical results.
    """
    prices = prices or {}

    metrics: list[HoldingMetrics] = []
    holdings_value = ZERO
    invested = ZERO

    for holding in sorted(holdings, key=lambda h: h.symbol):
        quote = prices.get(holding.symbol)
        price = holding.current_price if quote is None else (
            quote.price if isinstance(quote, PriceQuote) else quote
        )
        metrics.append(compute_holding_metrics(holding, price))
        holdings_value += holding.shares * price
        invested += holding.cost_basis

    total_value = account.cash_balance + account.savings_balance + holdings_value
    total_gain_loss = total_value - initial_funding
    if initial_funding > ZERO:
        total_gain_loss_percent = total_gain_loss / initial_funding * HUNDRED
    else:
        total_gain_loss_percent = ZERO

    return PortfolioSummary(
        cash_balance=account.cash_balance,
        savings_balance=account.savings_balance,
        total_holdings_value=quantize_money(holdings_value),
        total_value=quantize_money(total_value),
        total_gain_loss=quantize_money(total_gain_loss),
        total_gain_loss_percent=quantize_percent(total_gain_loss_percent),
        total_invested_in_holdings=quantize_money(invested),
        holdings=tuple(metrics),
    )
