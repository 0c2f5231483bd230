"""Trade executor: pure buy/sell application over account and holding snapshots.

Nothing here touches the store. Each function validates every precondition
before building its result, and returns fresh snapshots without mutating
its inputs; persisting the result as one unit is the caller's job
(see TradingService).
"""

import dataclasses
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from investsim.core.exceptions import (
    ValidationError,
    InsufficientFundsError,
    InsufficientSharesError,
)
from investsim.core.money import (
    ZERO,
    PRICE_PLACES,
    SHARE_PLACES,
    Number,
    require_positive,
    quantize_money,
    quantize_avg_price,
)
from investsim.core.timezone import now_eastern
from investsim.domain.models import Account, Holding, Transaction, TransactionType
from investsim.domain.views import TradeResult


def normalize_symbol(symbol: str) -> str:
    if not symbol or not symbol.strip():
        raise ValidationError("Trade requires a symbol")
    return symbol.strip().upper()


def _find_holding(holdings: Sequence[Holding], symbol: str) -> Optional[Holding]:
    for holding in holdings:
        if holding.symbol == symbol:
            return holding
    return None


def weighted_average_price(
    old_shares: Decimal,
    old_avg_price: Decimal,
    shares: Decimal,
    cost: Decimal,
) -> Decimal:
    """
    Weighted-average cost per share after adding `shares` bought for `cost`.

    `cost` is the cash actually charged for the purchase, so the position's
    cost basis grows by exactly what left the cash balance.

    (old_shares × old_avg_price + cost) / (old_shares + shares)
    """
    new_shares = old_shares + shares
    return quantize_avg_price((old_shares * old_avg_price + cost) / new_shares)


def execute_buy(
    account: Account,
    holdings: Sequence[Holding],
    symbol: str,
    company_name: Optional[str],
    shares: Number,
    price: Number,
    executed_at: Optional[datetime] = None,
) -> TradeResult:
    """
    Buy `shares` of `symbol` at `price`.

    Raises:
        ValidationError: shares or price not positive, or too precise
        InsufficientFundsError: cash does not cover shares × price
    """
    symbol = normalize_symbol(symbol)
    shares = require_positive(shares, "shares", SHARE_PLACES)
    price = require_positive(price, "price", PRICE_PLACES)
    total = quantize_money(shares * price)

    if account.cash_balance < total:
        raise InsufficientFundsError(str(total), str(account.cash_balance))

    executed_at = executed_at or now_eastern()
    existing = _find_holding(holdings, symbol)

    if existing:
        holding = dataclasses.replace(
            existing,
            shares=existing.shares + shares,
            avg_price=weighted_average_price(existing.shares, existing.avg_price, shares, total),
            current_price=price,
            company_name=existing.company_name or company_name,
            updated_at_est=executed_at,
        )
    else:
        holding = Holding(
            holding_id=str(uuid.uuid4()),
            portfolio_id=account.portfolio_id,
            symbol=symbol,
            shares=shares,
            avg_price=quantize_avg_price(total / shares),
            current_price=price,
            company_name=company_name,
            updated_at_est=executed_at,
        )

    new_holdings = [h for h in holdings if h.symbol != symbol] + [holding]
    transaction = Transaction(
        txn_id=str(uuid.uuid4()),
        portfolio_id=account.portfolio_id,
        symbol=symbol,
        txn_type=TransactionType.BUY,
        shares=shares,
        price=price,
        total=total,
        company_name=holding.company_name,
        created_at_est=executed_at,
    )
    new_account = dataclasses.replace(
        account,
        cash_balance=account.cash_balance + transaction.net_cash_impact,
        updated_at_est=executed_at,
    )

    return TradeResult(
        account=new_account,
        holdings=new_holdings,
        transaction=transaction,
        holding=holding,
    )


def execute_sell(
    account: Account,
    holdings: Sequence[Holding],
    symbol: str,
    shares: Number,
    price: Number,
    executed_at: Optional[datetime] = None,
) -> TradeResult:
    """
    Sell `shares` of `symbol` at `price`.

    The remaining position keeps its avg_price. Selling the whole position
    removes the holding.

    Raises:
        ValidationError: shares or price not positive, or too precise
        InsufficientSharesError: symbol not held, or fewer shares held than requested
    """
    symbol = normalize_symbol(symbol)
    shares = require_positive(shares, "shares", SHARE_PLACES)
    price = require_positive(price, "price", PRICE_PLACES)

    existing = _find_holding(holdings, symbol)
    available = existing.shares if existing else ZERO
    if existing is None or available < shares:
        raise InsufficientSharesError(symbol, str(shares), str(available))

    executed_at = executed_at or now_eastern()
    total = quantize_money(shares * price)
    remaining = existing.shares - shares

    others = [h for h in holdings if h.symbol != symbol]
    if remaining == ZERO:
        holding = None
        new_holdings = others
        removed_holding_id = existing.holding_id
    else:
        holding = dataclasses.replace(
            existing,
            shares=remaining,
            current_price=price,
            updated_at_est=executed_at,
        )
        new_holdings = others + [holding]
        removed_holding_id = None

    transaction = Transaction(
        txn_id=str(uuid.uuid4()),
        portfolio_id=account.portfolio_id,
        symbol=symbol,
        txn_type=TransactionType.SELL,
        shares=shares,
        price=price,
        total=total,
        company_name=existing.company_name,
        created_at_est=executed_at,
    )
    new_account = dataclasses.replace(
        account,
        cash_balance=account.cash_balance + transaction.net_cash_impact,
        updated_at_est=executed_at,
    )

    return TradeResult(
        account=new_account,
        holdings=new_holdings,
        transaction=transaction,
        holding=holding,
        removed_holding_id=removed_holding_id,
    )
