#!/usr/bin/env python3
"""
Generate a demo trading history for one simulated user.
Runs a few weeks of random-walk prices with buys, sells, a savings
transfer and a fixed deposit, all through the regular services.

Usage: from project root (after `pip install -e .`):
  python scripts/generate_demo_data.py [user_id] [--rounds N] [--seed S]
"""

import argparse
import random
from decimal import Decimal

from investsim.config.settings import get_settings
from investsim.config.logging_config import setup_logging
from investsim.core.exceptions import AppError
from investsim.domain.models import TransferType
from investsim.repositories.sqlalchemy import SqlAlchemyUnitOfWork, init_db
from investsim.services import (
    PortfolioService,
    TradingService,
    BankingService,
    PriceUpdateService,
)


def generate_demo_data(user_id: str, rounds: int, seed: int) -> None:
    """Simulate `rounds` price updates, trading after each one."""
    settings = get_settings()
    setup_logging()
    init_db()

    rng = random.Random(seed)
    uow_factory = SqlAlchemyUnitOfWork
    prices = PriceUpdateService(
        uow_factory,
        max_change=settings.price_walk_max_change,
        price_floor=settings.price_floor,
        rng=rng,
    )
    portfolio = PortfolioService(uow_factory, initial_funding=settings.initial_funding)
    trading = TradingService(uow_factory)
    banking = BankingService(uow_factory)

    added = prices.seed_instruments()
    print(f"✓ Instrument catalog ready ({added} added)")

    account = portfolio.get_or_create_account(user_id)
    print(f"✓ Account for '{user_id}' with ${account.cash_balance:,.2f} cash")

    symbols = [i.symbol for i in prices.list_instruments(active_only=True)]
    print(f"\nSimulating {rounds} rounds")
    print("=" * 60)

    trades = 0
    for round_no in range(1, rounds + 1):
        prices.update_prices()
        symbol = rng.choice(symbols)
        shares = Decimal(rng.randint(1, 20)) / Decimal(4)
        try:
            if rng.random() < 0.7:
                trading.buy(user_id, symbol, shares)
            else:
                trading.sell(user_id, symbol, shares)
            trades += 1
        except AppError as e:
            print(f"  round {round_no}: skipped ({e.message})")
    print(f"✓ {trades} trades executed")

    banking.transfer(user_id, TransferType.CASH_TO_SAVINGS, Decimal("500.00"))
    print("✓ Moved $500.00 to savings")

    deposit = banking.create_fixed_deposit(user_id, Decimal("1000.00"), 12).deposit
    print(
        f"✓ Fixed deposit of ${deposit.amount:,.2f} at {deposit.interest_rate}% "
        f"matures {deposit.maturity_date.date()} for ${deposit.maturity_amount:,.2f}"
    )

    summary = portfolio.get_summary(user_id)
    print("\n" + "=" * 60)
    print(f"Cash:          ${summary.cash_balance:,.2f}")
    print(f"Savings:       ${summary.savings_balance:,.2f}")
    print(f"Holdings:      ${summary.total_holdings_value:,.2f} ({len(summary.holdings)} positions)")
    print(f"Total value:   ${summary.total_value:,.2f}")
    print(f"Gain/loss:     ${summary.total_gain_loss:,.2f} ({summary.total_gain_loss_percent}%)")


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate demo simulator data")
    parser.add_argument("user_id", nargs="?", default="demo")
    parser.add_argument("--rounds", type=int, default=30)
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()
    generate_demo_data(args.user_id, args.rounds, args.seed)


if __name__ == "__main__":
    main()
