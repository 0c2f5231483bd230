"""Service layer - ledger core and store orchestration."""

from investsim.services.valuation import (
    INITIAL_FUNDING,
    compute_holding_metrics,
    compute_portfolio_summary,
)
from investsim.services.trade_executor import execute_buy, execute_sell
from investsim.services.transfer_executor import (
    execute_transfer,
    open_fixed_deposit,
    mature_fixed_deposit,
    calculate_maturity_amount,
    get_interest_rate,
)
from investsim.services.portfolio_service import PortfolioService
from investsim.services.trading_service import TradingService
from investsim.services.banking_service import BankingService
from investsim.services.price_update_service import PriceUpdateService

__all__ = [
    "INITIAL_FUNDING",
    "compute_holding_metrics",
    "compute_portfolio_summary",
    "execute_buy",
    "execute_sell",
    "execute_transfer",
    "open_fixed_deposit",
    "mature_fixed_deposit",
    "calculate_maturity_amount",
    "get_interest_rate",
    "PortfolioService",
    "TradingService",
    "BankingService",
    "PriceUpdateService",
]
