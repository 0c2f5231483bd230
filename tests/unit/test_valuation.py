"""
Unit tests for portfolio valuation.

Tests cover:
- Per-holding metrics (value, invested, gain/loss, percent)
- Zero cost basis guard
- Portfolio totals against the initial funding baseline
- Fallback to last execution price when no quote exists
- Deterministic ordering and repeatable results
"""

from decimal import Decimal

from investsim.services.valuation import (
    INITIAL_FUNDING,
    compute_holding_metrics,
    compute_portfolio_summary,
)
from investsim.domain.models import Holding
from investsim.domain.views import PriceQuote
from tests.conftest import make_account


def make_holding(
    symbol: str = "AAPL",
    shares: str = "10",
    avg_price: str = "100",
    current_price: str = "100",
) -> Holding:
    return Holding(
        holding_id=f"h-{symbol}",
        portfolio_id="pf-1",
        symbol=symbol,
        shares=Decimal(shares),
        avg_price=Decimal(avg_price),
        current_price=Decimal(current_price),
    )


# =============================================================================
# HOLDING METRICS TESTS
# =============================================================================


class TestHoldingMetrics:
    """Tests for compute_holding_metrics."""

    def test_gain(self):
        """
        GIVEN 10 shares bought at avg $100
        WHEN the price is $120
        THEN value $1,200, invested $1,000, gain $200 (20%)
        """
        metrics = compute_holding_metrics(make_holding(), Decimal("120"))

        assert metrics.current_value == Decimal("1200.00")
        assert metrics.total_invested == Decimal("1000.00")
        assert metrics.gain_loss == Decimal("200.00")
        assert metrics.gain_loss_percent == Decimal("20.00")

    def test_loss_from_quote(self):
        """
        GIVEN 4 shares at avg $50
        WHEN the quote is $45
        THEN loss is -$20 (-10%)
        """
        quote = PriceQuote(symbol="AAPL", price=Decimal("45"))
        metrics = compute_holding_metrics(make_holding(shares="4", avg_price="50"), quote)

        assert metrics.current_price == Decimal("45")
        assert metrics.gain_loss == Decimal("-20.00")
        assert metrics.gain_loss_percent == Decimal("-10.00")

    def test_zero_cost_basis_reports_zero_percent(self):
        """
        GIVEN a holding with avg price 0
        WHEN I compute metrics
        THEN gain_loss_percent is 0 rather than a division error
        """
        metrics = compute_holding_metrics(make_holding(avg_price="0"), Decimal("10"))

        assert metrics.total_invested == Decimal("0")
        assert metrics.gain_loss == Decimal("100.00")
        assert metrics.gain_loss_percent == Decimal("0")


# =============================================================================
# PORTFOLIO SUMMARY TESTS
# =============================================================================


class TestPortfolioSummary:
    """Tests for compute_portfolio_summary."""

    def test_empty_portfolio(self):
        """
        GIVEN a fresh account with $10,000 cash and no holdings
        WHEN I compute the summary
        THEN total value is $10,000 and gain/loss is 0
        """
        summary = compute_portfolio_summary(make_account(), [])

        assert summary.total_value == Decimal("10000.00")
        assert summary.total_holdings_value == Decimal("0")
        assert summary.total_gain_loss == Decimal("0")
        assert summary.total_gain_loss_percent == Decimal("0")
        assert summary.holdings == ()

    def test_totals_include_cash_savings_and_holdings(self):
        """
        GIVEN cash $9,000, savings $500 and 10 AAPL at avg $100
        WHEN AAPL trades at $120
        THEN total value $10,700, gain $700 (7%)
        """
        account = make_account(cash="9000.00", savings="500.00")
        summary = compute_portfolio_summary(
            account,
            [make_holding()],
            {"AAPL": PriceQuote(symbol="AAPL", price=Decimal("120"))},
        )

        assert summary.cash_balance == Decimal("9000.00")
        assert summary.savings_balance == Decimal("500.00")
        assert summary.total_holdings_value == Decimal("1200.00")
        assert summary.total_invested_in_holdings == Decimal("1000.00")
        assert summary.total_value == Decimal("10700.00")
        assert summary.total_gain_loss == Decimal("700.00")
        assert summary.total_gain_loss_percent == Decimal("7.00")

    def test_missing_price_uses_last_execution_price(self):
        """
        GIVEN a holding last executed at $95 with no quote available
        WHEN I compute the summary
        THEN the holding is valued at $95
        """
        holding = make_holding(shares="2", current_price="95")
        summary = compute_portfolio_summary(make_account(cash="0"), [holding], {})

        assert summary.holdings[0].current_price == Decimal("95")
        assert summary.total_holdings_value == Decimal("190.00")

    def test_holdings_sorted_by_symbol(self):
        holdings = [make_holding("TSLA"), make_holding("AAPL"), make_holding("MSFT")]
        summary = compute_portfolio_summary(make_account(), holdings)

        assert [m.symbol for m in summary.holdings] == ["AAPL", "MSFT", "TSLA"]

    def test_same_inputs_same_summary(self):
        account = make_account(cash="1234.56")
        holdings = [make_holding(shares="3.3333", avg_price="33.3333")]
        prices = {"AAPL": Decimal("41.2345")}

        first = compute_portfolio_summary(account, holdings, prices)
        second = compute_portfolio_summary(account, holdings, prices)

        assert first == second

    def test_rounds_totals_once(self):
        """
        GIVEN three holdings each worth $0.005 at full precision
        WHEN I compute the summary
        THEN holdings total is $0.02 (0.015 rounded half up), not the sum of rounded parts
        """
        holdings = [
            make_holding("A", shares="0.5", avg_price="0.01"),
            make_holding("B", shares="0.5", avg_price="0.01"),
            make_holding("C", shares="0.5", avg_price="0.01"),
        ]
        prices = {s: Decimal("0.01") for s in ("A", "B", "C")}
        summary = compute_portfolio_summary(make_account(cash="0"), holdings, prices)

        assert summary.total_holdings_value == Decimal("0.02")

    def test_custom_initial_funding(self):
        summary = compute_portfolio_summary(
            make_account(cash="5500.00"),
            [],
            initial_funding=Decimal("5000.00"),
        )

        assert summary.total_gain_loss == Decimal("500.00")
        assert summary.total_gain_loss_percent == Decimal("10.00")

    def test_zero_initial_funding_reports_zero_percent(self):
        summary = compute_portfolio_summary(make_account(), [], initial_funding=Decimal("0"))

        assert summary.total_gain_loss == Decimal("10000.00")
        assert summary.total_gain_loss_percent == Decimal("0")

    def test_default_initial_funding(self):
        assert INITIAL_FUNDING == Decimal("10000.00")
