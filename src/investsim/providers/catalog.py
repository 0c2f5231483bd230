"""Default instrument catalog for a fresh simulator database."""

from decimal import Decimal

from investsim.domain.models import Instrument

# symbol -> (name, price, change, change percent)
_DEFAULT_INSTRUMENTS: dict[str, tuple[str, Decimal, Decimal, Decimal]] = {
    "AAPL": ("Apple Inc.", Decimal("182.52"), Decimal("2.45"), Decimal("1.36")),
    "GOOGL": ("Alphabet Inc.", Decimal("134.85"), Decimal("-1.23"), Decimal("-0.90")),
    "MSFT": ("Microsoft Corporation", Decimal("378.91"), Decimal("5.67"), Decimal("1.52")),
    "TSLA": ("Tesla, Inc.", Decimal("251.34"), Decimal("-8.92"), Decimal("-3.43")),
    "AMZN": ("Amazon.com Inc.", Decimal("145.73"), Decimal("3.21"), Decimal("2.25")),
    "NVDA": ("NVIDIA Corporation", Decimal("467.89"), Decimal("12.45"), Decimal("2.73")),
    "META": ("Meta Platforms Inc.", Decimal("334.56"), Decimal("-2.34"), Decimal("-0.69")),
    "JPM": ("JPMorgan Chase & Co.", Decimal("156.78"), Decimal("1.89"), Decimal("1.22")),
    "JNJ": ("Johnson & Johnson", Decimal("162.45"), Decimal("0.87"), Decimal("0.54")),
    "V": ("Visa Inc.", Decimal("234.67"), Decimal("2.11"), Decimal("0.91")),
    "SPY": ("SPDR S&P 500 ETF Trust", Decimal("485.25"), Decimal("1.15"), Decimal("0.24")),
    "QQQ": ("Invesco QQQ Trust", Decimal("418.75"), Decimal("1.25"), Decimal("0.30")),
    "VTI": ("Vanguard Total Stock Market ETF", Decimal("252.30"), Decimal("0.50"), Decimal("0.20")),
}


def default_instruments() -> list[Instrument]:
    """Fresh Instrument records for the default catalog."""
    return [
        Instrument(
            symbol=symbol,
            name=name,
            current_price=price,
            price_change=change,
            price_change_percent=change_pct,
            is_active=True,
        )
        for symbol, (name, price, change, change_pct) in _DEFAULT_INSTRUMENTS.items()
    ]
