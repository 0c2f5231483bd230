"""Price feed protocol."""

from typing import Callable, Protocol

from investsim.domain.views import PriceQuote
from investsim.repositories.protocols import InstrumentRepository


class PriceFeed(Protocol):
    """
    Protocol for current-price sources.

    Implementations return the price that trades execute at and
    valuations mark to; unknown symbols raise NotFoundError.
    """

    def get_current_price(self, symbol: str) -> PriceQuote:
        """Return the current price, change and percent change for a symbol."""
        ...

    def get_prices(self, symbols: list[str]) -> dict[str, PriceQuote]:
        """
        Fetch quotes for multiple symbols.

        Missing symbols are omitted from result.
        """
        ...


# Builds a price feed over the instrument store of an open unit of work
PriceFeedFactory = Callable[[InstrumentRepository], PriceFeed]
