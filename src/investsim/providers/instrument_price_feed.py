"""Price feed backed by the instrument table."""

from investsim.core.exceptions import NotFoundError
from investsim.domain.models import Instrument
from investsim.domain.views import PriceQuote
from investsim.repositories.protocols import InstrumentRepository


def instrument_to_quote(instrument: Instrument) -> PriceQuote:
    return PriceQuote(
        symbol=instrument.symbol,
        price=instrument.current_price,
        change=instrument.price_change,
        change_percent=instrument.price_change_percent,
        name=instrument.name,
        as_of=instrument.updated_at_est,
    )


class InstrumentPriceFeed:
    """
    Reads prices straight from the store's instrument records.

    Bound to a repository of an open unit of work, so the price a trade
    executes at is read in the same store transaction as the balances.
    """

    def __init__(self, instrument_repo: InstrumentRepository):
        self._instruments = instrument_repo

    def get_instrument(self, symbol: str) -> Instrument:
        instrument = self._instruments.get(symbol.upper())
        if instrument is None:
            raise NotFoundError("Instrument", symbol.upper())
        return instrument

    def get_current_price(self, symbol: str) -> PriceQuote:
        """Return the current quote for a symbol."""
        return instrument_to_quote(self.get_instrument(symbol))

    def get_prices(self, symbols: list[str]) -> dict[str, PriceQuote]:
        """Return quotes for the known symbols among `symbols`."""
        result: dict[str, PriceQuote] = {}
        for symbol in symbols:
            instrument = self._instruments.get(symbol.upper())
            if instrument is not None:
                result[instrument.symbol] = instrument_to_quote(instrument)
        return result
