"""Price source module."""

from investsim.providers.price_feed import PriceFeed, PriceFeedFactory
from investsim.providers.instrument_price_feed import InstrumentPriceFeed, instrument_to_quote
from investsim.providers.catalog import default_instruments

__all__ = [
    "PriceFeed",
    "PriceFeedFactory",
    "InstrumentPriceFeed",
    "instrument_to_quote",
    "default_instruments",
]
