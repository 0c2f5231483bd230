"""Simulated market: random-walk price updates for active instruments."""

import dataclasses
import logging
import random
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from investsim.core.money import HUNDRED
from investsim.core.timezone import now_eastern
from investsim.domain.models import Instrument
from investsim.providers import default_instruments
from investsim.repositories.protocols import UnitOfWorkFactory

logger = logging.getLogger(__name__)

_PRICE_STEP = Decimal("0.0001")


def random_walk_price(
    instrument: Instrument,
    change_fraction: Decimal,
    price_floor: Decimal = Decimal("0.01"),
    at: Optional[datetime] = None,
) -> Instrument:
    """
    Move an instrument's price by change_fraction (0.01 = +1%).

    The new price never drops below price_floor; price_change and
    price_change_percent describe the move actually applied.
    """
    old_price = instrument.current_price
    new_price = max(old_price * (1 + change_fraction), price_floor)
    new_price = new_price.quantize(_PRICE_STEP, rounding=ROUND_HALF_UP)
    change = new_price - old_price
    change_percent = (change / old_price * HUNDRED) if old_price else Decimal("0")

    return dataclasses.replace(
        instrument,
        current_price=new_price,
        price_change=change,
        price_change_percent=change_percent.quantize(_PRICE_STEP, rounding=ROUND_HALF_UP),
        updated_at_est=at or now_eastern(),
    )


class PriceUpdateService:
    """
    Drives the simulated price feed.

    Runs independently of trading: each update walks every active
    instrument once and commits all new prices together.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        max_change: Decimal = Decimal("0.02"),
        price_floor: Decimal = Decimal("0.01"),
        rng: Optional[random.Random] = None,
    ):
        self._uow_factory = uow_factory
        self._max_change = max_change
        self._price_floor = price_floor
        self._rng = rng or random.Random()

    def _next_change(self) -> Decimal:
        # Uniform in [-max_change, +max_change)
        fraction = Decimal(str(self._rng.random() - 0.5)) * 2 * self._max_change
        return fraction.quantize(Decimal("0.000001"), rounding=ROUND_HALF_UP)

    def update_prices(self) -> list[Instrument]:
        """Apply one random-walk step to every active instrument."""
        at = now_eastern()
        updated: list[Instrument] = []
        with self._uow_factory() as uow:
            for instrument in uow.instruments.list_all(active_only=True):
                moved = random_walk_price(instrument, self._next_change(), self._price_floor, at)
                updated.append(uow.instruments.update_price(moved))

        logger.info("Updated prices for %d instruments", len(updated))
        return updated

    def list_instruments(
        self,
        active_only: bool = False,
        query: Optional[str] = None,
    ) -> list[Instrument]:
        """List instruments by symbol, optionally only those whose symbol or name contains query."""
        with self._uow_factory() as uow:
            if query and query.strip():
                return uow.instruments.search(query, active_only=active_only)
            return uow.instruments.list_all(active_only=active_only)

    def seed_instruments(self, instruments: Optional[Iterable[Instrument]] = None) -> int:
        """Load the instrument catalog into an empty store. Returns the number added."""
        with self._uow_factory() as uow:
            if uow.instruments.count() > 0:
                return 0
            added = 0
            for instrument in instruments if instruments is not None else default_instruments():
                uow.instruments.create(instrument)
                added += 1

        logger.info("Seeded %d instruments", added)
        return added
