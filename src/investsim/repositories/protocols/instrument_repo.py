"""Instrument repository protocol."""

from typing import Protocol, Optional

from investsim.domain.models import Instrument


class InstrumentRepository(Protocol):
    """Interface for instrument metadata and price access."""

    def create(self, instrument: Instrument) -> Instrument:
        """Persist a new instrument."""
        ...

    def get(self, symbol: str) -> Optional[Instrument]:
        """Retrieve an instrument by symbol."""
        ...

    def list_all(self, active_only: bool = False) -> list[Instrument]:
        """List instruments ordered by symbol."""
        ...

    def search(self, query: str, active_only: bool = False) -> list[Instrument]:
        """Instruments whose symbol or name contains query (case-insensitive), ordered by symbol."""
        ...

    def update_price(self, instrument: Instrument) -> Instrument:
        """Write an instrument's price fields."""
        ...

    def count(self) -> int:
        """Number of instruments stored."""
        ...
