"""Holding repository protocol."""

from typing import Protocol

from investsim.domain.models import Holding


class HoldingRepository(Protocol):
    """Interface for holding data access."""

    def list_by_portfolio(self, portfolio_id: str) -> list[Holding]:
        """List all holdings of a portfolio, ordered by symbol."""
        ...

    def upsert(self, holding: Holding) -> Holding:
        """Insert a holding or overwrite the one with the same holding_id."""
        ...

    def delete(self, holding_id: str) -> None:
        """Delete a holding."""
        ...
