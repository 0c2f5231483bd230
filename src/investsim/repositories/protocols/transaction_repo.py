"""Transaction repository protocol."""

from typing import Protocol, Optional

from investsim.domain.models import Transaction


class TransactionRepository(Protocol):
    """Interface for the append-only trade log."""

    def append(self, transaction: Transaction) -> Transaction:
        """Append a trade to the log."""
        ...

    def list_by_portfolio(
        self,
        portfolio_id: str,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List trades for a portfolio, newest first."""
        ...
