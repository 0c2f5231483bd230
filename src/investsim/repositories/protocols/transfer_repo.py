"""Fund transfer and fixed deposit repository protocols."""

from datetime import datetime
from typing import Protocol, Optional

from investsim.domain.models import FundTransfer, FixedDeposit


class FundTransferRepository(Protocol):
    """Interface for the append-only fund transfer log."""

    def append(self, transfer: FundTransfer) -> FundTransfer:
        """Append a transfer record."""
        ...

    def list_by_user(self, user_id: str, limit: Optional[int] = None) -> list[FundTransfer]:
        """List transfers for a user, newest first."""
        ...


class FixedDepositRepository(Protocol):
    """Interface for fixed deposit data access."""

    def create(self, deposit: FixedDeposit) -> FixedDeposit:
        """Persist a new deposit."""
        ...

    def get(self, deposit_id: str) -> Optional[FixedDeposit]:
        """Retrieve a deposit by ID."""
        ...

    def update_status(self, deposit: FixedDeposit) -> FixedDeposit:
        """Persist a deposit's status change."""
        ...

    def list_by_user(self, user_id: str) -> list[FixedDeposit]:
        """List a user's deposits, newest first."""
        ...

    def list_due(self, as_of: datetime, user_id: Optional[str] = None) -> list[FixedDeposit]:
        """List ACTIVE deposits whose maturity_date is on or before as_of."""
        ...
