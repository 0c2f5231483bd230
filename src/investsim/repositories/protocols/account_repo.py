"""Account repository protocol."""

from typing import Protocol, Optional

from investsim.domain.models import Account


class AccountRepository(Protocol):
    """Interface for account data access."""

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        ...

    def get_by_user_id(self, user_id: str, for_update: bool = False) -> Optional[Account]:
        """
        Retrieve the account owned by a user.

        for_update=True locks the row until the surrounding unit of work ends.
        """
        ...

    def update(self, account: Account) -> Account:
        """Write new balances for an existing account."""
        ...
