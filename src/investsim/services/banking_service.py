"""Banking service: cash/savings transfers and fixed deposits against the ledger store."""

import logging
from datetime import datetime
from typing import Optional

from investsim.core.exceptions import AppError
from investsim.core.money import Number
from investsim.core.timezone import now_eastern
from investsim.domain.models import FundTransfer, FixedDeposit, TransferType, DepositStatus
from investsim.domain.views import TransferResult, DepositResult, DepositQuote
from investsim.repositories.protocols import UnitOfWorkFactory
from investsim.services.portfolio_service import load_account
from investsim.services.transfer_executor import (
    execute_transfer,
    open_fixed_deposit,
    mature_fixed_deposit,
    quote_fixed_deposit,
)

logger = logging.getLogger(__name__)


class BankingService:
    """Moves money between cash, savings and fixed deposits, one unit of work per operation."""

    def __init__(self, uow_factory: UnitOfWorkFactory):
        self._uow_factory = uow_factory

    def transfer(self, user_id: str, direction: TransferType, amount: Number) -> TransferResult:
        """
        Move money between cash and savings.

        Raises:
            NotFoundError: unknown account
            ValidationError: bad direction or amount
            InsufficientBalanceError: source balance too low
        """
        try:
            with self._uow_factory() as uow:
                account = load_account(uow, user_id, for_update=True)
                result = execute_transfer(account, direction, amount)
                uow.accounts.update(result.account)
                uow.transfers.append(result.transfer)
        except AppError as e:
            logger.warning("Transfer rejected for %s (%s %s): %s", user_id, direction, amount, e.message)
            raise

        logger.info(
            "%s %s for %s",
            result.transfer.transfer_type.value,
            result.transfer.amount,
            user_id,
        )
        return result

    def create_fixed_deposit(
        self,
        user_id: str,
        amount: Number,
        tenure_months: int,
    ) -> DepositResult:
        """
        Open a fixed deposit funded from cash.

        Raises:
            NotFoundError: unknown account
            ValidationError: bad amount or tenure
            InsufficientFundsError: cash too low
        """
        try:
            with self._uow_factory() as uow:
                account = load_account(uow, user_id, for_update=True)
                result = open_fixed_deposit(account, amount, tenure_months)
                uow.accounts.update(result.account)
                uow.deposits.create(result.deposit)
                uow.transfers.append(result.transfer)
        except AppError as e:
            logger.warning("Fixed deposit rejected for %s (%s): %s", user_id, amount, e.message)
            raise

        logger.info(
            "Fixed deposit %s opened for %s: %s for %s months at %s%%, matures %s",
            result.deposit.deposit_id,
            user_id,
            result.deposit.amount,
            result.deposit.tenure_months,
            result.deposit.interest_rate,
            result.deposit.maturity_date.date().isoformat(),
        )
        return result

    def quote_fixed_deposit(self, amount: Number, tenure_months: int) -> DepositQuote:
        """Preview deposit terms."""
        return quote_fixed_deposit(amount, tenure_months)

    def mature_deposits(
        self,
        as_of: Optional[datetime] = None,
        user_id: Optional[str] = None,
    ) -> list[DepositResult]:
        """
        Pay out every active deposit whose maturity date is on or before as_of.

        Each deposit matures in its own unit of work; one that has already
        been matured by a concurrent run is skipped.
        """
        as_of = as_of or now_eastern()
        with self._uow_factory() as uow:
            due_ids = [d.deposit_id for d in uow.deposits.list_due(as_of, user_id=user_id)]

        results: list[DepositResult] = []
        for deposit_id in due_ids:
            with self._uow_factory() as uow:
                deposit = uow.deposits.get(deposit_id)
                if deposit is None or deposit.status != DepositStatus.ACTIVE:
                    continue
                account = load_account(uow, deposit.user_id, for_update=True)
                result = mature_fixed_deposit(account, deposit, at=as_of)
                uow.accounts.update(result.account)
                uow.deposits.update_status(result.deposit)
                uow.transfers.append(result.transfer)
            logger.info(
                "Fixed deposit %s matured for %s: paid %s",
                deposit_id,
                deposit.user_id,
                deposit.maturity_amount,
            )
            results.append(result)
        return results

    def list_transfers(self, user_id: str, limit: Optional[int] = None) -> list[FundTransfer]:
        """Transfer history, newest first."""
        with self._uow_factory() as uow:
            load_account(uow, user_id)
            return uow.transfers.list_by_user(user_id, limit=limit)

    def list_deposits(self, user_id: str) -> list[FixedDeposit]:
        """All fixed deposits of a user, newest first."""
        with self._uow_factory() as uow:
            load_account(uow, user_id)
            return uow.deposits.list_by_user(user_id)
