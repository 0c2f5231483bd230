"""Core utilities and shared functionality."""

from investsim.core.timezone import (
    now_eastern,
    to_eastern,
    add_months,
    EASTERN_TZ,
)
from investsim.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    InsufficientFundsError,
    InsufficientSharesError,
    InsufficientBalanceError,
    StoreError,
)

__all__ = [
    "now_eastern",
    "to_eastern",
    "add_months",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "InsufficientFundsError",
    "InsufficientSharesError",
    "InsufficientBalanceError",
    "StoreError",
]
