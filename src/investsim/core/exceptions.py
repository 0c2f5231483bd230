"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class InsufficientFundsError(AppError):
    """Raised when cash does not cover a purchase or a fixed deposit."""

    def __init__(self, required: str, available: str):
        super().__init__(
            f"Insufficient funds: required {required}, available {available}",
            code="INSUFFICIENT_FUNDS",
        )


class InsufficientSharesError(AppError):
    """Raised when attempting to sell more shares than owned."""

    def __init__(self, symbol: str, requested: str, available: str):
        super().__init__(
            f"Insufficient shares of {symbol}: requested {requested}, available {available}",
            code="INSUFFICIENT_SHARES",
        )


class InsufficientBalanceError(AppError):
    """Raised when a transfer's source account cannot cover the amount."""

    def __init__(self, account: str, requested: str, available: str):
        super().__init__(
            f"Insufficient {account} balance: requested {requested}, available {available}",
            code="INSUFFICIENT_BALANCE",
        )


class StoreError(AppError):
    """Raised when the ledger store fails during an operation."""

    def __init__(self, message: str):
        super().__init__(message, code="STORE_FAILURE")
