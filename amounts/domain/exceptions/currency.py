from .base import DomainException


class CurrencyError(DomainException):
    """Base exception for currency metadata errors."""

    pass


class CurrencyNotFoundError(CurrencyError):
    def __init__(self, code: str):
        self.code = code

        super().__init__(f"Currency {code} not found")


class CurrencySourceError(CurrencyError):
    pass


class CurrencySourceUnavailableError(CurrencySourceError):
    def __init__(self, source_name: str, reason: str):
        self.source_name = source_name

        super().__init__(f"Currency source '{source_name}' is unavailable: {reason}")


class InvalidCurrencyDataError(CurrencySourceError):
    def __init__(self, reason: str):
        super().__init__(f"Invalid currency data: {reason}")


class CurrencyStorageError(CurrencyError):
    """Raised when currency metadata cannot be written."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation

        super().__init__(f"Currency storage error during {operation}: {reason}")
