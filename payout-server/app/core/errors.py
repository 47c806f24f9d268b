"""Error hierarchy shared by every ledger module.

Each error carries the HTTP status it maps to so the API layer can render
``{"error": message}`` without knowing about individual exception types.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for all ledger failures."""

    http_status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, str]:
        return {"error": self.message}


class ValidationError(LedgerError):
    """Missing or malformed input."""

    http_status = 400


class NotFoundError(LedgerError):
    """A referenced entity does not exist."""

    http_status = 404


class InsufficientBalanceError(LedgerError):
    """The account balance does not cover the requested amount."""

    http_status = 400

    def __init__(self, message: str = "Insufficient balance") -> None:
        super().__init__(message)


class AlreadyProcessedError(LedgerError):
    """The entity is already in a terminal state."""

    http_status = 400


class StorageError(LedgerError):
    """A transaction failed and was rolled back."""

    http_status = 500

    def __init__(self, message: str, operation: str = "unknown") -> None:
        super().__init__(message)
        self.operation = operation


__all__ = [
    "LedgerError",
    "ValidationError",
    "NotFoundError",
    "InsufficientBalanceError",
    "AlreadyProcessedError",
    "StorageError",
]
