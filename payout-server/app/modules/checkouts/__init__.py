"""Checkout domain exports"""

from .exceptions import CheckoutAlreadyProcessedError, CheckoutNotFoundError
from .models import STATUS_APPROVED, STATUS_PENDING, STATUS_REJECTED, CheckoutRequest

__all__ = [
    "STATUS_APPROVED",
    "STATUS_PENDING",
    "STATUS_REJECTED",
    "CheckoutRequest",
    "CheckoutAlreadyProcessedError",
    "CheckoutNotFoundError",
]
