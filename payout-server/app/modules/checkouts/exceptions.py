"""Checkout domain specific exceptions."""

from app.core.errors import AlreadyProcessedError, NotFoundError


class CheckoutNotFoundError(NotFoundError):
    """Raised when the requested checkout request cannot be found."""

    def __init__(self, checkout_id: str | None = None) -> None:
        super().__init__("Checkout request not found")
        self.checkout_id = checkout_id


class CheckoutAlreadyProcessedError(AlreadyProcessedError):
    """Raised when approving or rejecting a request that is no longer pending."""

    def __init__(self, checkout_id: str, status: str) -> None:
        super().__init__("Checkout already processed")
        self.checkout_id = checkout_id
        self.status = status
