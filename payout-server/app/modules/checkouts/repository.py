"""Repository interface for checkout requests."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .models import CheckoutRequest


class CheckoutRepository(Protocol):
    async def create(self, *, user_id: str, amount_cents: int) -> CheckoutRequest:
        ...

    async def get(self, checkout_id: str) -> CheckoutRequest | None:
        ...

    async def list_for_user(self, user_id: str) -> Sequence[CheckoutRequest]:
        ...

    async def resolve_pending(
        self,
        checkout_id: str,
        *,
        status: str,
        processed_at: datetime,
        transfer_number: str | None = None,
    ) -> CheckoutRequest | None:
        """Move a pending request to ``status``; None when it was not pending."""
        ...
