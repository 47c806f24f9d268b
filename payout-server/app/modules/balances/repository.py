"""Repository protocol for balance operations."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import BalanceEntryRecord


class BalanceRepository(Protocol):
    async def get_balance(self, user_id: str) -> int | None:
        ...

    async def credit(self, user_id: str, amount_cents: int) -> int | None:
        """Add to the balance; returns the new balance or None if the user is absent."""
        ...

    async def debit_if_covered(self, user_id: str, amount_cents: int) -> int | None:
        """Subtract only when the balance covers it; None when nothing was debited."""
        ...

    async def add_entry(
        self,
        *,
        user_id: str,
        amount_cents: int,
        type: str,
        task_id: str | None = None,
        checkout_id: str | None = None,
        description: str | None = None,
    ) -> BalanceEntryRecord:
        ...

    async def list_entries(self, user_id: str, limit: int, offset: int) -> Sequence[BalanceEntryRecord]:
        ...
