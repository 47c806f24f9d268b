"""Balance domain service.

Every method here runs inside the caller's transaction; none of them commit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import InsufficientBalanceError
from app.infrastructure.database.repositories.balance_repository import SqlBalanceRepository
from app.modules.users.exceptions import UserNotFoundError

from .models import ENTRY_CREDIT, ENTRY_REFUND, ENTRY_RESERVE, BalanceEntryRecord
from .repository import BalanceRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BalanceService:
    repository: BalanceRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "BalanceService":
        return cls(SqlBalanceRepository(session))

    async def credit_for_task(self, *, user_id: str, task_id: str, amount_cents: int) -> int:
        balance = await self.repository.credit(user_id, amount_cents)
        if balance is None:
            raise UserNotFoundError(user_id)
        await self.repository.add_entry(
            user_id=user_id,
            amount_cents=amount_cents,
            type=ENTRY_CREDIT,
            task_id=task_id,
            description="Task completed",
        )
        logger.info(
            "Credited %s cents to user %s for task %s",
            amount_cents,
            user_id,
            task_id,
            extra={"user_id": user_id, "task_id": task_id, "amount_cents": amount_cents},
        )
        return balance

    async def reserve(self, *, user_id: str, amount_cents: int) -> int:
        balance = await self.repository.debit_if_covered(user_id, amount_cents)
        if balance is None:
            if await self.repository.get_balance(user_id) is None:
                raise UserNotFoundError(user_id)
            raise InsufficientBalanceError()
        logger.info(
            "Reserved %s cents from user %s",
            amount_cents,
            user_id,
            extra={"user_id": user_id, "amount_cents": -amount_cents},
        )
        return balance

    async def record_reservation(self, *, user_id: str, checkout_id: str, amount_cents: int) -> None:
        await self.repository.add_entry(
            user_id=user_id,
            amount_cents=-amount_cents,
            type=ENTRY_RESERVE,
            checkout_id=checkout_id,
            description="Checkout requested",
        )

    async def refund_checkout(self, *, user_id: str, checkout_id: str, amount_cents: int) -> int:
        balance = await self.repository.credit(user_id, amount_cents)
        if balance is None:
            raise UserNotFoundError(user_id)
        await self.repository.add_entry(
            user_id=user_id,
            amount_cents=amount_cents,
            type=ENTRY_REFUND,
            checkout_id=checkout_id,
            description="Checkout rejected",
        )
        logger.info(
            "Refunded %s cents to user %s for checkout %s",
            amount_cents,
            user_id,
            checkout_id,
            extra={"user_id": user_id, "checkout_id": checkout_id, "amount_cents": amount_cents},
        )
        return balance

    async def list_entries(self, user_id: str, limit: int = 50, offset: int = 0) -> list[BalanceEntryRecord]:
        return list(await self.repository.list_entries(user_id, limit, offset))
