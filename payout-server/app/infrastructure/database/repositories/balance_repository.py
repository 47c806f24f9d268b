"""SQLAlchemy implementation for balance movements.

Balance changes are single conditional ``UPDATE`` statements so the database
row lock, not a prior ``SELECT``, decides whether the change applies.
"""

from __future__ import annotations

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import BalanceEntry, User
from app.modules.balances.models import BalanceEntryRecord


class SqlBalanceRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_balance(self, user_id: str) -> int | None:
        stmt = select(User.balance_cents).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def credit(self, user_id: str, amount_cents: int) -> int | None:
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(balance_cents=User.balance_cents + amount_cents)
            .execution_options(synchronize_session="fetch")
            .returning(User.balance_cents)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def debit_if_covered(self, user_id: str, amount_cents: int) -> int | None:
        stmt = (
            update(User)
            .where(User.id == user_id, User.balance_cents >= amount_cents)
            .values(balance_cents=User.balance_cents - amount_cents)
            .execution_options(synchronize_session="fetch")
            .returning(User.balance_cents)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

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
        entry = BalanceEntry(
            user_id=user_id,
            amount_cents=amount_cents,
            type=type,
            task_id=task_id,
            checkout_id=checkout_id,
            description=description,
        )
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return self._to_record(entry)

    async def list_entries(self, user_id: str, limit: int, offset: int) -> list[BalanceEntryRecord]:
        stmt = (
            select(BalanceEntry)
            .where(BalanceEntry.user_id == user_id)
            .order_by(desc(BalanceEntry.created_at))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_record(row) for row in result.scalars().all()]

    @staticmethod
    def _to_record(model: BalanceEntry) -> BalanceEntryRecord:
        return BalanceEntryRecord(
            id=model.id,
            user_id=model.user_id,
            amount_cents=model.amount_cents,
            type=model.type,
            task_id=model.task_id,
            checkout_id=model.checkout_id,
            description=model.description,
            created_at=model.created_at,
        )
