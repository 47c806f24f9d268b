"""SQLAlchemy implementation for checkout repository"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import CheckoutRequest as CheckoutModel
from app.modules.checkouts.models import STATUS_PENDING, CheckoutRequest


class SqlCheckoutRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, *, user_id: str, amount_cents: int) -> CheckoutRequest:
        model = CheckoutModel(user_id=user_id, amount_cents=amount_cents, status=STATUS_PENDING)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def get(self, checkout_id: str) -> CheckoutRequest | None:
        stmt = select(CheckoutModel).where(CheckoutModel.id == checkout_id)
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    async def list_for_user(self, user_id: str) -> Sequence[CheckoutRequest]:
        stmt = (
            select(CheckoutModel)
            .where(CheckoutModel.user_id == user_id)
            .order_by(desc(CheckoutModel.created_at))
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def resolve_pending(
        self,
        checkout_id: str,
        *,
        status: str,
        processed_at: datetime,
        transfer_number: str | None = None,
    ) -> CheckoutRequest | None:
        values: dict = {"status": status, "processed_at": processed_at}
        if transfer_number is not None:
            values["transfer_number"] = transfer_number
        stmt = (
            update(CheckoutModel)
            .where(CheckoutModel.id == checkout_id, CheckoutModel.status == STATUS_PENDING)
            .values(**values)
            .execution_options(synchronize_session="fetch")
            .returning(CheckoutModel)
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    @staticmethod
    def _to_domain(model: CheckoutModel) -> CheckoutRequest:
        return CheckoutRequest(
            id=model.id,
            user_id=model.user_id,
            amount_cents=model.amount_cents,
            status=model.status,
            transfer_number=model.transfer_number,
            created_at=model.created_at,
            processed_at=model.processed_at,
        )
