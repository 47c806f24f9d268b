"""Checkout domain service: withdrawal requests and their approval workflow.

A request moves ``pending -> approved`` or ``pending -> rejected`` exactly
once. Funds are reserved when the request is created, so overlapping
requests can never add up to more than the balance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ValidationError
from app.core.money import to_cents
from app.infrastructure.database.repositories.checkout_repository import SqlCheckoutRepository
from app.infrastructure.database.repositories.user_repository import SqlUserRepository
from app.infrastructure.database.transaction import SqlTransaction
from app.modules.balances.service import BalanceService
from app.modules.users.exceptions import UserNotFoundError
from app.modules.users.repository import UserRepository

from .exceptions import CheckoutAlreadyProcessedError, CheckoutNotFoundError
from .models import STATUS_APPROVED, STATUS_REJECTED, CheckoutRequest
from .repository import CheckoutRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CheckoutService:
    repository: CheckoutRepository
    users: UserRepository
    balances: BalanceService
    transaction: SqlTransaction
    refund_on_reject: bool = False

    @classmethod
    def with_session(cls, session: AsyncSession, *, refund_on_reject: bool = False) -> "CheckoutService":
        return cls(
            repository=SqlCheckoutRepository(session),
            users=SqlUserRepository(session),
            balances=BalanceService.with_session(session),
            transaction=SqlTransaction(session),
            refund_on_reject=refund_on_reject,
        )

    async def create_checkout_request(
        self,
        user_id: str | None,
        amount: Decimal | int | str | None,
    ) -> CheckoutRequest:
        user_id = (user_id or "").strip()
        if not user_id or amount is None:
            raise ValidationError("Missing user_id or amount")
        amount_cents = to_cents(amount)
        if amount_cents <= 0:
            raise ValidationError("Amount must be greater than zero")

        async with self.transaction("create_checkout_request"):
            await self.balances.reserve(user_id=user_id, amount_cents=amount_cents)
            checkout = await self.repository.create(user_id=user_id, amount_cents=amount_cents)
            await self.balances.record_reservation(
                user_id=user_id,
                checkout_id=checkout.id,
                amount_cents=amount_cents,
            )

        logger.info("Checkout %s created for user %s (%s cents)", checkout.id, user_id, amount_cents)
        return checkout

    async def approve_checkout_request(self, checkout_id: str, transfer_number: str | None) -> CheckoutRequest:
        transfer_number = (transfer_number or "").strip()
        if not transfer_number:
            raise ValidationError("Transaction number required")

        async with self.transaction("approve_checkout_request"):
            checkout = await self.repository.resolve_pending(
                checkout_id,
                status=STATUS_APPROVED,
                processed_at=datetime.now(timezone.utc),
                transfer_number=transfer_number,
            )
            if checkout is None:
                await self._raise_unresolvable(checkout_id)

        logger.info("Checkout %s approved with transfer %s", checkout_id, transfer_number)
        return checkout

    async def reject_checkout_request(self, checkout_id: str) -> CheckoutRequest:
        async with self.transaction("reject_checkout_request"):
            checkout = await self.repository.resolve_pending(
                checkout_id,
                status=STATUS_REJECTED,
                processed_at=datetime.now(timezone.utc),
            )
            if checkout is None:
                await self._raise_unresolvable(checkout_id)
            if self.refund_on_reject:
                await self.balances.refund_checkout(
                    user_id=checkout.user_id,
                    checkout_id=checkout.id,
                    amount_cents=checkout.amount_cents,
                )

        logger.info("Checkout %s rejected (refunded=%s)", checkout_id, self.refund_on_reject)
        return checkout

    async def get(self, checkout_id: str) -> CheckoutRequest:
        checkout = await self.repository.get(checkout_id)
        if checkout is None:
            raise CheckoutNotFoundError(checkout_id)
        return checkout

    async def list_for_user(self, user_id: str) -> Sequence[CheckoutRequest]:
        if await self.users.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)
        return await self.repository.list_for_user(user_id)

    async def _raise_unresolvable(self, checkout_id: str) -> None:
        current = await self.repository.get(checkout_id)
        if current is None:
            raise CheckoutNotFoundError(checkout_id)
        logger.warning("Checkout %s already %s, refusing transition", checkout_id, current.status)
        raise CheckoutAlreadyProcessedError(checkout_id, current.status)
