"""Domain services for worker accounts."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ValidationError
from app.infrastructure.database.repositories.user_repository import SqlUserRepository
from app.infrastructure.database.transaction import SqlTransaction

from .exceptions import UserAlreadyExistsError, UserNotFoundError
from .models import ROLE_EMPLOYEE, ROLE_MANAGER, UserAccount, UserCreateInput
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Registration and lookup of worker accounts."""

    def __init__(self, repository: UserRepository, transaction: SqlTransaction) -> None:
        self._repository = repository
        self._transaction = transaction

    @classmethod
    def with_session(cls, session: AsyncSession) -> "UserService":
        return cls(SqlUserRepository(session), SqlTransaction(session))

    async def require(self, user_id: str) -> UserAccount:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def list_users(self) -> Sequence[UserAccount]:
        return await self._repository.list_users()

    async def create_user(self, payload: UserCreateInput) -> UserAccount:
        full_name = payload.full_name.strip()
        email = payload.email.strip().lower()
        if not full_name or not email:
            raise ValidationError("Missing required fields")

        async with self._transaction("create_user"):
            if await self._repository.get_by_email(email) is not None:
                raise UserAlreadyExistsError(email)
            # the very first account administers the ledger
            role = ROLE_MANAGER if await self._repository.count_users() == 0 else ROLE_EMPLOYEE
            user = await self._repository.create_user(full_name=full_name, email=email, role=role)

        logger.info("Registered user %s as %s", user.id, user.role)
        return user
