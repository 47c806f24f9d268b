"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import User as UserModel
from app.modules.users.models import UserAccount


class SqlUserRepository:
    """User repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: str) -> UserAccount | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_email(self, email: str) -> UserAccount | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def count_users(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(UserModel))
        return int(result.scalar_one())

    async def list_users(self) -> Sequence[UserAccount]:
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.full_name)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_user(self, *, full_name: str, email: str, role: str) -> UserAccount:
        model = UserModel(full_name=full_name, email=email, role=role, balance_cents=0)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UserModel | None) -> UserAccount | None:
        if model is None:
            return None
        return UserAccount(
            id=str(model.id),
            full_name=model.full_name,
            email=model.email,
            role=model.role,
            balance_cents=model.balance_cents,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
