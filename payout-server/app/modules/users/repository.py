"""Repository protocol for worker accounts."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import UserAccount


class UserRepository(Protocol):
    async def get_by_id(self, user_id: str) -> UserAccount | None:
        ...

    async def get_by_email(self, email: str) -> UserAccount | None:
        ...

    async def count_users(self) -> int:
        ...

    async def list_users(self) -> Sequence[UserAccount]:
        ...

    async def create_user(self, *, full_name: str, email: str, role: str) -> UserAccount:
        ...
