"""Domain service dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.modules.balances.service import BalanceService
from app.modules.checkouts.service import CheckoutService
from app.modules.tasks.service import TaskService
from app.modules.users.service import UserService

from .database import get_db_session


def get_user_service(db: AsyncSession = Depends(get_db_session)) -> UserService:
    return UserService.with_session(db)


def get_task_service(db: AsyncSession = Depends(get_db_session)) -> TaskService:
    return TaskService.with_session(db)


def get_balance_service(db: AsyncSession = Depends(get_db_session)) -> BalanceService:
    return BalanceService.with_session(db)


def get_checkout_service(
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> CheckoutService:
    return CheckoutService.with_session(db, refund_on_reject=settings.refund_on_reject)


__all__ = [
    "get_user_service",
    "get_task_service",
    "get_balance_service",
    "get_checkout_service",
]
