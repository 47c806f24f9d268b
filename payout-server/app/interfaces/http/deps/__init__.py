"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .services import (
    get_balance_service,
    get_checkout_service,
    get_task_service,
    get_user_service,
)

__all__ = [
    "get_db_session",
    "get_balance_service",
    "get_checkout_service",
    "get_task_service",
    "get_user_service",
]
