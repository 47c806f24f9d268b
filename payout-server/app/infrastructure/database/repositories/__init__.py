"""SQLAlchemy-backed repository implementations."""

from .balance_repository import SqlBalanceRepository
from .checkout_repository import SqlCheckoutRepository
from .task_repository import SqlTaskRepository
from .user_repository import SqlUserRepository

__all__ = [
    "SqlBalanceRepository",
    "SqlCheckoutRepository",
    "SqlTaskRepository",
    "SqlUserRepository",
]
