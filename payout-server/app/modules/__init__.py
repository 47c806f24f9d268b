"""Domain modules: users, tasks, balances and checkouts."""

from . import balances, checkouts, tasks, users

__all__ = [
    "balances",
    "checkouts",
    "tasks",
    "users",
]
