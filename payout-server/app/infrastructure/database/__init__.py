"""Database infrastructure helpers (engine, sessions, transactions)."""

from .base import Base
from .session import build_engine, build_session_factory, get_engine, get_session, init_db
from .transaction import SqlTransaction, atomic

__all__ = [
    "Base",
    "SqlTransaction",
    "atomic",
    "build_engine",
    "build_session_factory",
    "get_engine",
    "get_session",
    "init_db",
]
