"""Scoped transaction that resolves to exactly one commit or one rollback."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StorageError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def atomic(session: AsyncSession, operation: str = "transaction") -> AsyncIterator[AsyncSession]:
    """Run the block as one unit of work.

    The session commits when the block exits cleanly. Any exception rolls the
    whole unit back; SQLAlchemy failures surface as ``StorageError`` so callers
    never see a driver exception or a half-applied change.
    """
    try:
        yield session
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        logger.error("%s: integrity error, rolled back: %s", operation, exc)
        raise StorageError("Integrity constraint violated", operation) from exc
    except OperationalError as exc:
        await session.rollback()
        logger.error("%s: operational error, rolled back: %s", operation, exc)
        raise StorageError("Database unavailable or busy", operation) from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error("%s: database error, rolled back: %s", operation, exc)
        raise StorageError("Database operation failed", operation) from exc
    except BaseException:
        await session.rollback()
        raise


class SqlTransaction:
    """Transaction scope bound to one session, handed to domain services."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def __call__(self, operation: str = "transaction"):
        return atomic(self._session, operation)
