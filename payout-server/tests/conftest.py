"""Shared fixtures: a fresh SQLite file database per test, services and an HTTP client."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import LedgerSettings, Settings, get_settings
from app.db import models
from app.infrastructure.database import Base, build_engine, build_session_factory
from app.interfaces.http.deps import get_db_session
from app.main import app


@pytest.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}", sqlite_busy_timeout=10)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed(session_factory):
    """Insert rows directly, bypassing the services under test."""

    class Seeder:
        async def user(self, balance_cents: int = 0, email: str | None = None, role: str = "employee") -> str:
            async with session_factory() as session:
                user = models.User(
                    full_name="Test Worker",
                    email=email or f"{models.generate_uuid()}@example.com",
                    role=role,
                    balance_cents=balance_cents,
                )
                session.add(user)
                await session.commit()
                return user.id

        async def task(self, assigned_to: str, cost_cents: int = 2500, status: str = "pending") -> str:
            async with session_factory() as session:
                task = models.Task(
                    title="Deliver report",
                    category="ops",
                    priority="high",
                    status=status,
                    cost_cents=cost_cents,
                    assigned_to=assigned_to,
                )
                session.add(task)
                await session.commit()
                return task.id

    return Seeder()


@pytest.fixture
def read(session_factory):
    """Read committed state through a fresh session."""

    class Reader:
        async def balance(self, user_id: str) -> int:
            async with session_factory() as session:
                user = await session.get(models.User, user_id)
                return user.balance_cents

        async def task(self, task_id: str) -> models.Task:
            async with session_factory() as session:
                return await session.get(models.Task, task_id)

        async def checkout(self, checkout_id: str) -> models.CheckoutRequest | None:
            async with session_factory() as session:
                return await session.get(models.CheckoutRequest, checkout_id)

        async def count(self, model) -> int:
            from sqlalchemy import func, select

            async with session_factory() as session:
                result = await session.execute(select(func.count()).select_from(model))
                return result.scalar_one()

    return Reader()


@pytest.fixture
def refund_on_reject():
    """Enable refunds on rejection for HTTP tests."""
    app.dependency_overrides[get_settings] = lambda: Settings(ledger=LedgerSettings(refund_on_reject=True))
    yield
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
async def client(session_factory):
    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.pop(get_db_session, None)
