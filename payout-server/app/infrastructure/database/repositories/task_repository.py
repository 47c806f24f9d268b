"""SQLAlchemy implementation for task repository"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Task as TaskModel
from app.modules.tasks.models import STATUS_COMPLETED, Task, TaskCreateInput


class SqlTaskRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_task(self, task_id: str) -> Task | None:
        stmt = select(TaskModel).where(TaskModel.id == task_id)
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    async def create_task(self, payload: TaskCreateInput) -> Task:
        model = TaskModel(
            title=payload.title,
            category=payload.category,
            priority=payload.priority,
            note=payload.note or "",
            deadline_date=payload.deadline_date,
            deadline_time=payload.deadline_time,
            status=payload.status,
            cost_cents=payload.cost_cents,
            assigned_to=payload.assigned_to,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def list_for_user(self, user_id: str) -> Sequence[Task]:
        stmt = (
            select(TaskModel)
            .where(TaskModel.assigned_to == user_id)
            .order_by(desc(TaskModel.created_at))
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def update_status(self, task_id: str, status: str) -> Task | None:
        stmt = (
            update(TaskModel)
            .where(TaskModel.id == task_id)
            .values(status=status)
            .execution_options(synchronize_session="fetch")
            .returning(TaskModel)
        )
        return await self._first(stmt)

    async def mark_completed_if_open(self, task_id: str) -> Task | None:
        stmt = (
            update(TaskModel)
            .where(TaskModel.id == task_id, TaskModel.status != STATUS_COMPLETED)
            .values(status=STATUS_COMPLETED)
            .execution_options(synchronize_session="fetch")
            .returning(TaskModel)
        )
        return await self._first(stmt)

    async def claim_credit(self, task_id: str) -> Task | None:
        stmt = (
            update(TaskModel)
            .where(TaskModel.id == task_id, TaskModel.credited_at.is_(None))
            .values(credited_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session="fetch")
            .returning(TaskModel)
        )
        return await self._first(stmt)

    async def _first(self, stmt) -> Task | None:
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    @staticmethod
    def _to_domain(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            title=model.title,
            status=model.status,
            cost_cents=model.cost_cents,
            assigned_to=model.assigned_to,
            category=model.category,
            priority=model.priority,
            note=model.note,
            deadline_date=model.deadline_date,
            deadline_time=model.deadline_time,
            credited_at=model.credited_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
