"""Task domain service: status transitions and completion crediting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ValidationError
from app.infrastructure.database.repositories.task_repository import SqlTaskRepository
from app.infrastructure.database.repositories.user_repository import SqlUserRepository
from app.infrastructure.database.transaction import SqlTransaction
from app.modules.balances.service import BalanceService
from app.modules.users.exceptions import UserNotFoundError
from app.modules.users.repository import UserRepository

from .exceptions import TaskNotFoundError
from .models import MAX_STATUS_LENGTH, STATUS_COMPLETED, Task, TaskCreateInput, TaskStatusChange
from .repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TaskService:
    repository: TaskRepository
    users: UserRepository
    balances: BalanceService
    transaction: SqlTransaction

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TaskService":
        return cls(
            repository=SqlTaskRepository(session),
            users=SqlUserRepository(session),
            balances=BalanceService.with_session(session),
            transaction=SqlTransaction(session),
        )

    async def create_task(self, payload: TaskCreateInput) -> Task:
        if not payload.title.strip() or not payload.status.strip():
            raise ValidationError("Missing task fields")
        if len(payload.status) > MAX_STATUS_LENGTH:
            raise ValidationError("Task status is too long")
        if payload.cost_cents < 0:
            raise ValidationError("Task cost must not be negative")

        async with self.transaction("create_task"):
            if await self.users.get_by_id(payload.assigned_to) is None:
                raise UserNotFoundError(payload.assigned_to)
            task = await self.repository.create_task(payload)
        logger.info("Created task %s for user %s", task.id, task.assigned_to)
        return task

    async def list_for_user(self, user_id: str) -> Sequence[Task]:
        if await self.users.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)
        return await self.repository.list_for_user(user_id)

    async def set_task_status(self, task_id: str | None, new_status: str | None) -> TaskStatusChange:
        """Move a task to ``new_status``, crediting the assignee on completion.

        Completing an already completed task is a no-op, so callers may retry
        freely. A task is credited at most once over its lifetime, even if it
        is reopened and completed again. Status change and credit commit
        together or not at all.
        """
        task_id = (task_id or "").strip()
        new_status = (new_status or "").strip()
        if not task_id or not new_status:
            raise ValidationError("Missing task_id or status")
        if len(new_status) > MAX_STATUS_LENGTH:
            raise ValidationError("Task status is too long")

        async with self.transaction("set_task_status"):
            if new_status != STATUS_COMPLETED:
                task = await self.repository.update_status(task_id, new_status)
                if task is None:
                    raise TaskNotFoundError(task_id)
                logger.info("Task %s moved to %s", task_id, new_status)
                return TaskStatusChange(task=task)

            task = await self.repository.mark_completed_if_open(task_id)
            if task is None:
                current = await self.repository.get_task(task_id)
                if current is None:
                    raise TaskNotFoundError(task_id)
                logger.info("Task %s already completed, nothing to credit", task_id)
                return TaskStatusChange(task=current, already_completed=True)

            credited = 0
            claimed = await self.repository.claim_credit(task_id)
            if claimed is not None:
                task = claimed
                if claimed.cost_cents > 0:
                    await self.balances.credit_for_task(
                        user_id=claimed.assigned_to,
                        task_id=claimed.id,
                        amount_cents=claimed.cost_cents,
                    )
                    credited = claimed.cost_cents
            else:
                logger.info("Task %s completed again after reopening; credit already paid", task_id)

        return TaskStatusChange(task=task, credited_cents=credited)
