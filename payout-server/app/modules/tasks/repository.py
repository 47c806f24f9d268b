"""Repository protocol for tasks."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Task, TaskCreateInput


class TaskRepository(Protocol):
    async def get_task(self, task_id: str) -> Task | None:
        ...

    async def create_task(self, payload: TaskCreateInput) -> Task:
        ...

    async def list_for_user(self, user_id: str) -> Sequence[Task]:
        ...

    async def update_status(self, task_id: str, status: str) -> Task | None:
        ...

    async def mark_completed_if_open(self, task_id: str) -> Task | None:
        """Set status to completed unless it already is; None when no row changed."""
        ...

    async def claim_credit(self, task_id: str) -> Task | None:
        """Stamp the task as credited unless it already was; None when no row changed."""
        ...
