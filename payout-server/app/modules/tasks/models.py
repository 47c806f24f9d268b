"""Domain models for tasks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

STATUS_PENDING = "pending"
STATUS_COMPLETED = "completed"

MAX_STATUS_LENGTH = 30


@dataclass(slots=True)
class Task:
    id: str
    title: str
    status: str
    cost_cents: int
    assigned_to: str
    category: Optional[str] = None
    priority: Optional[str] = None
    note: Optional[str] = None
    deadline_date: Optional[str] = None
    deadline_time: Optional[str] = None
    credited_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class TaskCreateInput:
    title: str
    cost_cents: int
    assigned_to: str
    status: str = STATUS_PENDING
    category: Optional[str] = None
    priority: Optional[str] = None
    note: Optional[str] = None
    deadline_date: Optional[str] = None
    deadline_time: Optional[str] = None


@dataclass(slots=True)
class TaskStatusChange:
    """Outcome of a status update."""

    task: Task
    credited_cents: int = 0
    already_completed: bool = False
