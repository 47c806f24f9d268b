"""Task domain exports"""

from .exceptions import TaskNotFoundError
from .models import (
    STATUS_COMPLETED,
    STATUS_PENDING,
    Task,
    TaskCreateInput,
    TaskStatusChange,
)

__all__ = [
    "STATUS_COMPLETED",
    "STATUS_PENDING",
    "Task",
    "TaskCreateInput",
    "TaskStatusChange",
    "TaskNotFoundError",
]
