"""Task domain specific exceptions."""

from app.core.errors import NotFoundError


class TaskNotFoundError(NotFoundError):
    """Raised when the requested task cannot be found."""

    def __init__(self, task_id: str | None = None) -> None:
        super().__init__("Task not found")
        self.task_id = task_id
