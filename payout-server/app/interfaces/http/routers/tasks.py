"""Task creation and status endpoints."""

from fastapi import APIRouter, Depends

from app.core.money import to_cents
from app.interfaces.http.deps import get_task_service
from app.modules.tasks import TaskCreateInput
from app.modules.tasks.service import TaskService
from app.schemas import (
    MessageResponse,
    SuccessResponse,
    TaskCreate,
    TaskCreateResponse,
    TaskStatusUpdate,
)

router = APIRouter()


@router.post(
    "/tasks",
    response_model=TaskCreateResponse,
    summary="Create and assign a task",
)
async def create_task(
    payload: TaskCreate,
    service: TaskService = Depends(get_task_service),
) -> TaskCreateResponse:
    task = await service.create_task(
        TaskCreateInput(
            title=payload.title,
            cost_cents=to_cents(payload.cost, field="cost"),
            assigned_to=payload.assigned_to,
            status=payload.status,
            category=payload.category,
            priority=payload.priority,
            note=payload.note,
            deadline_date=payload.deadline_date,
            deadline_time=payload.deadline_time,
        )
    )
    return TaskCreateResponse(id=task.id)


@router.post(
    "/task/status",
    response_model=SuccessResponse | MessageResponse,
    summary="Change a task's status, crediting the assignee on completion",
)
async def update_task_status(
    payload: TaskStatusUpdate,
    service: TaskService = Depends(get_task_service),
) -> SuccessResponse | MessageResponse:
    change = await service.set_task_status(payload.task_id, payload.status)
    if change.already_completed:
        return MessageResponse(message="Task already completed")
    return SuccessResponse()
