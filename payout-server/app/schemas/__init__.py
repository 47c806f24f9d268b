"""Pydantic schemas used across the project.

Response models are built explicitly from domain objects so storage columns
(``*_cents``, ``credited_at``) never leak into the wire contract.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from app.core.money import from_cents
from app.modules.balances.models import BalanceEntryRecord
from app.modules.checkouts.models import CheckoutRequest
from app.modules.tasks.models import Task
from app.modules.users.models import UserAccount


class ErrorResponse(BaseModel):
    error: str


class SuccessResponse(BaseModel):
    success: bool = True


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


# --- users -----------------------------------------------------------------


class UserCreate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=150)
    email: str = Field(..., min_length=3, max_length=150)


class UserCreateResponse(BaseModel):
    id: str
    role: str


class UserResponse(BaseModel):
    id: str
    full_name: str
    email: str
    role: str
    account_balance: Decimal

    @classmethod
    def from_domain(cls, user: UserAccount) -> "UserResponse":
        return cls(
            id=user.id,
            full_name=user.full_name,
            email=user.email,
            role=user.role,
            account_balance=from_cents(user.balance_cents),
        )


# --- tasks -----------------------------------------------------------------


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    category: str
    deadline_date: str
    deadline_time: str
    priority: str
    status: str = Field(..., min_length=1, max_length=30)
    cost: Decimal = Field(..., ge=0)
    assigned_to: str
    note: Optional[str] = None


class TaskCreateResponse(BaseModel):
    id: str


class TaskStatusUpdate(BaseModel):
    # optional so the service can report a single "missing field" error
    task_id: Optional[str] = None
    status: Optional[str] = None


class TaskResponse(BaseModel):
    id: str
    title: str
    category: Optional[str] = None
    priority: Optional[str] = None
    note: Optional[str] = None
    deadline_date: Optional[str] = None
    deadline_time: Optional[str] = None
    status: str
    cost: Decimal
    assigned_to: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            category=task.category,
            priority=task.priority,
            note=task.note,
            deadline_date=task.deadline_date,
            deadline_time=task.deadline_time,
            status=task.status,
            cost=from_cents(task.cost_cents),
            assigned_to=task.assigned_to,
            created_at=task.created_at,
        )


# --- checkouts -------------------------------------------------------------


class CheckoutCreate(BaseModel):
    user_id: Optional[str] = None
    amount: Optional[Decimal] = None


class CheckoutCreateResponse(BaseModel):
    id: str
    success: bool = True


class CheckoutApprove(BaseModel):
    transaction_number: Optional[str] = None


class CheckoutResponse(BaseModel):
    id: str
    user_id: str
    amount: Decimal
    status: str
    transfer_number: Optional[str] = None
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, checkout: CheckoutRequest) -> "CheckoutResponse":
        return cls(
            id=checkout.id,
            user_id=checkout.user_id,
            amount=from_cents(checkout.amount_cents),
            status=checkout.status,
            transfer_number=checkout.transfer_number,
            created_at=checkout.created_at,
            processed_at=checkout.processed_at,
        )


# --- ledger ----------------------------------------------------------------


class BalanceEntryResponse(BaseModel):
    id: str
    amount: Decimal
    type: str
    task_id: Optional[str] = None
    checkout_id: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, entry: BalanceEntryRecord) -> "BalanceEntryResponse":
        return cls(
            id=entry.id,
            amount=from_cents(entry.amount_cents),
            type=entry.type,
            task_id=entry.task_id,
            checkout_id=entry.checkout_id,
            description=entry.description,
            created_at=entry.created_at,
        )


class BalanceEntryListResponse(BaseModel):
    balance: Decimal
    entries: list[BalanceEntryResponse]
