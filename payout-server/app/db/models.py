"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"
    __table_args__ = (CheckConstraint("balance_cents >= 0", name="ck_users_balance_non_negative"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    full_name = Column(String(150), nullable=False)
    email = Column(String(150), unique=True, nullable=False, index=True)
    role = Column(String(20), nullable=False, default="employee")  # manager, employee
    balance_cents = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    tasks = relationship("Task", back_populates="assignee")
    checkout_requests = relationship("CheckoutRequest", back_populates="user")


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = (CheckConstraint("cost_cents >= 0", name="ck_tasks_cost_non_negative"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String(255), nullable=False)
    category = Column(String(100))
    priority = Column(String(20))
    note = Column(Text)
    deadline_date = Column(String(10))
    deadline_time = Column(String(8))
    status = Column(String(30), nullable=False, default="pending")
    cost_cents = Column(Integer, nullable=False, default=0)
    assigned_to = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    credited_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    assignee = relationship("User", back_populates="tasks")


class CheckoutRequest(Base):
    __tablename__ = "checkout_requests"
    __table_args__ = (CheckConstraint("amount_cents > 0", name="ck_checkout_requests_amount_positive"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    amount_cents = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # pending, approved, rejected
    transfer_number = Column(String(100))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    processed_at = Column(DateTime(timezone=True))

    user = relationship("User", back_populates="checkout_requests")


class BalanceEntry(Base):
    __tablename__ = "balance_entries"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    task_id = Column(String(36), ForeignKey("tasks.id"), nullable=True)
    checkout_id = Column(String(36), ForeignKey("checkout_requests.id"), nullable=True)
    amount_cents = Column(Integer, nullable=False)
    type = Column(String(20), nullable=False)  # credit, reserve, refund
    description = Column(String(255))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
