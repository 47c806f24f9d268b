"""Domain models for worker accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

ROLE_MANAGER = "manager"
ROLE_EMPLOYEE = "employee"


@dataclass(slots=True)
class UserAccount:
    id: str
    full_name: str
    email: str
    role: str
    balance_cents: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class UserCreateInput:
    full_name: str
    email: str
