"""Domain models for balance movements."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

ENTRY_CREDIT = "credit"
ENTRY_RESERVE = "reserve"
ENTRY_REFUND = "refund"


@dataclass(slots=True)
class BalanceEntryRecord:
    id: str
    user_id: str
    amount_cents: int
    type: str
    task_id: Optional[str]
    checkout_id: Optional[str]
    description: Optional[str]
    created_at: Optional[datetime]
