"""Domain model for checkout (withdrawal) requests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"


@dataclass(slots=True)
class CheckoutRequest:
    id: str
    user_id: str
    amount_cents: int
    status: str
    transfer_number: Optional[str]
    created_at: Optional[datetime]
    processed_at: Optional[datetime]
