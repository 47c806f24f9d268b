"""Balance domain exports"""

from .models import ENTRY_CREDIT, ENTRY_REFUND, ENTRY_RESERVE, BalanceEntryRecord

__all__ = [
    "ENTRY_CREDIT",
    "ENTRY_REFUND",
    "ENTRY_RESERVE",
    "BalanceEntryRecord",
]
