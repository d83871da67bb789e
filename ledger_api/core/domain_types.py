"""Domain Types - named types and known values for the transaction domain.

Invariants:
    - TransactionId and UserId are public string identifiers, never the integer row id
    - Type and status are stored as free text; the Enums name the known values only
    - new_transaction_id() returns 20 lowercase hex characters
"""

import uuid
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TransactionId = NewType("TransactionId", str)
UserId = NewType("UserId", str)

TRANSACTION_ID_LENGTH = 20


def new_transaction_id() -> TransactionId:
    """Generate a short, URL-safe transaction identifier."""
    return TransactionId(uuid.uuid4().hex[:TRANSACTION_ID_LENGTH])


# ─── Enums ───────────────────────────────────────────────────────

class TransactionType(str, Enum):
    """Direction of money movement."""
    CREDIT = "credit"
    DEBIT = "debit"


class TransactionStatus(str, Enum):
    """Settlement state of a transaction."""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
