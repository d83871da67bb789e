"""Transaction Schemas - Pydantic models with field-level validation for API boundaries.

Invariants:
    - CreateTransactionRequest.user_id: 1-64 chars, stripped, non-empty
    - amount must be finite (NaN / inf rejected)
    - type and status are free text (1-20 chars, stripped)
    - GetTransactionsQuery: page >= 1, 1 <= size <= 100, empty filters mean "no filter"
"""

import math
from datetime import datetime

from pydantic import Field, field_validator

from ledger_api.schemas.common import ApiModel

DEFAULT_SORT = "created_at desc"


class CreateTransactionRequest(ApiModel):
    """Transaction creation - validates owner, amount, and free-text enums."""
    user_id: str = Field(min_length=1, max_length=64)
    amount: float
    type: str = Field(min_length=1, max_length=20)
    status: str = Field(min_length=1, max_length=20)
    description: str = Field("", max_length=1000)

    @field_validator("user_id")
    @classmethod
    def strip_user_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("userId cannot be empty or whitespace")
        return v

    @field_validator("amount")
    @classmethod
    def finite_amount(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("amount must be a finite number")
        return v

    @field_validator("type", "status")
    @classmethod
    def strip_label(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v


class CreateTransactionResponse(ApiModel):
    transaction_id: str
    user_id: str
    amount: float
    type: str
    status: str
    description: str
    created_at: datetime


class GetTransactionResponse(CreateTransactionResponse):
    updated_at: datetime


class TransactionUser(ApiModel):
    """Owner summary embedded in list items."""
    user_id: str
    nickname: str


class TransactionListItem(GetTransactionResponse):
    user: TransactionUser | None = None


class GetTransactionsQuery(ApiModel):
    """Query-string parameters for GET /transactions."""
    page: int = Field(1, ge=1)
    size: int = Field(10, ge=1, le=100)
    sort: str = Field(DEFAULT_SORT, max_length=200)
    type: str | None = Field(None, max_length=20)
    status: str | None = Field(None, max_length=20)
    search: str | None = Field(None, max_length=200)

    @field_validator("type", "status", "search")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size
