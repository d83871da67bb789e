"""Boundary Protocols - contracts between the service layer and persistence.

Invariants:
    - Services and tasks depend on these Protocols, never on SQLAlchemy directly
    - Implementations live in ledger_api.repositories and are injected by routes/tasks
    - Lookups by public id raise ResourceNotFoundError instead of returning None

Design Decisions:
    - Protocol over ABC: structural subtyping, so test fakes need no inheritance
"""

from typing import TYPE_CHECKING, Protocol

from ledger_api.core.domain_types import TransactionId, UserId

if TYPE_CHECKING:
    from ledger_api.models.transaction import Transaction
    from ledger_api.models.user import User
    from ledger_api.schemas.transaction import GetTransactionsQuery


class TransactionRepository(Protocol):
    """Contract for transaction persistence."""
    async def create(self, transaction: "Transaction") -> "Transaction": ...
    async def get_by_id(self, transaction_id: TransactionId) -> "Transaction": ...
    async def exists(
        self, transaction_id: TransactionId, include_deleted: bool = False,
    ) -> bool: ...
    async def get_paginated(
        self, query: "GetTransactionsQuery",
    ) -> tuple[list["Transaction"], int]: ...
    async def soft_delete(self, transaction_id: TransactionId) -> None: ...


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def create(self, user: "User") -> "User": ...
    async def get_by_id(self, user_id: UserId) -> "User": ...
    async def exists(self, user_id: UserId) -> bool: ...
