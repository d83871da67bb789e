"""Transaction Repository - SQLAlchemy queries for the transactions table.

Invariants:
    - Soft-deleted rows (deleted_at set) are invisible to every read
    - get_by_id raises ResourceNotFoundError, never returns None
    - get_paginated applies filters, then counts, then windows (offset/limit)
    - Writes run inside guarded(): SQLAlchemy errors roll back and surface as LedgerError
"""

import logging

from sqlalchemy import Select, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.core.domain_types import TransactionId
from ledger_api.core.errors import ErrorContext, ResourceNotFoundError
from ledger_api.db.base import utcnow
from ledger_api.infrastructure.database import guarded
from ledger_api.models.transaction import Transaction
from ledger_api.repositories.sorting import build_order_by
from ledger_api.schemas.transaction import DEFAULT_SORT, GetTransactionsQuery

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = {
    "created_at": Transaction.created_at,
    "updated_at": Transaction.updated_at,
    "amount": Transaction.amount,
    "type": Transaction.type,
    "status": Transaction.status,
    "transaction_id": Transaction.transaction_id,
}


def _live() -> Select:
    # populate_existing: rows already in the identity map still get their user loaded
    return (
        select(Transaction)
        .where(Transaction.deleted_at.is_(None))
        .execution_options(populate_existing=True)
    )


def apply_filters(stmt: Select, query: GetTransactionsQuery) -> Select:
    """Equality filters on type/status, substring match on description."""
    if query.type:
        stmt = stmt.where(Transaction.type == query.type)
    if query.status:
        stmt = stmt.where(Transaction.status == query.status)
    if query.search:
        stmt = stmt.where(
            Transaction.description.contains(query.search, autoescape=True),
        )
    return stmt


class SqlTransactionRepository:
    """TransactionRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, transaction: Transaction) -> Transaction:
        async with guarded(self.db, "create"):
            self.db.add(transaction)
            await self.db.commit()
            await self.db.refresh(transaction)
        return transaction

    async def get_by_id(self, transaction_id: TransactionId) -> Transaction:
        result = await self.db.execute(
            _live().where(Transaction.transaction_id == transaction_id),
        )
        transaction = result.scalar_one_or_none()
        if transaction is None:
            raise ResourceNotFoundError(
                "Transaction", transaction_id,
                ErrorContext(transaction_id=transaction_id),
            )
        return transaction

    async def exists(
        self, transaction_id: TransactionId, include_deleted: bool = False,
    ) -> bool:
        """True when a row with this id exists; include_deleted also counts soft-deleted rows."""
        condition = Transaction.transaction_id == transaction_id
        if not include_deleted:
            condition = condition & Transaction.deleted_at.is_(None)
        found = await self.db.scalar(select(exists().where(condition)))
        return bool(found)

    async def get_paginated(
        self, query: GetTransactionsQuery,
    ) -> tuple[list[Transaction], int]:
        order_by = build_order_by(
            query.sort, SORTABLE_COLUMNS, DEFAULT_SORT, Transaction.id,
        )
        filtered = apply_filters(_live(), query)

        total = await self.db.scalar(
            select(func.count()).select_from(filtered.subquery()),
        )
        result = await self.db.execute(
            filtered.order_by(*order_by)
            .offset(query.offset)
            .limit(query.size),
        )
        return list(result.scalars().all()), int(total or 0)

    async def soft_delete(self, transaction_id: TransactionId) -> None:
        transaction = await self.get_by_id(transaction_id)
        async with guarded(self.db, "delete"):
            transaction.deleted_at = utcnow()
            await self.db.commit()
        logger.info(
            f"Transaction {transaction_id} soft-deleted",
            extra={"transaction_id": transaction_id},
        )
