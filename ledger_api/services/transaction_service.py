"""Transaction Service - field mapping and ID generation between API schemas and ORM rows.

Invariants:
    - Depends only on repository Protocols (core.repository_protocols)
    - create_transaction refuses unknown owners with ResourceNotFoundError("User", ...)
    - created_at == updated_at on creation (UTC)
    - Repository errors propagate unchanged
"""

import logging

from ledger_api.core.domain_types import TransactionId, UserId, new_transaction_id
from ledger_api.core.errors import ErrorContext, ResourceNotFoundError
from ledger_api.core.repository_protocols import (
    TransactionRepository, UserRepository,
)
from ledger_api.db.base import utcnow
from ledger_api.models.transaction import Transaction
from ledger_api.schemas.common import Page
from ledger_api.schemas.transaction import (
    CreateTransactionRequest,
    CreateTransactionResponse,
    GetTransactionResponse,
    GetTransactionsQuery,
    TransactionListItem,
    TransactionUser,
)

logger = logging.getLogger(__name__)


def to_list_item(transaction: Transaction) -> TransactionListItem:
    user = transaction.user
    return TransactionListItem(
        transaction_id=transaction.transaction_id,
        user_id=transaction.user_id,
        amount=transaction.amount,
        type=transaction.type,
        status=transaction.status,
        description=transaction.description,
        created_at=transaction.created_at,
        updated_at=transaction.updated_at,
        user=(
            TransactionUser(user_id=user.user_id, nickname=user.nickname)
            if user is not None else None
        ),
    )


class TransactionService:
    """Create/read/list/delete over transactions."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        user_repo: UserRepository,
    ):
        self.transaction_repo = transaction_repo
        self.user_repo = user_repo

    async def create_transaction(
        self, req: CreateTransactionRequest,
    ) -> CreateTransactionResponse:
        if not await self.user_repo.exists(UserId(req.user_id)):
            raise ResourceNotFoundError(
                "User", req.user_id, ErrorContext(user_id=req.user_id),
            )

        now = utcnow()
        transaction = Transaction(
            transaction_id=new_transaction_id(),
            user_id=req.user_id,
            amount=req.amount,
            type=req.type,
            status=req.status,
            description=req.description,
            created_at=now,
            updated_at=now,
        )
        transaction = await self.transaction_repo.create(transaction)
        logger.info(
            "Transaction created",
            extra={
                "transaction_id": transaction.transaction_id,
                "user_id": transaction.user_id,
            },
        )

        return CreateTransactionResponse(
            transaction_id=transaction.transaction_id,
            user_id=transaction.user_id,
            amount=transaction.amount,
            type=transaction.type,
            status=transaction.status,
            description=transaction.description,
            created_at=transaction.created_at,
        )

    async def get_transaction(
        self, transaction_id: TransactionId,
    ) -> GetTransactionResponse:
        transaction = await self.transaction_repo.get_by_id(transaction_id)
        return GetTransactionResponse(
            transaction_id=transaction.transaction_id,
            user_id=transaction.user_id,
            amount=transaction.amount,
            type=transaction.type,
            status=transaction.status,
            description=transaction.description,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )

    async def get_transactions(
        self, query: GetTransactionsQuery,
    ) -> Page[TransactionListItem]:
        rows, total = await self.transaction_repo.get_paginated(query)
        return Page[TransactionListItem].build(
            items=[to_list_item(t) for t in rows],
            total=total,
            page=query.page,
            size=query.size,
        )

    async def delete_transaction(self, transaction_id: TransactionId) -> None:
        await self.transaction_repo.soft_delete(transaction_id)
