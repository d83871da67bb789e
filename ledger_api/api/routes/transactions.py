"""Transaction Routes - bind HTTP input, call TransactionService, wrap in the envelope.

Invariants:
    - Every response body is Response[...] ({code, message, data})
    - Blank path ids are rejected with 400 before reaching the service
    - Service and repositories are built per request from the request's AsyncSession
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.core.domain_types import TransactionId
from ledger_api.core.errors import BadRequestError
from ledger_api.infrastructure.database import get_db
from ledger_api.repositories import SqlTransactionRepository, SqlUserRepository
from ledger_api.schemas.common import Page, Response, success
from ledger_api.schemas.transaction import (
    DEFAULT_SORT,
    CreateTransactionRequest,
    CreateTransactionResponse,
    GetTransactionResponse,
    GetTransactionsQuery,
    TransactionListItem,
)
from ledger_api.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["transactions"])


def get_transaction_service(
    db: AsyncSession = Depends(get_db),
) -> TransactionService:
    return TransactionService(
        SqlTransactionRepository(db), SqlUserRepository(db),
    )


def _require_id(transaction_id: str) -> TransactionId:
    transaction_id = transaction_id.strip()
    if not transaction_id:
        raise BadRequestError("transaction id is required")
    return TransactionId(transaction_id)


@router.get(
    "/transaction/{transaction_id}",
    response_model=Response[GetTransactionResponse],
)
async def get_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
):
    """Get a single transaction by its public id."""
    return success(await service.get_transaction(_require_id(transaction_id)))


@router.get(
    "/transactions",
    response_model=Response[Page[TransactionListItem]],
)
async def list_transactions(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=100),
    sort: str = Query(DEFAULT_SORT, max_length=200),
    type_filter: str | None = Query(None, alias="type", max_length=20),
    status_filter: str | None = Query(None, alias="status", max_length=20),
    search: str | None = Query(None, max_length=200),
    service: TransactionService = Depends(get_transaction_service),
):
    """List transactions with filtering, sorting, and pagination."""
    query = GetTransactionsQuery(
        page=page, size=size, sort=sort,
        type=type_filter, status=status_filter, search=search,
    )
    return success(await service.get_transactions(query))


@router.post(
    "/transactions",
    response_model=Response[CreateTransactionResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_transaction(
    body: CreateTransactionRequest,
    service: TransactionService = Depends(get_transaction_service),
):
    """Create a transaction for an existing user."""
    return success(await service.create_transaction(body))


@router.delete(
    "/transaction/{transaction_id}",
    response_model=Response[None],
)
async def delete_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
):
    """Soft-delete a transaction. It disappears from reads; the row is kept."""
    await service.delete_transaction(_require_id(transaction_id))
    return success()
