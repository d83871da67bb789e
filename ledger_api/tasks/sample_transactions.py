"""Sample Data Task - seeds fixture users and transactions through the repository layer.

Invariants:
    - Owners (user001, user002) are created before any transaction that references them
    - Rows that already exist are skipped, soft-deleted ones included, so the task is safe to re-run
    - SQLAlchemy errors outside the repositories (schema creation, connect) surface as LedgerError
    - The first failed insert is logged with its transaction_id and re-raised

Usage:
    ledger-seed --database-url sqlite+aiosqlite:///ledger.db --create-schema
"""

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from ledger_api.config import get_settings
from ledger_api.core.domain_types import (
    TransactionId, TransactionStatus, TransactionType, UserId,
)
from ledger_api.core.errors import LedgerError
from ledger_api.core.repository_protocols import (
    TransactionRepository, UserRepository,
)
from ledger_api.db.base import Base
from ledger_api.db.session import create_session_factory
from ledger_api.infrastructure.database import translate_db_error
from ledger_api.infrastructure.observability import setup_logging
from ledger_api.models.transaction import Transaction
from ledger_api.models.user import User
from ledger_api.repositories import SqlTransactionRepository, SqlUserRepository

logger = logging.getLogger(__name__)

SAMPLE_USERS: list[dict] = [
    {"user_id": "user001", "nickname": "user001"},
    {"user_id": "user002", "nickname": "user002"},
]

SAMPLE_TRANSACTIONS: list[dict] = [
    {
        "transaction_id": "tx001",
        "user_id": "user001",
        "amount": 100.50,
        "type": TransactionType.CREDIT.value,
        "status": TransactionStatus.COMPLETED.value,
        "description": "Sample credit transaction",
    },
    {
        "transaction_id": "tx002",
        "user_id": "user001",
        "amount": 50.25,
        "type": TransactionType.DEBIT.value,
        "status": TransactionStatus.COMPLETED.value,
        "description": "Sample debit transaction",
    },
    {
        "transaction_id": "tx003",
        "user_id": "user002",
        "amount": 200.00,
        "type": TransactionType.CREDIT.value,
        "status": TransactionStatus.PENDING.value,
        "description": "Pending credit transaction",
    },
    {
        "transaction_id": "tx004",
        "user_id": "user002",
        "amount": 75.30,
        "type": TransactionType.DEBIT.value,
        "status": TransactionStatus.FAILED.value,
        "description": "Failed debit transaction",
    },
    {
        "transaction_id": "tx005",
        "user_id": "user001",
        "amount": 300.00,
        "type": TransactionType.CREDIT.value,
        "status": TransactionStatus.COMPLETED.value,
        "description": "Large credit transaction",
    },
]


class TransactionTask:
    """Seeds sample rows; depends only on repository Protocols."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        user_repo: UserRepository,
    ):
        self.transaction_repo = transaction_repo
        self.user_repo = user_repo

    async def _ensure_users(self) -> int:
        created = 0
        for data in SAMPLE_USERS:
            if await self.user_repo.exists(UserId(data["user_id"])):
                continue
            await self.user_repo.create(User(**data))
            created += 1
            logger.info("Created user", extra={"user_id": data["user_id"]})
        return created

    async def create_sample_transactions(self) -> int:
        """Insert the fixture rows. Returns the number of transactions created."""
        logger.info("Creating sample transactions...")
        await self._ensure_users()

        created = 0
        for data in SAMPLE_TRANSACTIONS:
            transaction_id = data["transaction_id"]
            # soft-deleted rows still hold their unique transaction_id
            if await self.transaction_repo.exists(
                TransactionId(transaction_id), include_deleted=True,
            ):
                logger.info(
                    "Transaction already present, skipping",
                    extra={"transaction_id": transaction_id},
                )
                continue
            try:
                await self.transaction_repo.create(Transaction(**data))
            except LedgerError as e:
                logger.error(
                    f"Failed to create transaction: {e.message}",
                    extra={"transaction_id": transaction_id, "error_code": e.code},
                )
                raise
            created += 1
            logger.info(
                "Created transaction", extra={"transaction_id": transaction_id},
            )

        logger.info("Sample transactions created successfully")
        return created


async def run(database_url: str, create_schema: bool = False) -> int:
    engine, session_factory = create_session_factory(database_url)
    try:
        if create_schema:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        async with session_factory() as db:
            task = TransactionTask(
                SqlTransactionRepository(db), SqlUserRepository(db),
            )
            return await task.create_sample_transactions()
    except SQLAlchemyError as e:
        logger.error(f"Seeding aborted: {e}", extra={"operation": "seed"})
        raise translate_db_error(e, "seed") from e
    finally:
        await engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledger-seed",
        description="Seed sample users and transactions.",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Async SQLAlchemy URL (defaults to DATABASE_URL / settings).",
    )
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create tables from ORM metadata before seeding.",
    )
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, settings.log_format)

    database_url = args.database_url or settings.database_url
    try:
        created = asyncio.run(run(database_url, create_schema=args.create_schema))
    except LedgerError as e:
        logger.error(f"Seeding failed: {e.message}", extra={"error_code": e.code})
        return 1
    logger.info(f"Seeded {created} transaction(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
