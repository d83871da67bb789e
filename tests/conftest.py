"""Root conftest - shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database (aiosqlite, StaticPool)
    - Settings never point at a real PostgreSQL instance during tests
"""

import os
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from ledger_api.db.base import Base  # noqa: E402
import ledger_api.models  # noqa: E402,F401
from ledger_api.models.transaction import Transaction  # noqa: E402
from ledger_api.models.user import User  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL, echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_users(test_db):
    """Two owners: user001 and user002."""
    users = [
        User(user_id="user001", nickname="alice"),
        User(user_id="user002", nickname="bob"),
    ]
    test_db.add_all(users)
    await test_db.commit()
    return users


@pytest.fixture
async def seed_transactions(test_db, seed_users):
    """Five transactions with strictly increasing created_at (tx001 oldest)."""
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    rows = [
        ("tx001", "user001", 100.50, "credit", "completed", "Sample credit transaction"),
        ("tx002", "user001", 50.25, "debit", "completed", "Sample debit transaction"),
        ("tx003", "user002", 200.00, "credit", "pending", "Pending credit transaction"),
        ("tx004", "user002", 75.30, "debit", "failed", "Failed debit transaction"),
        ("tx005", "user001", 300.00, "credit", "completed", "Large credit transaction"),
    ]
    transactions = []
    for i, (tx_id, user_id, amount, type_, status, description) in enumerate(rows):
        ts = base + timedelta(minutes=i)
        transactions.append(Transaction(
            transaction_id=tx_id, user_id=user_id, amount=amount,
            type=type_, status=status, description=description,
            created_at=ts, updated_at=ts,
        ))
    test_db.add_all(transactions)
    await test_db.commit()
    return transactions
