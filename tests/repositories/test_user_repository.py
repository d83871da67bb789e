"""User Repository - lookups, existence checks, soft-delete visibility."""

import pytest

from ledger_api.core.errors import ConflictError, ResourceNotFoundError
from ledger_api.db.base import utcnow
from ledger_api.models.user import User
from ledger_api.repositories.user import SqlUserRepository


@pytest.fixture
def repo(test_db):
    return SqlUserRepository(test_db)


async def test_create_and_get(repo):
    await repo.create(User(user_id="u1", nickname="one", email="one@example.com"))
    user = await repo.get_by_id("u1")
    assert user.nickname == "one"
    assert user.email == "one@example.com"


async def test_get_missing_raises(repo):
    with pytest.raises(ResourceNotFoundError) as exc:
        await repo.get_by_id("nobody")
    assert exc.value.resource_type == "User"


async def test_exists(repo, seed_users):
    assert await repo.exists("user001") is True
    assert await repo.exists("user999") is False


async def test_soft_deleted_user_does_not_exist(repo, seed_users, test_db):
    user = seed_users[0]
    user.deleted_at = utcnow()
    await test_db.commit()
    assert await repo.exists("user001") is False


async def test_duplicate_user_id_conflicts(repo, seed_users):
    with pytest.raises(ConflictError):
        await repo.create(User(user_id="user001", nickname="again"))


async def test_transactions_collection_is_not_lazy_loaded(repo):
    from sqlalchemy.exc import InvalidRequestError

    user = await repo.create(User(user_id="u9", nickname="nine"))
    with pytest.raises(InvalidRequestError):
        user.transactions
