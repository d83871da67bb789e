"""User Repository - lookups and inserts for the users table."""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_api.core.domain_types import UserId
from ledger_api.core.errors import ErrorContext, ResourceNotFoundError
from ledger_api.infrastructure.database import guarded
from ledger_api.models.user import User


class SqlUserRepository:
    """UserRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user: User) -> User:
        async with guarded(self.db, "create"):
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
        return user

    async def get_by_id(self, user_id: UserId) -> User:
        result = await self.db.execute(
            select(User).where(
                User.user_id == user_id, User.deleted_at.is_(None),
            ),
        )
        user = result.scalar_one_or_none()
        if user is None:
            raise ResourceNotFoundError(
                "User", user_id, ErrorContext(user_id=user_id),
            )
        return user

    async def exists(self, user_id: UserId) -> bool:
        found = await self.db.scalar(
            select(
                exists().where(
                    User.user_id == user_id, User.deleted_at.is_(None),
                ),
            ),
        )
        return bool(found)
