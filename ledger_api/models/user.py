"""User ORM - owner of transactions.

Invariants:
    - user_id is the public identifier (unique, non-null); id is an internal surrogate key
    - transactions reference users by user_id, not by id
    - User.transactions is never loaded implicitly; query transactions through the repository
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger_api.db.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False,
    )
    nickname: Mapped[str] = mapped_column(
        String(64), nullable=False, default="",
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction", back_populates="user", lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<User {self.user_id}>"
