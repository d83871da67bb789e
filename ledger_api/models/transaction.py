"""Transaction ORM - one money movement owned by a user.

Invariants:
    - transaction_id is unique and non-null (public identifier)
    - type and status are free text (see core.domain_types for known values)
    - user is eagerly loaded (selectin) so responses can embed it without lazy IO
"""

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger_api.db.base import Base, TimestampMixin


class Transaction(TimestampMixin, Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    transaction_id: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False,
    )
    user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.user_id"), nullable=False, index=True,
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )

    user: Mapped["User"] = relationship(
        "User", back_populates="transactions", lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Transaction {self.transaction_id} {self.type} {self.amount}>"
