"""Repositories - SQLAlchemy implementations of core.repository_protocols."""

from ledger_api.repositories.transaction import SqlTransactionRepository  # noqa: F401
from ledger_api.repositories.user import SqlUserRepository  # noqa: F401
