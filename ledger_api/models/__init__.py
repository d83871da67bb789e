"""ORM Models - SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from ledger_api.models.user import User  # noqa: F401
from ledger_api.models.transaction import Transaction  # noqa: F401
