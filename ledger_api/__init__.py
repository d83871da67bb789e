"""Ledger API - layered CRUD service for financial transactions."""

__version__ = "1.0.0"
