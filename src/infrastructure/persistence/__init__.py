"""Persistence infrastructure (SQLAlchemy, async).

This module provides:
- Database: engine and session management
- Models: users, seats and reservations tables with their unique indexes
- Model <-> entity mappers
- Repository implementations of the domain repository protocols
"""

from src.infrastructure.persistence.database import Database

__all__ = [
    "Database",
]
