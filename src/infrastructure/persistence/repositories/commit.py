"""Commit helper shared by the repositories.

Unique indexes and constraints are enforced by the database. A commit that
violates one raises ``IntegrityError``; repositories turn it into a
CONFLICT failure instead of letting it escape.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.errors import Error
from src.core.result import Failure, Result, ok


async def commit_or_conflict(session: AsyncSession, conflict: Error) -> Result[None]:
    """Commit the session's pending changes.

    Args:
        session: Session holding the pending insert/update.
        conflict: Error returned when a unique index rejects the write.

    Returns:
        Success, or Failure(conflict) after rolling the session back.
    """
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        return Failure(errors=conflict)
    return ok()
