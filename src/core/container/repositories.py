"""Repository dependency factories.

Request-scoped repository instances: each call builds a fresh repository
over the given session. Repositories sharing a session share a transaction.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        ReservationRepository,
        SeatRepository,
        UserRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Usage:
        user_repo = await get_user_repository(session)
        user = await user_repo.find_by_email("user@example.com")
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_seat_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "SeatRepository":
    from src.infrastructure.persistence.repositories import SeatRepository

    return SeatRepository(session=session)


async def get_reservation_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ReservationRepository":
    from src.infrastructure.persistence.repositories import ReservationRepository

    return ReservationRepository(session=session)
