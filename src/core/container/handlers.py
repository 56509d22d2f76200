"""Handler dependency factories.

Request-scoped: every factory takes the request's ``AsyncSession`` and
returns the handler wrapped in a ``ValidatingHandler``, so requests are
filtered and validated before the handler runs. Reservation commands also
get the past-date check unless ``settings.allow_past_reservations`` is set.

Usage:
    # Presentation Layer (FastAPI Depends)
    @router.post("/seats")
    async def create_seat(handler=Depends(get_create_seat_handler)): ...

    # Scripts and tests
    async with get_database().get_session() as session:
        handler = await get_create_seat_handler(session)
        result = await handler.handle(CreateSeat(name="A1"))
"""

from typing import Any

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.validation import (
    ReservationDateValidator,
    TypedRequestValidator,
    ValidatingHandler,
    ValidationPipeline,
)
from src.core.config import settings
from src.core.container.infrastructure import get_db_session, get_logger


def _validated(handler: Any, *, reservation_dates: bool = False) -> ValidatingHandler:
    validators: list[Any] = [TypedRequestValidator()]
    if reservation_dates:
        validators.append(
            ReservationDateValidator(allow_past=settings.allow_past_reservations)
        )
    return ValidatingHandler(ValidationPipeline(validators), handler, get_logger())


# ============================================================================
# User Handlers
# ============================================================================


async def get_create_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    """Get CreateUser command handler (request-scoped).

    Creates handler with:
    - UserRepository (request-scoped, uses session)
    - Logger (app-scoped singleton)
    """
    from src.application.commands.handlers import CreateUserHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return _validated(CreateUserHandler(UserRepository(session=session), get_logger()))


async def get_update_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.commands.handlers import UpdateUserHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return _validated(UpdateUserHandler(UserRepository(session=session), get_logger()))


async def get_delete_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.commands.handlers import DeleteUserHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return _validated(DeleteUserHandler(UserRepository(session=session), get_logger()))


async def get_get_user_by_id_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import GetUserByIdHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return _validated(GetUserByIdHandler(UserRepository(session=session), get_logger()))


async def get_get_user_by_email_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import GetUserByEmailHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return _validated(
        GetUserByEmailHandler(UserRepository(session=session), get_logger())
    )


async def get_get_all_users_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import GetAllUsersHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return _validated(GetAllUsersHandler(UserRepository(session=session), get_logger()))


# ============================================================================
# Seat Handlers
# ============================================================================


async def get_create_seat_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.commands.handlers import CreateSeatHandler
    from src.infrastructure.persistence.repositories import SeatRepository

    return _validated(CreateSeatHandler(SeatRepository(session=session), get_logger()))


async def get_update_seat_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.commands.handlers import UpdateSeatHandler
    from src.infrastructure.persistence.repositories import SeatRepository

    return _validated(UpdateSeatHandler(SeatRepository(session=session), get_logger()))


async def get_delete_seat_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.commands.handlers import DeleteSeatHandler
    from src.infrastructure.persistence.repositories import SeatRepository

    return _validated(DeleteSeatHandler(SeatRepository(session=session), get_logger()))


async def get_get_seat_by_id_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import GetSeatByIdHandler
    from src.infrastructure.persistence.repositories import SeatRepository

    return _validated(GetSeatByIdHandler(SeatRepository(session=session), get_logger()))


async def get_get_seat_by_name_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import GetSeatByNameHandler
    from src.infrastructure.persistence.repositories import SeatRepository

    return _validated(
        GetSeatByNameHandler(SeatRepository(session=session), get_logger())
    )


async def get_get_all_seats_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import GetAllSeatsHandler
    from src.infrastructure.persistence.repositories import SeatRepository

    return _validated(GetAllSeatsHandler(SeatRepository(session=session), get_logger()))


# ============================================================================
# Reservation Handlers
# ============================================================================


async def get_create_reservation_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    """Get CreateReservation command handler (request-scoped).

    Creates handler with:
    - UserRepository, SeatRepository and ReservationRepository on one session
    - Typed field validation plus the past-date check
    """
    from src.application.commands.handlers import CreateReservationHandler
    from src.infrastructure.persistence.repositories import (
        ReservationRepository,
        SeatRepository,
        UserRepository,
    )

    handler = CreateReservationHandler(
        UserRepository(session=session),
        SeatRepository(session=session),
        ReservationRepository(session=session),
        get_logger(),
    )
    return _validated(handler, reservation_dates=True)


async def get_update_reservation_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.commands.handlers import UpdateReservationHandler
    from src.infrastructure.persistence.repositories import (
        ReservationRepository,
        SeatRepository,
        UserRepository,
    )

    handler = UpdateReservationHandler(
        UserRepository(session=session),
        SeatRepository(session=session),
        ReservationRepository(session=session),
        get_logger(),
    )
    return _validated(handler, reservation_dates=True)


async def get_delete_reservation_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.commands.handlers import DeleteReservationHandler
    from src.infrastructure.persistence.repositories import ReservationRepository

    return _validated(
        DeleteReservationHandler(ReservationRepository(session=session), get_logger())
    )


async def get_get_reservation_by_id_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import GetReservationByIdHandler
    from src.infrastructure.persistence.repositories import ReservationRepository

    return _validated(
        GetReservationByIdHandler(ReservationRepository(session=session), get_logger())
    )


async def get_get_all_reservations_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import GetAllReservationsHandler
    from src.infrastructure.persistence.repositories import ReservationRepository

    return _validated(
        GetAllReservationsHandler(ReservationRepository(session=session), get_logger())
    )


async def get_list_reservations_by_seat_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import ListReservationsBySeatHandler
    from src.infrastructure.persistence.repositories import ReservationRepository

    return _validated(
        ListReservationsBySeatHandler(
            ReservationRepository(session=session), get_logger()
        )
    )


async def get_list_reservations_by_seat_name_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import ListReservationsBySeatNameHandler
    from src.infrastructure.persistence.repositories import SeatRepository

    return _validated(
        ListReservationsBySeatNameHandler(SeatRepository(session=session), get_logger())
    )


async def get_list_reservations_by_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import ListReservationsByUserHandler
    from src.infrastructure.persistence.repositories import ReservationRepository

    return _validated(
        ListReservationsByUserHandler(
            ReservationRepository(session=session), get_logger()
        )
    )


async def get_list_reservations_by_user_email_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import ListReservationsByUserEmailHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return _validated(
        ListReservationsByUserEmailHandler(UserRepository(session=session), get_logger())
    )


async def get_list_reservations_by_date_handler(
    session: AsyncSession = Depends(get_db_session),
) -> ValidatingHandler:
    from src.application.queries.handlers import ListReservationsByDateHandler
    from src.infrastructure.persistence.repositories import ReservationRepository

    return _validated(
        ListReservationsByDateHandler(
            ReservationRepository(session=session), get_logger()
        )
    )
