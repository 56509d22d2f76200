"""Reservation query handlers.

List handlers return Success([]) when nothing matches, including when the
seat or user does not exist.
"""

from src.application.dtos import ReservationResponse
from src.application.queries.reservation_queries import (
    GetAllReservations,
    GetReservationById,
    ListReservationsByDate,
    ListReservationsBySeat,
    ListReservationsBySeatName,
    ListReservationsByUser,
    ListReservationsByUserEmail,
)
from src.core.result import Failure, Result, Success
from src.domain.errors import ReservationError
from src.domain.protocols import (
    LoggerProtocol,
    ReservationRepository,
    SeatRepository,
    UserRepository,
)
from src.domain.value_objects import Date


class GetReservationByIdHandler:
    """Handler for GetReservationById query."""

    def __init__(
        self, reservation_repo: ReservationRepository, logger: LoggerProtocol
    ) -> None:
        self._reservation_repo = reservation_repo
        self._logger = logger

    async def handle(self, query: GetReservationById) -> Result[ReservationResponse]:
        try:
            reservation = await self._reservation_repo.find_by_id(query.reservation_id)
        except Exception as e:
            self._logger.error(
                "reservation_lookup_failed",
                error=e,
                reservation_id=str(query.reservation_id),
            )
            return Failure.from_exception(e)

        if reservation is None:
            return Failure(errors=ReservationError.not_found(query.reservation_id))
        return Success(value=ReservationResponse.from_entity(reservation))


class ListReservationsBySeatHandler:
    """Handler for ListReservationsBySeat query."""

    def __init__(
        self, reservation_repo: ReservationRepository, logger: LoggerProtocol
    ) -> None:
        self._reservation_repo = reservation_repo
        self._logger = logger

    async def handle(
        self, query: ListReservationsBySeat
    ) -> Result[list[ReservationResponse]]:
        try:
            reservations = await self._reservation_repo.list_by_seat_id(query.seat_id)
        except Exception as e:
            self._logger.error(
                "reservation_list_failed", error=e, seat_id=str(query.seat_id)
            )
            return Failure.from_exception(e)
        return Success(value=[ReservationResponse.from_entity(r) for r in reservations])


class ListReservationsByUserHandler:
    """Handler for ListReservationsByUser query."""

    def __init__(
        self, reservation_repo: ReservationRepository, logger: LoggerProtocol
    ) -> None:
        self._reservation_repo = reservation_repo
        self._logger = logger

    async def handle(
        self, query: ListReservationsByUser
    ) -> Result[list[ReservationResponse]]:
        try:
            reservations = await self._reservation_repo.list_by_user_id(query.user_id)
        except Exception as e:
            self._logger.error(
                "reservation_list_failed", error=e, user_id=str(query.user_id)
            )
            return Failure.from_exception(e)
        return Success(value=[ReservationResponse.from_entity(r) for r in reservations])


class ListReservationsByDateHandler:
    """Handler for ListReservationsByDate query."""

    def __init__(
        self, reservation_repo: ReservationRepository, logger: LoggerProtocol
    ) -> None:
        self._reservation_repo = reservation_repo
        self._logger = logger

    async def handle(
        self, query: ListReservationsByDate
    ) -> Result[list[ReservationResponse]]:
        day = Date.create(query.date)
        if isinstance(day, Failure):
            return day
        try:
            reservations = await self._reservation_repo.list_by_date(day.value)
        except Exception as e:
            self._logger.error("reservation_list_failed", error=e, date=str(query.date))
            return Failure.from_exception(e)
        return Success(value=[ReservationResponse.from_entity(r) for r in reservations])


class GetAllReservationsHandler:
    """Handler for GetAllReservations query."""

    def __init__(
        self, reservation_repo: ReservationRepository, logger: LoggerProtocol
    ) -> None:
        self._reservation_repo = reservation_repo
        self._logger = logger

    async def handle(
        self, query: GetAllReservations
    ) -> Result[list[ReservationResponse]]:
        try:
            reservations = await self._reservation_repo.list_all()
        except Exception as e:
            self._logger.error("reservation_list_failed", error=e)
            return Failure.from_exception(e)
        return Success(value=[ReservationResponse.from_entity(r) for r in reservations])


class ListReservationsBySeatNameHandler:
    """Handler for ListReservationsBySeatName query.

    The seat is looked up by name; its reservations come loaded with it.
    """

    def __init__(self, seat_repo: SeatRepository, logger: LoggerProtocol) -> None:
        self._seat_repo = seat_repo
        self._logger = logger

    async def handle(
        self, query: ListReservationsBySeatName
    ) -> Result[list[ReservationResponse]]:
        try:
            seat = await self._seat_repo.find_by_name(query.name)
        except Exception as e:
            self._logger.error("reservation_list_failed", error=e, seat_name=query.name)
            return Failure.from_exception(e)

        reservations = seat.reservations if seat is not None else []
        return Success(value=[ReservationResponse.from_entity(r) for r in reservations])


class ListReservationsByUserEmailHandler:
    """Handler for ListReservationsByUserEmail query."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(
        self, query: ListReservationsByUserEmail
    ) -> Result[list[ReservationResponse]]:
        try:
            user = await self._user_repo.find_by_email(query.email)
        except Exception as e:
            self._logger.error("reservation_list_failed", error=e)
            return Failure.from_exception(e)

        reservations = user.reservations if user is not None else []
        return Success(value=[ReservationResponse.from_entity(r) for r in reservations])
