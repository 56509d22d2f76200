"""Reservation command handlers.

The double-booking rule is enforced at three levels, each one a backstop
for the previous:

1. Entity: ``Reservation.create`` / ``reschedule`` check the reservations
   loaded on the seat
2. Repository predicate: ``SeatRepository.is_available`` checks storage
3. Storage unique index on (seat id, day): ``save`` / ``update`` return
   ``Failure(Seat.NotAvailable)`` if a conflicting write slipped through

Flows:
    Create: find user -> find seat -> Reservation.create -> is_available
            -> save -> attach to user and seat
    Update: find -> resolve target user/seat -> validate day ->
            is_available (excluding itself) -> reschedule/change_user -> update
    Delete: find -> detach -> delete
"""

from uuid_extensions import uuid7

from src.application.commands.reservation_commands import (
    CreateReservation,
    DeleteReservation,
    UpdateReservation,
)
from src.application.dtos import ReservationResponse
from src.core.result import Failure, Result, Success
from src.domain.entities import Reservation
from src.domain.errors import ReservationError, SeatError, UserError
from src.domain.protocols import (
    LoggerProtocol,
    ReservationRepository,
    SeatRepository,
    UserRepository,
)
from src.domain.services import ensure_available
from src.domain.value_objects import Date


class CreateReservationHandler:
    """Handler for CreateReservation command.

    Example:
        >>> handler = CreateReservationHandler(users, seats, reservations, logger)
        >>> result = await handler.handle(
        ...     CreateReservation(user_id=u.id, seat_id=s.id, date=date(2025, 3, 1))
        ... )
    """

    def __init__(
        self,
        user_repo: UserRepository,
        seat_repo: SeatRepository,
        reservation_repo: ReservationRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._seat_repo = seat_repo
        self._reservation_repo = reservation_repo
        self._logger = logger

    async def handle(self, cmd: CreateReservation) -> Result[ReservationResponse]:
        """Reserve a seat for a user on a day.

        Returns:
            Success(ReservationResponse), or Failure(User.NotFound),
            Failure(Seat.NotFound), Failure(Seat.NotAvailable),
            Failure(Seat.Blocked).
        """
        context = {
            "user_id": str(cmd.user_id),
            "seat_id": str(cmd.seat_id),
            "date": str(cmd.date),
        }
        self._logger.info("reservation_create_attempted", **context)
        try:
            result = await self._create(cmd)
        except Exception as e:
            self._logger.error("reservation_create_failed", error=e, **context)
            return Failure.from_exception(e)

        match result:
            case Success(value=reservation):
                self._logger.info(
                    "reservation_created", reservation_id=str(reservation.id), **context
                )
            case Failure(errors=errors):
                self._logger.warning(
                    "reservation_create_rejected",
                    error_codes=[error.code for error in errors],
                    **context,
                )
        return result

    async def _create(self, cmd: CreateReservation) -> Result[ReservationResponse]:
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(errors=UserError.not_found(cmd.user_id))

        seat = await self._seat_repo.find_by_id(cmd.seat_id)
        if seat is None:
            return Failure(errors=SeatError.not_found(cmd.seat_id))

        created = Reservation.create(uuid7(), cmd.date, user, seat)
        if isinstance(created, Failure):
            return created
        reservation = created.value

        available = await self._seat_repo.is_available(seat.id, reservation.date)
        checked = ensure_available(seat.id, reservation.date.value, available)
        if isinstance(checked, Failure):
            return checked

        saved = await self._reservation_repo.save(reservation)
        if isinstance(saved, Failure):
            return saved

        user.add_reservation(reservation)
        seat.add_reservation(reservation)
        return Success(value=ReservationResponse.from_entity(reservation))


class UpdateReservationHandler:
    """Handler for UpdateReservation command."""

    def __init__(
        self,
        user_repo: UserRepository,
        seat_repo: SeatRepository,
        reservation_repo: ReservationRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._seat_repo = seat_repo
        self._reservation_repo = reservation_repo
        self._logger = logger

    async def handle(self, cmd: UpdateReservation) -> Result[ReservationResponse]:
        reservation_id = str(cmd.reservation_id)
        self._logger.info("reservation_update_attempted", reservation_id=reservation_id)
        try:
            result = await self._update(cmd)
        except Exception as e:
            self._logger.error(
                "reservation_update_failed", error=e, reservation_id=reservation_id
            )
            return Failure.from_exception(e)

        if isinstance(result, Failure):
            self._logger.warning(
                "reservation_update_rejected",
                reservation_id=reservation_id,
                error_codes=[error.code for error in result.errors],
            )
        else:
            self._logger.info("reservation_updated", reservation_id=reservation_id)
        return result

    async def _update(self, cmd: UpdateReservation) -> Result[ReservationResponse]:
        reservation = await self._reservation_repo.find_by_id(cmd.reservation_id)
        if reservation is None:
            return Failure(errors=ReservationError.not_found(cmd.reservation_id))

        user = reservation.user
        if cmd.user_id is not None and cmd.user_id != reservation.user_id:
            user = await self._user_repo.find_by_id(cmd.user_id)
            if user is None:
                return Failure(errors=UserError.not_found(cmd.user_id))

        seat = reservation.seat
        if cmd.seat_id is not None and cmd.seat_id != reservation.seat_id:
            seat = await self._seat_repo.find_by_id(cmd.seat_id)
            if seat is None:
                return Failure(errors=SeatError.not_found(cmd.seat_id))

        day = Date.create(cmd.date) if cmd.date is not None else Success(value=reservation.date)
        if isinstance(day, Failure):
            return day

        available = await self._seat_repo.is_available(
            seat.id, day.value, exclude_reservation_id=reservation.id
        )
        checked = ensure_available(seat.id, day.value.value, available)
        if isinstance(checked, Failure):
            return checked

        rescheduled = reservation.reschedule(seat, day.value.value)
        if isinstance(rescheduled, Failure):
            return rescheduled
        reservation.change_user(user)

        updated = await self._reservation_repo.update(reservation)
        if isinstance(updated, Failure):
            return updated
        return Success(value=ReservationResponse.from_entity(reservation))


class DeleteReservationHandler:
    """Handler for DeleteReservation command."""

    def __init__(
        self, reservation_repo: ReservationRepository, logger: LoggerProtocol
    ) -> None:
        self._reservation_repo = reservation_repo
        self._logger = logger

    async def handle(self, cmd: DeleteReservation) -> Result[ReservationResponse]:
        reservation_id = str(cmd.reservation_id)
        try:
            reservation = await self._reservation_repo.find_by_id(cmd.reservation_id)
            if reservation is None:
                self._logger.warning(
                    "reservation_delete_rejected", reservation_id=reservation_id
                )
                return Failure(errors=ReservationError.not_found(cmd.reservation_id))

            deleted = await self._reservation_repo.delete(reservation.id)
            if isinstance(deleted, Failure):
                return deleted
        except Exception as e:
            self._logger.error(
                "reservation_delete_failed", error=e, reservation_id=reservation_id
            )
            return Failure.from_exception(e)

        reservation.user.remove_reservation(reservation)
        reservation.seat.remove_reservation(reservation)
        self._logger.info("reservation_deleted", reservation_id=reservation_id)
        return Success(value=ReservationResponse.from_entity(reservation))
