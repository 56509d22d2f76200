"""Seat command handlers.

Flows:
    Create: SeatName.convert_from_string -> Seat.create -> name uniqueness -> save
    Update: find -> parse name / validate description -> name uniqueness
            (only when the name changes) -> apply -> update
    Delete: find -> delete (the repository removes the seat's reservations)
"""

from uuid_extensions import uuid7

from src.application.commands.seat_commands import CreateSeat, DeleteSeat, UpdateSeat
from src.application.dtos import SeatResponse
from src.core.result import Failure, Result, Success, combine
from src.domain.entities import Seat
from src.domain.errors import SeatError
from src.domain.protocols import LoggerProtocol, SeatRepository
from src.domain.value_objects import Description, SeatName


class CreateSeatHandler:
    """Handler for CreateSeat command."""

    def __init__(self, seat_repo: SeatRepository, logger: LoggerProtocol) -> None:
        self._seat_repo = seat_repo
        self._logger = logger

    async def handle(self, cmd: CreateSeat) -> Result[SeatResponse]:
        self._logger.info("seat_create_attempted", seat_name=cmd.name)
        try:
            result = await self._create(cmd)
        except Exception as e:
            self._logger.error("seat_create_failed", error=e, seat_name=cmd.name)
            return Failure.from_exception(e)

        match result:
            case Success(value=seat):
                self._logger.info("seat_created", seat_id=str(seat.id), seat_name=seat.name)
            case Failure(errors=errors):
                self._logger.warning(
                    "seat_create_rejected",
                    seat_name=cmd.name,
                    error_codes=[error.code for error in errors],
                )
        return result

    async def _create(self, cmd: CreateSeat) -> Result[SeatResponse]:
        parsed = SeatName.convert_from_string(cmd.name)
        if isinstance(parsed, Failure):
            return parsed
        name = parsed.value

        created = Seat.create(uuid7(), name.number.value, name.row.value, cmd.description)
        if isinstance(created, Failure):
            return created
        seat = created.value

        if not await self._seat_repo.is_name_unique(seat.name.value):
            return Failure(errors=SeatError.NAME_ALREADY_IN_USE)

        saved = await self._seat_repo.save(seat)
        if isinstance(saved, Failure):
            return saved
        return Success(value=SeatResponse.from_entity(seat))


class UpdateSeatHandler:
    """Handler for UpdateSeat command."""

    def __init__(self, seat_repo: SeatRepository, logger: LoggerProtocol) -> None:
        self._seat_repo = seat_repo
        self._logger = logger

    async def handle(self, cmd: UpdateSeat) -> Result[SeatResponse]:
        self._logger.info("seat_update_attempted", seat_id=str(cmd.seat_id))
        try:
            result = await self._update(cmd)
        except Exception as e:
            self._logger.error("seat_update_failed", error=e, seat_id=str(cmd.seat_id))
            return Failure.from_exception(e)

        if isinstance(result, Failure):
            self._logger.warning(
                "seat_update_rejected",
                seat_id=str(cmd.seat_id),
                error_codes=[error.code for error in result.errors],
            )
        else:
            self._logger.info("seat_updated", seat_id=str(cmd.seat_id))
        return result

    async def _update(self, cmd: UpdateSeat) -> Result[SeatResponse]:
        seat = await self._seat_repo.find_by_id(cmd.seat_id)
        if seat is None:
            return Failure(errors=SeatError.not_found(cmd.seat_id))

        parsed = SeatName.convert_from_string(cmd.name) if cmd.name is not None else None
        checked_description = (
            Description.create(cmd.description) if cmd.description is not None else None
        )
        failure = combine(
            *(check for check in (parsed, checked_description) if check is not None)
        )
        if failure is not None:
            return failure

        new_name = parsed.value if parsed is not None else None
        name_changed = new_name is not None and new_name != seat.name
        if name_changed and not await self._seat_repo.is_name_unique(
            new_name.value, exclude_seat_id=seat.id
        ):
            return Failure(errors=SeatError.NAME_ALREADY_IN_USE)

        if name_changed:
            seat.change_name(new_name.number.value, new_name.row.value)
        if cmd.description is not None:
            seat.change_description(cmd.description)
        if cmd.is_blocked is True:
            seat.block()
        elif cmd.is_blocked is False:
            seat.unblock()

        updated = await self._seat_repo.update(seat)
        if isinstance(updated, Failure):
            return updated
        return Success(value=SeatResponse.from_entity(seat))


class DeleteSeatHandler:
    """Handler for DeleteSeat command."""

    def __init__(self, seat_repo: SeatRepository, logger: LoggerProtocol) -> None:
        self._seat_repo = seat_repo
        self._logger = logger

    async def handle(self, cmd: DeleteSeat) -> Result[SeatResponse]:
        try:
            seat = await self._seat_repo.find_by_id(cmd.seat_id)
            if seat is None:
                self._logger.warning("seat_delete_rejected", seat_id=str(cmd.seat_id))
                return Failure(errors=SeatError.not_found(cmd.seat_id))

            deleted = await self._seat_repo.delete(seat.id)
            if isinstance(deleted, Failure):
                return deleted
        except Exception as e:
            self._logger.error("seat_delete_failed", error=e, seat_id=str(cmd.seat_id))
            return Failure.from_exception(e)

        self._logger.info("seat_deleted", seat_id=str(seat.id))
        return Success(value=SeatResponse.from_entity(seat))
