"""Seat query handlers."""

from src.application.dtos import SeatResponse
from src.application.queries.seat_queries import (
    GetAllSeats,
    GetSeatById,
    GetSeatByName,
)
from src.core.result import Failure, Result, Success
from src.domain.errors import SeatError
from src.domain.protocols import LoggerProtocol, SeatRepository


class GetSeatByIdHandler:
    """Handler for GetSeatById query."""

    def __init__(self, seat_repo: SeatRepository, logger: LoggerProtocol) -> None:
        self._seat_repo = seat_repo
        self._logger = logger

    async def handle(self, query: GetSeatById) -> Result[SeatResponse]:
        try:
            seat = await self._seat_repo.find_by_id(query.seat_id)
        except Exception as e:
            self._logger.error("seat_lookup_failed", error=e, seat_id=str(query.seat_id))
            return Failure.from_exception(e)

        if seat is None:
            return Failure(errors=SeatError.not_found(query.seat_id))
        return Success(value=SeatResponse.from_entity(seat))


class GetSeatByNameHandler:
    """Handler for GetSeatByName query."""

    def __init__(self, seat_repo: SeatRepository, logger: LoggerProtocol) -> None:
        self._seat_repo = seat_repo
        self._logger = logger

    async def handle(self, query: GetSeatByName) -> Result[SeatResponse]:
        try:
            seat = await self._seat_repo.find_by_name(query.name)
        except Exception as e:
            self._logger.error("seat_lookup_failed", error=e, seat_name=query.name)
            return Failure.from_exception(e)

        if seat is None:
            return Failure(errors=SeatError.name_not_exist(query.name))
        return Success(value=SeatResponse.from_entity(seat))


class GetAllSeatsHandler:
    """Handler for GetAllSeats query."""

    def __init__(self, seat_repo: SeatRepository, logger: LoggerProtocol) -> None:
        self._seat_repo = seat_repo
        self._logger = logger

    async def handle(self, query: GetAllSeats) -> Result[list[SeatResponse]]:
        try:
            seats = await self._seat_repo.list_all()
        except Exception as e:
            self._logger.error("seat_list_failed", error=e)
            return Failure.from_exception(e)
        return Success(value=[SeatResponse.from_entity(seat) for seat in seats])
