"""Query handlers (read side)."""

from src.application.queries.handlers.reservation_query_handlers import (
    GetAllReservationsHandler,
    GetReservationByIdHandler,
    ListReservationsByDateHandler,
    ListReservationsBySeatHandler,
    ListReservationsBySeatNameHandler,
    ListReservationsByUserEmailHandler,
    ListReservationsByUserHandler,
)
from src.application.queries.handlers.seat_query_handlers import (
    GetAllSeatsHandler,
    GetSeatByIdHandler,
    GetSeatByNameHandler,
)
from src.application.queries.handlers.user_query_handlers import (
    GetAllUsersHandler,
    GetUserByEmailHandler,
    GetUserByIdHandler,
)

__all__ = [
    "GetAllReservationsHandler",
    "GetAllSeatsHandler",
    "GetAllUsersHandler",
    "GetReservationByIdHandler",
    "GetSeatByIdHandler",
    "GetSeatByNameHandler",
    "GetUserByEmailHandler",
    "GetUserByIdHandler",
    "ListReservationsByDateHandler",
    "ListReservationsBySeatHandler",
    "ListReservationsBySeatNameHandler",
    "ListReservationsByUserEmailHandler",
    "ListReservationsByUserHandler",
]
