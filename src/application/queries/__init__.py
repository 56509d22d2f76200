"""Queries (CQRS read operations)."""

from src.application.queries.reservation_queries import (
    GetAllReservations,
    GetReservationById,
    ListReservationsByDate,
    ListReservationsBySeat,
    ListReservationsBySeatName,
    ListReservationsByUser,
    ListReservationsByUserEmail,
)
from src.application.queries.seat_queries import GetAllSeats, GetSeatById, GetSeatByName
from src.application.queries.user_queries import GetAllUsers, GetUserByEmail, GetUserById

__all__ = [
    "GetAllReservations",
    "GetAllSeats",
    "GetAllUsers",
    "GetReservationById",
    "GetSeatById",
    "GetSeatByName",
    "GetUserByEmail",
    "GetUserById",
    "ListReservationsByDate",
    "ListReservationsBySeat",
    "ListReservationsBySeatName",
    "ListReservationsByUser",
    "ListReservationsByUserEmail",
]
