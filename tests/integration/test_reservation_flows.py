"""End-to-end flows through validated handlers on an isolated database.

Covers the request path: filter -> validate -> handler -> repository ->
database, as wired by the container.
"""

from datetime import timedelta

import pytest
from sqlalchemy import func, select

from src.application.commands import (
    CreateReservation,
    CreateSeat,
    CreateUser,
    DeleteSeat,
    UpdateReservation,
    UpdateSeat,
)
from src.application.queries import (
    GetAllReservations,
    GetAllSeats,
    GetAllUsers,
    ListReservationsByDate,
    ListReservationsBySeat,
    ListReservationsBySeatName,
    ListReservationsByUserEmail,
)
from src.application.validation.request_validators import utc_today
from src.core.container import (
    get_create_reservation_handler,
    get_create_seat_handler,
    get_create_user_handler,
    get_delete_seat_handler,
    get_get_all_reservations_handler,
    get_get_all_seats_handler,
    get_get_all_users_handler,
    get_list_reservations_by_date_handler,
    get_list_reservations_by_seat_handler,
    get_list_reservations_by_seat_name_handler,
    get_list_reservations_by_user_email_handler,
    get_update_reservation_handler,
    get_update_seat_handler,
)
from src.infrastructure.persistence.models import ReservationModel, UserModel


async def new_user(session, email="ana@example.com"):
    handler = await get_create_user_handler(session)
    result = await handler.handle(
        CreateUser(
            first_name="ana", last_name="lopez", email=email, password="SecurePass1!"
        )
    )
    return result.value


async def new_seat(session, name="a1"):
    handler = await get_create_seat_handler(session)
    return (await handler.handle(CreateSeat(name=name))).value


async def book(session, user_id, seat_id, day):
    handler = await get_create_reservation_handler(session)
    return await handler.handle(
        CreateReservation(user_id=user_id, seat_id=seat_id, date=day)
    )


async def count(session, model) -> int:
    return await session.scalar(select(func.count()).select_from(model))


@pytest.mark.integration
class TestReservationFlows:
    """Test complete reservation scenarios."""

    @pytest.mark.asyncio
    async def test_registration_is_normalised(self, db_session):
        user = await new_user(db_session, email=" Ana@Example.COM ")

        assert user.full_name == "Ana Lopez"
        assert user.email == "ana@example.com"

    @pytest.mark.asyncio
    async def test_duplicate_registration(self, db_session):
        await new_user(db_session, email="ana@example.com")
        handler = await get_create_user_handler(db_session)

        result = await handler.handle(
            CreateUser(
                first_name="Eva",
                last_name="Diaz",
                email="ANA@example.com",
                password="SecurePass1!",
            )
        )

        assert result.first_error.code == "User.EmailAlreadyInUse"
        assert await count(db_session, UserModel) == 1

    @pytest.mark.asyncio
    async def test_one_reservation_per_seat_per_day(self, db_session):
        day = utc_today() + timedelta(days=1)
        seat = await new_seat(db_session)
        ana = await new_user(db_session, "ana@example.com")
        eva = await new_user(db_session, "eva@example.com")

        first = await book(db_session, ana.id, seat.id, day)
        second = await book(db_session, eva.id, seat.id, day)

        assert first.is_success
        assert second.first_error.code == "Seat.NotAvailable"

    @pytest.mark.asyncio
    async def test_text_date_cannot_double_book(self, db_session):
        """Test ISO text dates reach the handler as days and collide as such."""
        day = utc_today() + timedelta(days=1)
        seat = await new_seat(db_session)
        ana = await new_user(db_session, "ana@example.com")
        eva = await new_user(db_session, "eva@example.com")

        first = await book(db_session, ana.id, seat.id, day.isoformat())
        second = await book(db_session, eva.id, seat.id, day.isoformat())

        assert first.value.date == day
        assert second.first_error.code == "Seat.NotAvailable"
        assert await count(db_session, ReservationModel) == 1

    @pytest.mark.asyncio
    async def test_text_identifiers_accepted(self, db_session):
        day = utc_today() + timedelta(days=1)
        seat = await new_seat(db_session)
        user = await new_user(db_session)

        result = await book(db_session, str(user.id), str(seat.id), day)

        assert result.value.user_id == user.id
        assert result.value.seat_id == seat.id

    @pytest.mark.asyncio
    async def test_text_past_date_rejected(self, db_session):
        seat = await new_seat(db_session)
        user = await new_user(db_session)
        yesterday = utc_today() - timedelta(days=1)

        result = await book(db_session, user.id, seat.id, yesterday.isoformat())

        assert [e.code for e in result.errors] == ["Date.InThePast"]

    @pytest.mark.asyncio
    async def test_blocked_seat_refuses_new_reservations(self, db_session):
        day = utc_today() + timedelta(days=2)
        seat = await new_seat(db_session)
        user = await new_user(db_session)
        update = await get_update_seat_handler(db_session)
        await update.handle(UpdateSeat(seat_id=seat.id, is_blocked=True))

        result = await book(db_session, user.id, seat.id, day)

        assert result.first_error.code == "Seat.Blocked"

    @pytest.mark.asyncio
    async def test_move_reservation_to_free_day(self, db_session):
        day = utc_today() + timedelta(days=1)
        seat = await new_seat(db_session)
        user = await new_user(db_session)
        reservation = (await book(db_session, user.id, seat.id, day)).value
        update = await get_update_reservation_handler(db_session)

        result = await update.handle(
            UpdateReservation(reservation_id=reservation.id, date=day + timedelta(days=1))
        )

        assert result.value.date == day + timedelta(days=1)
        by_date = await get_list_reservations_by_date_handler(db_session)
        listed = await by_date.handle(ListReservationsByDate(date=day))
        assert listed.value == []

    @pytest.mark.asyncio
    async def test_move_reservation_onto_taken_day(self, db_session):
        day = utc_today() + timedelta(days=1)
        seat = await new_seat(db_session)
        ana = await new_user(db_session, "ana@example.com")
        eva = await new_user(db_session, "eva@example.com")
        await book(db_session, ana.id, seat.id, day)
        moving = (await book(db_session, eva.id, seat.id, day + timedelta(days=1))).value
        update = await get_update_reservation_handler(db_session)

        result = await update.handle(
            UpdateReservation(reservation_id=moving.id, date=day)
        )

        assert result.first_error.code == "Seat.NotAvailable"

    @pytest.mark.asyncio
    async def test_validation_errors_before_any_lookup(self, db_session):
        """Test every field error is returned at once."""
        handler = await get_create_user_handler(db_session)

        result = await handler.handle(
            CreateUser(first_name="", last_name="x1", email="nope", password="short")
        )

        assert [e.code for e in result.errors] == [
            "first_name",
            "last_name",
            "email",
            "password",
        ]
        assert await count(db_session, UserModel) == 0

    @pytest.mark.asyncio
    async def test_deleting_seat_removes_its_reservations(self, db_session):
        day = utc_today() + timedelta(days=1)
        seat = await new_seat(db_session)
        user = await new_user(db_session)
        await book(db_session, user.id, seat.id, day)
        delete = await get_delete_seat_handler(db_session)

        await delete.handle(DeleteSeat(seat_id=seat.id))

        by_seat = await get_list_reservations_by_seat_handler(db_session)
        listed = await by_seat.handle(ListReservationsBySeat(seat_id=seat.id))
        assert listed.value == []
        assert await count(db_session, ReservationModel) == 0


@pytest.mark.integration
class TestListingFlows:
    """Test the catalogue and lookup listings."""

    @pytest.mark.asyncio
    async def test_get_all(self, db_session):
        day = utc_today() + timedelta(days=1)
        b2 = await new_seat(db_session, "b2")
        a1 = await new_seat(db_session, "a1")
        eva = await new_user(db_session, "eva@example.com")
        ana = await new_user(db_session, "ana@example.com")
        await book(db_session, eva.id, a1.id, day + timedelta(days=1))
        await book(db_session, ana.id, b2.id, day)

        users = await (await get_get_all_users_handler(db_session)).handle(
            GetAllUsers()
        )
        seats = await (await get_get_all_seats_handler(db_session)).handle(
            GetAllSeats()
        )
        reservations = await (
            await get_get_all_reservations_handler(db_session)
        ).handle(GetAllReservations())

        assert [u.email for u in users.value] == ["ana@example.com", "eva@example.com"]
        assert [s.name for s in seats.value] == ["A1", "B2"]
        assert [r.seat_name for r in reservations.value] == ["B2", "A1"]

    @pytest.mark.asyncio
    async def test_reservations_by_seat_name_and_user_email(self, db_session):
        day = utc_today() + timedelta(days=1)
        seat = await new_seat(db_session, "c7")
        user = await new_user(db_session, "ana@example.com")
        booked = (await book(db_session, user.id, seat.id, day)).value
        by_name = await get_list_reservations_by_seat_name_handler(db_session)
        by_email = await get_list_reservations_by_user_email_handler(db_session)

        for_seat = await by_name.handle(ListReservationsBySeatName(name=" c7 "))
        for_user = await by_email.handle(
            ListReservationsByUserEmail(email="ANA@example.com")
        )
        unknown = await by_name.handle(ListReservationsBySeatName(name="Z9"))

        assert [r.id for r in for_seat.value] == [booked.id]
        assert [r.id for r in for_user.value] == [booked.id]
        assert unknown.value == []
