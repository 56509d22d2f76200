"""Integration tests for Database session management and schema.

Tests cover:
- Commit on clean exit, rollback when the block raises
- Unique indexes and constraints created with the schema
- Foreign keys enforced on SQLite
"""

from datetime import date

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.infrastructure.persistence.models import (
    ReservationModel,
    SeatModel,
    UserModel,
)


def user_row(email="ana@example.com") -> UserModel:
    return UserModel(
        id=uuid7(),
        first_name="Ana",
        last_name="Lopez",
        email=email,
        password="SecurePass1!",
    )


def seat_row(row="A", number="1") -> SeatModel:
    return SeatModel(id=uuid7(), row=row, number=number)


async def count(test_database, model) -> int:
    async with test_database.get_session() as session:
        return await session.scalar(select(func.count()).select_from(model))


@pytest.mark.integration
class TestDatabaseSessions:
    """Test get_session transaction handling."""

    @pytest.mark.asyncio
    async def test_commits_on_exit(self, test_database):
        async with test_database.get_session() as session:
            session.add(user_row())

        assert await count(test_database, UserModel) == 1

    @pytest.mark.asyncio
    async def test_rolls_back_when_block_raises(self, test_database):
        with pytest.raises(RuntimeError):
            async with test_database.get_session() as session:
                session.add(user_row())
                await session.flush()
                raise RuntimeError("boom")

        assert await count(test_database, UserModel) == 0

    @pytest.mark.asyncio
    async def test_drop_all_removes_tables(self, test_database):
        await test_database.drop_all()
        await test_database.create_all()

        assert await count(test_database, SeatModel) == 0


@pytest.mark.integration
class TestSchemaConstraints:
    """Test the storage-level uniqueness and reference rules."""

    @pytest.mark.asyncio
    async def test_email_unique_ignoring_case(self, test_database):
        async with test_database.get_session() as session:
            session.add(user_row("ana@example.com"))

        with pytest.raises(IntegrityError):
            async with test_database.get_session() as session:
                session.add(user_row("ANA@example.com"))

    @pytest.mark.asyncio
    async def test_seat_name_unique_ignoring_case(self, test_database):
        async with test_database.get_session() as session:
            session.add(seat_row("A", "1"))

        with pytest.raises(IntegrityError):
            async with test_database.get_session() as session:
                session.add(seat_row("a", "1"))

    @pytest.mark.asyncio
    async def test_one_reservation_per_seat_and_day(self, test_database):
        user, seat = user_row(), seat_row()
        async with test_database.get_session() as session:
            session.add_all([user, seat])
            await session.flush()
            session.add(
                ReservationModel(day=date(2025, 3, 1), user_id=user.id, seat_id=seat.id)
            )

        with pytest.raises(IntegrityError):
            async with test_database.get_session() as session:
                session.add(
                    ReservationModel(
                        day=date(2025, 3, 1), user_id=user.id, seat_id=seat.id
                    )
                )

    @pytest.mark.asyncio
    async def test_reservation_requires_existing_seat(self, test_database):
        user = user_row()
        async with test_database.get_session() as session:
            session.add(user)

        with pytest.raises(IntegrityError):
            async with test_database.get_session() as session:
                session.add(
                    ReservationModel(day=date(2025, 3, 1), user_id=user.id, seat_id=uuid7())
                )

    @pytest.mark.asyncio
    async def test_to_dict_includes_timestamps(self, test_database):
        async with test_database.get_session() as session:
            seat = seat_row()
            session.add(seat)
            await session.flush()
            await session.refresh(seat)

            data = seat.to_dict()

        assert data["id"] == str(seat.id)
        assert data["created_at"] is not None
        assert data["updated_at"] is not None
