"""Unit tests for seat command and query handlers."""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands import CreateSeat, DeleteSeat, UpdateSeat
from src.application.commands.handlers import (
    CreateSeatHandler,
    DeleteSeatHandler,
    UpdateSeatHandler,
)
from src.application.queries import GetAllSeats, GetSeatById, GetSeatByName
from src.application.queries.handlers import (
    GetAllSeatsHandler,
    GetSeatByIdHandler,
    GetSeatByNameHandler,
)
from src.core.result import Failure, ok
from tests.conftest import create_seat


def seat_repo(**returns) -> AsyncMock:
    repo = AsyncMock()
    repo.is_name_unique.return_value = True
    repo.save.return_value = ok()
    repo.update.return_value = ok()
    repo.delete.return_value = ok()
    for name, value in returns.items():
        getattr(repo, name).return_value = value
    return repo


@pytest.mark.unit
class TestCreateSeatHandler:
    """Test CreateSeatHandler."""

    @pytest.mark.asyncio
    async def test_create_seat(self, mock_logger):
        repo = seat_repo()

        result = await CreateSeatHandler(repo, mock_logger).handle(
            CreateSeat(name="B12", description="Window")
        )

        assert result.value.name == "B12"
        assert result.value.row == "B"
        assert result.value.number == "12"
        assert result.value.description == "Window"
        repo.is_name_unique.assert_awaited_once_with("B12")

    @pytest.mark.asyncio
    async def test_invalid_name(self, mock_logger):
        repo = seat_repo()

        result = await CreateSeatHandler(repo, mock_logger).handle(CreateSeat(name="12B"))

        assert result.first_error.code == "SeatName.InvalidFormat"
        repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_name(self, mock_logger):
        repo = seat_repo(is_name_unique=False)

        result = await CreateSeatHandler(repo, mock_logger).handle(CreateSeat(name="A1"))

        assert result.first_error.code == "Seat.NameAlreadyInUse"

    @pytest.mark.asyncio
    async def test_storage_conflict_is_returned(self, mock_logger):
        """Test a unique-index failure from save is passed through."""
        from src.domain.errors import SeatError

        repo = seat_repo(save=Failure(errors=SeatError.NAME_ALREADY_IN_USE))

        result = await CreateSeatHandler(repo, mock_logger).handle(CreateSeat(name="A1"))

        assert result.first_error == SeatError.NAME_ALREADY_IN_USE


@pytest.mark.unit
class TestUpdateSeatHandler:
    """Test UpdateSeatHandler."""

    @pytest.mark.asyncio
    async def test_rename_and_block(self, mock_logger):
        seat = create_seat(number="1", row="A")
        repo = seat_repo(find_by_id=seat)

        result = await UpdateSeatHandler(repo, mock_logger).handle(
            UpdateSeat(seat_id=seat.id, name="C3", is_blocked=True)
        )

        assert result.value.name == "C3"
        assert result.value.is_blocked is True
        repo.is_name_unique.assert_awaited_once_with("C3", exclude_seat_id=seat.id)

    @pytest.mark.asyncio
    async def test_same_name_skips_uniqueness(self, mock_logger):
        seat = create_seat(number="1", row="A")
        repo = seat_repo(find_by_id=seat)

        await UpdateSeatHandler(repo, mock_logger).handle(
            UpdateSeat(seat_id=seat.id, name="A1", description="Quiet")
        )

        repo.is_name_unique.assert_not_called()
        assert seat.description.value == "Quiet"

    @pytest.mark.asyncio
    async def test_unblock(self, mock_logger):
        seat = create_seat(blocked=True)
        repo = seat_repo(find_by_id=seat)

        result = await UpdateSeatHandler(repo, mock_logger).handle(
            UpdateSeat(seat_id=seat.id, is_blocked=False)
        )

        assert result.value.is_blocked is False

    @pytest.mark.asyncio
    async def test_invalid_changes_reported_together(self, mock_logger):
        seat = create_seat(number="1", row="A")
        repo = seat_repo(find_by_id=seat)

        result = await UpdateSeatHandler(repo, mock_logger).handle(
            UpdateSeat(seat_id=seat.id, name="1A", description="x" * 300)
        )

        assert [e.code for e in result.errors] == [
            "SeatName.InvalidFormat",
            "Description.TooLong",
        ]
        assert seat.name.value == "A1"

    @pytest.mark.asyncio
    async def test_missing_seat(self, mock_logger):
        repo = seat_repo(find_by_id=None)

        result = await UpdateSeatHandler(repo, mock_logger).handle(
            UpdateSeat(seat_id=uuid7(), is_blocked=True)
        )

        assert result.first_error.code == "Seat.NotFound"


@pytest.mark.unit
class TestDeleteSeatAndQueries:
    """Test DeleteSeatHandler and seat queries."""

    @pytest.mark.asyncio
    async def test_delete_seat(self, mock_logger):
        seat = create_seat()
        repo = seat_repo(find_by_id=seat)

        result = await DeleteSeatHandler(repo, mock_logger).handle(DeleteSeat(seat_id=seat.id))

        assert result.is_success
        repo.delete.assert_awaited_once_with(seat.id)

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, mock_logger):
        handler = GetSeatByIdHandler(seat_repo(find_by_id=None), mock_logger)

        result = await handler.handle(GetSeatById(seat_id=uuid7()))

        assert result.first_error.code == "Seat.NotFound"

    @pytest.mark.asyncio
    async def test_get_by_name(self, mock_logger):
        seat = create_seat(number="4", row="D")
        handler = GetSeatByNameHandler(seat_repo(find_by_name=seat), mock_logger)

        result = await handler.handle(GetSeatByName(name="D4"))

        assert result.value.id == seat.id

    @pytest.mark.asyncio
    async def test_get_by_name_missing(self, mock_logger):
        handler = GetSeatByNameHandler(seat_repo(find_by_name=None), mock_logger)

        result = await handler.handle(GetSeatByName(name="Z9"))

        assert result.first_error.code == "Seat.NameNotExist"

    @pytest.mark.asyncio
    async def test_get_all(self, mock_logger):
        seats = [create_seat(number="1"), create_seat(number="2", blocked=True)]
        handler = GetAllSeatsHandler(seat_repo(list_all=seats), mock_logger)

        result = await handler.handle(GetAllSeats())

        assert [(s.name, s.is_blocked) for s in result.value] == [
            ("A1", False),
            ("A2", True),
        ]

    @pytest.mark.asyncio
    async def test_get_all_empty(self, mock_logger):
        handler = GetAllSeatsHandler(seat_repo(list_all=[]), mock_logger)

        result = await handler.handle(GetAllSeats())

        assert result.value == []
