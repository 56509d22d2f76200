"""Pytest configuration and shared test helpers.

Helpers build valid domain objects with sensible defaults so each test only
spells out the attribute it is about.

Database fixtures are isolated: every test gets its own in-memory SQLite
database with the schema created, instead of the app-scoped singleton.
"""

from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from src.domain.entities import Reservation, Seat, User

TODAY = date(2025, 3, 1)
TOMORROW = TODAY + timedelta(days=1)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def create_user(
    first_name: str = "Ana",
    last_name: str = "Lopez",
    email: str | None = None,
    password: str = "SecurePass1!",
) -> User:
    """Helper to create a valid User for testing.

    Args:
        email: Defaults to a unique address per call.
    """
    email = email or f"user-{uuid7().hex[:12]}@example.com"
    return User.create(uuid7(), first_name, last_name, email, password).value


def create_seat(
    number: str = "1",
    row: str = "A",
    description: str | None = None,
    *,
    blocked: bool = False,
) -> Seat:
    """Helper to create a valid Seat for testing."""
    seat = Seat.create(uuid7(), number, row, description).value
    if blocked:
        seat.block()
    return seat


def reserve(user: User, seat: Seat, day: date = TODAY) -> Reservation:
    """Create a reservation and attach it to both sides, as a handler would."""
    reservation = Reservation.create(uuid7(), day, user, seat).value
    user.add_reservation(reservation)
    seat.add_reservation(reservation)
    return reservation


@pytest.fixture
def mock_logger():
    """LoggerProtocol stand-in recording every call."""
    return MagicMock()


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh database with the schema created.

    Returns the Database object (not a session), so tests can open several
    independent sessions.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=TEST_DATABASE_URL)
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    """Provide a session on the test database (committed on exit)."""
    async with test_database.get_session() as session:
        yield session
