"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.result import Failure, Result, ok
from src.domain.entities.user import User
from src.domain.errors import UserError
from src.infrastructure.persistence.mappers import copy_user, load_user, user_to_model
from src.infrastructure.persistence.models import ReservationModel, UserModel
from src.infrastructure.persistence.repositories.commit import commit_or_conflict


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("USER@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        return await load_user(self.session, user_id)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive)."""
        user_id = await self._owner_of(email)
        if user_id is None:
            return None
        return await load_user(self.session, user_id)

    async def is_email_unique(
        self, email: str, exclude_user_id: UUID | None = None
    ) -> bool:
        owner = await self._owner_of(email)
        return owner is None or owner == exclude_user_id

    async def list_all(self) -> list[User]:
        stmt = select(UserModel.id).order_by(UserModel.email)
        users = [
            await load_user(self.session, user_id)
            for user_id in (await self.session.scalars(stmt)).all()
        ]
        return [user for user in users if user is not None]

    async def save(self, user: User) -> Result[None]:
        """Create new user.

        Returns:
            Success, or Failure(User.EmailAlreadyInUse) when the email
            index already holds this address.
        """
        self.session.add(user_to_model(user))
        return await commit_or_conflict(self.session, UserError.EMAIL_ALREADY_IN_USE)

    async def update(self, user: User) -> Result[None]:
        model = await self.session.get(UserModel, user.id)
        if model is None:
            return Failure(errors=UserError.not_found(user.id))
        copy_user(user, model)
        return await commit_or_conflict(self.session, UserError.EMAIL_ALREADY_IN_USE)

    async def delete(self, user_id: UUID) -> Result[None]:
        """Delete user and their reservations."""
        model = await self.session.get(UserModel, user_id)
        if model is None:
            return Failure(errors=UserError.not_found(user_id))
        await self.session.execute(
            delete(ReservationModel).where(ReservationModel.user_id == user_id)
        )
        await self.session.delete(model)
        await self.session.commit()
        return ok()

    async def _owner_of(self, email: str) -> UUID | None:
        stmt = select(UserModel.id).where(func.lower(UserModel.email) == email.lower())
        return (await self.session.execute(stmt)).scalar_one_or_none()
