"""User query handlers.

Read-only; never change state.
"""

from src.application.dtos import UserResponse
from src.application.queries.user_queries import (
    GetAllUsers,
    GetUserByEmail,
    GetUserById,
)
from src.core.result import Failure, Result, Success
from src.domain.errors import UserError
from src.domain.protocols import LoggerProtocol, UserRepository


class GetUserByIdHandler:
    """Handler for GetUserById query."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, query: GetUserById) -> Result[UserResponse]:
        try:
            user = await self._user_repo.find_by_id(query.user_id)
        except Exception as e:
            self._logger.error("user_lookup_failed", error=e, user_id=str(query.user_id))
            return Failure.from_exception(e)

        if user is None:
            return Failure(errors=UserError.not_found(query.user_id))
        return Success(value=UserResponse.from_entity(user))


class GetUserByEmailHandler:
    """Handler for GetUserByEmail query."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, query: GetUserByEmail) -> Result[UserResponse]:
        try:
            user = await self._user_repo.find_by_email(query.email)
        except Exception as e:
            self._logger.error("user_lookup_failed", error=e)
            return Failure.from_exception(e)

        if user is None:
            return Failure(errors=UserError.email_not_exist(query.email))
        return Success(value=UserResponse.from_entity(user))


class GetAllUsersHandler:
    """Handler for GetAllUsers query."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, query: GetAllUsers) -> Result[list[UserResponse]]:
        try:
            users = await self._user_repo.list_all()
        except Exception as e:
            self._logger.error("user_list_failed", error=e)
            return Failure.from_exception(e)
        return Success(value=[UserResponse.from_entity(user) for user in users])
