"""User command handlers.

Flows:
    Create: User.create -> email uniqueness -> save
    Update: find -> validate every requested change -> email uniqueness
            (only when the email changes) -> apply -> update
    Delete: find -> delete (the repository removes the user's reservations)

Every handler returns Result[UserResponse]. Expected failures come back as
Failure; unexpected exceptions are logged and returned as
Failure(Error.from_exception(e)). Task cancellation is not intercepted.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from uuid_extensions import uuid7

from src.application.commands.user_commands import CreateUser, DeleteUser, UpdateUser
from src.application.dtos import UserResponse
from src.core.result import Failure, Result, Success, combine
from src.domain.entities import User
from src.domain.errors import UserError
from src.domain.protocols import LoggerProtocol, UserRepository
from src.domain.value_objects import Email, FullName, Password


class CreateUserHandler:
    """Handler for CreateUser command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: CreateUser) -> Result[UserResponse]:
        """Register a user.

        Returns:
            Success(UserResponse), or Failure with every field error, or
            Failure(User.EmailAlreadyInUse).
        """
        self._logger.info("user_create_attempted", email=cmd.email)
        try:
            result = await self._create(cmd)
        except Exception as e:
            self._logger.error("user_create_failed", error=e, email=cmd.email)
            return Failure.from_exception(e)

        match result:
            case Success(value=user):
                self._logger.info("user_created", user_id=str(user.id))
            case Failure(errors=errors):
                self._logger.warning(
                    "user_create_rejected",
                    email=cmd.email,
                    error_codes=[error.code for error in errors],
                )
        return result

    async def _create(self, cmd: CreateUser) -> Result[UserResponse]:
        created = User.create(
            uuid7(), cmd.first_name, cmd.last_name, cmd.email, cmd.password
        )
        if isinstance(created, Failure):
            return created
        user = created.value

        if not await self._user_repo.is_email_unique(user.email.value):
            return Failure(errors=UserError.EMAIL_ALREADY_IN_USE)

        saved = await self._user_repo.save(user)
        if isinstance(saved, Failure):
            return saved
        return Success(value=UserResponse.from_entity(user))


class UpdateUserHandler:
    """Handler for UpdateUser command.

    All requested changes are validated together first; the user is only
    modified when every one of them is acceptable.
    """

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: UpdateUser) -> Result[UserResponse]:
        self._logger.info("user_update_attempted", user_id=str(cmd.user_id))
        try:
            result = await self._update(cmd)
        except Exception as e:
            self._logger.error("user_update_failed", error=e, user_id=str(cmd.user_id))
            return Failure.from_exception(e)

        if isinstance(result, Failure):
            self._logger.warning(
                "user_update_rejected",
                user_id=str(cmd.user_id),
                error_codes=[error.code for error in result.errors],
            )
        else:
            self._logger.info("user_updated", user_id=str(cmd.user_id))
        return result

    async def _update(self, cmd: UpdateUser) -> Result[UserResponse]:
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(errors=UserError.not_found(cmd.user_id))

        first_name = cmd.first_name or user.name.first_name.value
        last_name = cmd.last_name or user.name.last_name.value
        checks = [FullName.create(first_name, last_name)]
        if cmd.email is not None:
            checks.append(Email.create(cmd.email))
        if cmd.password is not None:
            checks.append(Password.create(cmd.password))
        failure = combine(*checks)
        if failure is not None:
            return failure

        email_changed = cmd.email is not None and cmd.email != user.email.value
        if email_changed and not await self._user_repo.is_email_unique(
            cmd.email, exclude_user_id=user.id
        ):
            return Failure(errors=UserError.EMAIL_ALREADY_IN_USE)

        user.change_name(first_name, last_name)
        if email_changed:
            user.change_email(cmd.email)
        if cmd.password is not None:
            user.change_password(cmd.password)

        updated = await self._user_repo.update(user)
        if isinstance(updated, Failure):
            return updated
        return Success(value=UserResponse.from_entity(user))


class DeleteUserHandler:
    """Handler for DeleteUser command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[UserResponse]:
        try:
            user = await self._user_repo.find_by_id(cmd.user_id)
            if user is None:
                self._logger.warning("user_delete_rejected", user_id=str(cmd.user_id))
                return Failure(errors=UserError.not_found(cmd.user_id))

            deleted = await self._user_repo.delete(user.id)
            if isinstance(deleted, Failure):
                return deleted
        except Exception as e:
            self._logger.error("user_delete_failed", error=e, user_id=str(cmd.user_id))
            return Failure.from_exception(e)

        self._logger.info("user_deleted", user_id=str(user.id))
        return Success(value=UserResponse.from_entity(user))
