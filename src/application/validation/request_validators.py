"""Request validators.

A request validator inspects a (filtered) command or query and returns every
rule violation it finds as a list of ``Error``; an empty list means valid.
Validators never raise for invalid input.

Validators:
    - TypedRequestValidator: field rules declared with the Annotated types
      in ``src.domain.types`` (length, format, nil UUID), checked by pydantic.
      It is also a binder: ``bind`` returns the request rebuilt from the
      values pydantic produced (``"2025-03-01"`` becomes a ``date``, UUID
      text becomes a ``UUID``), so later steps only see typed fields.
    - ReservationDateValidator: reservation day must not be before today
"""

from collections.abc import Callable
from dataclasses import MISSING, fields, is_dataclass, replace
from datetime import UTC, date, datetime
from functools import lru_cache
from typing import Any, Protocol, get_type_hints, runtime_checkable

from pydantic import BaseModel, ValidationError, create_model

from src.core.errors import Error
from src.core.result import Failure, Result, Success
from src.domain.errors import DateError


class RequestValidator(Protocol):
    """Validates one request, fail-slow."""

    def validate(self, request: Any) -> list[Error]:
        """Return every violation found (empty list when valid)."""
        ...


@runtime_checkable
class RequestBinder(Protocol):
    """Validator that also converts the request to its declared field types."""

    def validate(self, request: Any) -> list[Error]:
        ...

    def bind(self, request: Any) -> Result[Any]:
        """Return Success(typed copy of the request) or Failure(all errors)."""
        ...


@lru_cache(maxsize=None)
def _request_model(request_type: type) -> type[BaseModel]:
    """Build (once per request type) a pydantic model mirroring its fields."""
    hints = get_type_hints(request_type, include_extras=True)
    definitions: dict[str, Any] = {}
    for request_field in fields(request_type):
        if request_field.default is not MISSING:
            default = request_field.default
        elif request_field.default_factory is not MISSING:
            default = request_field.default_factory()
        else:
            default = ...
        definitions[request_field.name] = (hints[request_field.name], default)
    return create_model(f"{request_type.__name__}Rules", **definitions)


def _field_path(location: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in location)


class TypedRequestValidator:
    """Check a dataclass request against its Annotated field types.

    Every pydantic error becomes ``Error.validation(<field path>, <message>)``,
    so one call reports problems in all fields at once. ``bind`` also hands
    back the request with the values pydantic produced; the pipeline passes
    that typed copy on, never the raw input.

    Example:
        >>> TypedRequestValidator().validate(
        ...     CreateUser(first_name="A", last_name="Lopez", email="x", password="p")
        ... )
        [Error(code='first_name', ...), Error(code='email', ...), Error(code='password', ...)]
        >>> TypedRequestValidator().bind(GetUserById(user_id=str(user_id))).value
        GetUserById(user_id=UUID('...'))
    """

    def validate(self, request: Any) -> list[Error]:
        return list(self.bind(request).errors)

    def bind(self, request: Any) -> Result[Any]:
        if not is_dataclass(request) or isinstance(request, type):
            raise TypeError(f"{type(request).__name__} is not a dataclass request")

        model = _request_model(type(request))
        names = [request_field.name for request_field in fields(request)]
        try:
            typed = model.model_validate(
                {name: getattr(request, name) for name in names}
            )
        except ValidationError as e:
            return Failure(
                errors=[
                    Error.validation(_field_path(detail["loc"]), detail["msg"])
                    for detail in e.errors()
                ]
            )
        return Success(
            value=replace(request, **{name: getattr(typed, name) for name in names})
        )


def utc_today() -> date:
    return datetime.now(UTC).date()


class ReservationDateValidator:
    """Reject reservation days before today (UTC).

    Requests without a ``date`` (or with ``date=None``, meaning unchanged)
    pass. A ``date`` that is not a day at all is left to the typed
    validator, which reports it.

    Args:
        allow_past: Accept any day (``Settings.allow_past_reservations``).
        today: Clock returning today's date; injectable for tests.
    """

    def __init__(
        self,
        *,
        allow_past: bool = False,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self._allow_past = allow_past
        self._today = today

    def validate(self, request: Any) -> list[Error]:
        day = getattr(request, "date", None)
        if self._allow_past or not isinstance(day, date):
            return []
        if isinstance(day, datetime):
            day = day.date()
        if day < self._today():
            return [DateError.IN_THE_PAST]
        return []
