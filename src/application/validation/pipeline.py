"""Validation pipeline.

Every request goes through the same steps before its handler runs:

1. Input filter: ``request.filtered()`` (trim, collapse whitespace, case)
2. All request validators, in order, fail-slow; errors are de-duplicated.
   A binder (``TypedRequestValidator``) replaces the request with its
   typed copy, so validators after it and the handler see ``date`` and
   ``UUID`` values even when the caller sent their text forms.
3. The handler receives the filtered, typed request, or is never called

Usage:
    pipeline = ValidationPipeline([TypedRequestValidator()])
    handler = ValidatingHandler(pipeline, CreateUserHandler(...), logger)
    result = await handler.handle(CreateUser(...))
"""

from collections.abc import Sequence
from typing import Generic, Protocol, TypeVar

from src.application.filters import InputFilter
from src.application.validation.request_validators import (
    RequestBinder,
    RequestValidator,
)
from src.core.errors import Error
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol

TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse")
TRequest_contra = TypeVar("TRequest_contra", contravariant=True)
TResponse_co = TypeVar("TResponse_co", covariant=True)


class RequestHandler(Protocol[TRequest_contra, TResponse_co]):
    """Any command or query handler."""

    async def handle(self, request: TRequest_contra) -> TResponse_co:
        ...


class ValidationPipeline:
    """Filter a request and run every validator over it.

    Args:
        validators: Validators run in order; all of them always run.
    """

    def __init__(self, validators: Sequence[RequestValidator]) -> None:
        self._validators = tuple(validators)

    def run(self, request: TRequest) -> Result[TRequest]:
        """Return Success(filtered, typed request) or Failure(all errors)."""
        if isinstance(request, InputFilter):
            request = request.filtered()

        errors: list[Error] = []
        for validator in self._validators:
            if isinstance(validator, RequestBinder):
                bound = validator.bind(request)
                if isinstance(bound, Success):
                    request = bound.value
                errors.extend(bound.errors)
            else:
                errors.extend(validator.validate(request))
        if errors:
            return Failure(errors=errors)
        return Success(value=request)


class ValidatingHandler(Generic[TRequest, TResponse]):
    """Handler decorator that runs the validation pipeline first.

    The wrapped handler only ever sees filtered, valid, typed requests.
    """

    def __init__(
        self,
        pipeline: ValidationPipeline,
        handler: RequestHandler[TRequest, Result[TResponse]],
        logger: LoggerProtocol,
    ) -> None:
        self._pipeline = pipeline
        self._handler = handler
        self._logger = logger

    async def handle(self, request: TRequest) -> Result[TResponse]:
        validated = self._pipeline.run(request)
        if isinstance(validated, Failure):
            self._logger.warning(
                "request_validation_failed",
                request_type=type(request).__name__,
                error_codes=[error.code for error in validated.errors],
            )
            return validated
        return await self._handler.handle(validated.value)
