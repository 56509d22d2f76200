"""Request validation: validators and the pipeline that runs them."""

from src.application.validation.pipeline import (
    RequestHandler,
    ValidatingHandler,
    ValidationPipeline,
)
from src.application.validation.request_validators import (
    RequestBinder,
    ReservationDateValidator,
    RequestValidator,
    TypedRequestValidator,
)

__all__ = [
    "RequestBinder",
    "RequestHandler",
    "RequestValidator",
    "ReservationDateValidator",
    "TypedRequestValidator",
    "ValidatingHandler",
    "ValidationPipeline",
]
