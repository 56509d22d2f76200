"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for structured error responses.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: One error of a failed result
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One error carried by a failed result.

    Attributes:
        code: Machine-readable error code (field path for request validation)
        message: Human-readable error message
        category: Error category name

    Examples:
        >>> error = ErrorDetail(
        ...     code="Seat.NotAvailable",
        ...     message="Seat '...' is not available on 2025-03-01",
        ...     category="conflict",
        ... )
    """

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    category: str = Field(..., description="Error category")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Every error of the failed result
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/conflict",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="The seat name is already in use",
        ...     instance="/seats",
        ...     errors=[ErrorDetail(code="Seat.NameAlreadyInUse", ...)],
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/validation-failed"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Validation Failed"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["The first name must be at least 2 characters long"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/reservations"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="Every error of the failed result",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
