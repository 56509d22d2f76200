"""Error response builder for RFC 9457 Problem Details.

Builds RFC 9457 compliant error responses from the errors of a failed
``Result``.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from collections.abc import Sequence

from fastapi import Request
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.errors import Error
from src.presentation.errors.problem_details import ErrorDetail, ProblemDetails
from src.presentation.errors.status_mapping import slug_for, status_for, title_for


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    The status, title and type follow the first error's category; the
    ``errors`` list carries every error in order.

    Example:
        >>> result = await handler.handle(command)
        >>> if isinstance(result, Failure):
        ...     return ErrorResponseBuilder.from_errors(
        ...         result.errors, request, trace_id="550e8400-..."
        ...     )
    """

    @staticmethod
    def from_errors(
        errors: Sequence[Error],
        request: Request,
        trace_id: str | None = None,
    ) -> JSONResponse:
        """Convert failure errors to an RFC 9457 JSON response.

        Args:
            errors: Non-empty errors of a failed result
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content

        Raises:
            ValueError: If errors is empty.
        """
        if not errors:
            raise ValueError("An error response requires at least one error")

        first = errors[0]
        status_code = status_for(first.category)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{slug_for(first.category)}",
            title=title_for(first.category),
            status=status_code,
            detail=first.message,
            instance=str(request.url.path),
            errors=[
                ErrorDetail(
                    code=error.code,
                    message=error.message,
                    category=error.category.value,
                )
                for error in errors
            ],
            trace_id=trace_id,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )
