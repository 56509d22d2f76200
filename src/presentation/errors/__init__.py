"""RFC 9457 error responses.

Exports:
    ErrorDetail: One error of a failed result
    ProblemDetails: RFC 9457 compliant error response schema
    ErrorResponseBuilder: Utility for building RFC 9457 responses
    status_for: Error category to HTTP status mapping
"""

from src.presentation.errors.error_response_builder import ErrorResponseBuilder
from src.presentation.errors.problem_details import ErrorDetail, ProblemDetails
from src.presentation.errors.status_mapping import status_for, title_for

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "status_for",
    "title_for",
]
