"""Interface layer errors.

Maps the domain error taxonomy onto HTTP responses.
"""

from fastapi import HTTPException, status

from meet.domain.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    TransientError,
    ValidationError,
)

_STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (TransientError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into an HTTPException.

    The detail carries the message plus the resource, its ID and, for
    conflicts, the state it was found in.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_type, code in _STATUS_CODES:
        if isinstance(error, error_type):
            status_code = code
            break

    detail: dict[str, str | None] = {
        "error": type(error).__name__,
        "message": error.message,
        "resource": error.resource,
        "resource_id": error.resource_id,
    }
    if isinstance(error, ConflictError):
        detail["current_state"] = error.current_state

    headers = {"Retry-After": "1"} if isinstance(error, TransientError) else None
    return HTTPException(status_code=status_code, detail=detail, headers=headers)
