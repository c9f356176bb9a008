"""Interface layer errors and HTTP status mapping."""

import logfire
from fastapi import HTTPException, status

from ngestream.domain.error import (
    DomainError,
    NotAuthorOfComment,
    NotFoundError,
    PermissionDenied,
    StoreError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationRequired(InterfaceError):
    """No valid session accompanied a request that needs one."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


def to_http_exception(error: DomainError | InterfaceError) -> HTTPException:
    """Translate a domain or interface error into an HTTP response."""
    if isinstance(error, AuthenticationRequired):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, (PermissionDenied, NotAuthorOfComment)):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )
    if isinstance(error, StoreError):
        logfire.error("Comment store unavailable", error=str(error))
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment service temporarily unavailable",
        )

    logfire.error(
        "Unmapped error", error_type=type(error).__name__, error=str(error)
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error"
    )
