"""
Custom exceptions for the application
"""

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)

    @property
    def message(self) -> str:
        return str(self.detail)


class BadRequestException(AppException):
    """Missing or invalid input, raised before anything is forwarded."""

    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedException(AppException):
    """Unauthorized access exception."""

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class TwoFactorRequiredException(AppException):
    """A 2FA code header is required but was not sent."""

    def __init__(self, detail: str = "2FA code is required for this operation."):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class UpstreamException(AppException):
    """
    Error response received from the upstream API.

    Carries the upstream status code and message so they can be
    forwarded to the caller unchanged.
    """

    def __init__(
        self,
        status_code: int,
        detail: str = "An error occurred with the API request",
        body: object = None,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.body = body


class ServiceUnavailableException(AppException):
    """The upstream API could not be reached."""

    def __init__(self, detail: str = "Network error. Please check your connection."):
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)
