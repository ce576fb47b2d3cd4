"""Core modules for the application."""

from team_bff.core.exceptions import (
    AppException,
    BadRequestException,
    ServiceUnavailableException,
    TwoFactorRequiredException,
    UnauthorizedException,
    UpstreamException,
)

__all__ = [
    "AppException",
    "BadRequestException",
    "ServiceUnavailableException",
    "TwoFactorRequiredException",
    "UnauthorizedException",
    "UpstreamException",
]
