"""
Authentication controller.

Handles the public team auth endpoints (login, registration,
email verification, password recovery) and the authenticated
token refresh and revocation endpoints.
"""

from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from team_bff.api.responses import upstream_response
from team_bff.core.dependencies import UpstreamClientDep, authenticate
from team_bff.core.exceptions import BadRequestException
from team_bff.infrastructure.upstream_client import UpstreamClient
from team_bff.schemas.auth import (
    EmailRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from team_bff.services.auth_service import AuthService

router = APIRouter()


class AuthController:
    """
    Controller for team authentication operations.

    Validates required fields, then delegates to AuthService.
    """

    def __init__(self, client: UpstreamClient):
        self.auth_service = AuthService(client)

    async def login(self, request: LoginRequest) -> Any:
        if request.missing("email", "password"):
            raise BadRequestException("Email and password are required")
        return await self.auth_service.login(request.email, request.password)

    async def register(self, request: RegisterRequest) -> Any:
        if request.missing("first_name", "last_name", "email", "password"):
            raise BadRequestException(
                "First name, last name, email, and password are required"
            )
        return await self.auth_service.register(request)

    async def verify_email(self, token: str) -> Any:
        if not token.strip():
            raise BadRequestException("Token is required")
        return await self.auth_service.verify_email(token)

    async def resend_verification(self, request: EmailRequest) -> Any:
        if request.missing("email"):
            raise BadRequestException("Email is required")
        return await self.auth_service.resend_verification(request.email)

    async def forgot_password(self, request: EmailRequest) -> Any:
        if request.missing("email"):
            raise BadRequestException("Email is required")
        return await self.auth_service.forgot_password(request.email)

    async def reset_password(self, token: str, request: ResetPasswordRequest) -> Any:
        """
        Reset a forgotten password.

        Args:
            token: Reset token from the recovery email
            request: New password and its confirmation

        Raises:
            BadRequestException: If a field is missing or the passwords differ
        """
        if not token.strip() or request.missing("new_password", "confirm_password"):
            raise BadRequestException(
                "Token, new password, and confirm password are required"
            )
        if request.new_password != request.confirm_password:
            raise BadRequestException("Passwords do not match")
        return await self.auth_service.reset_password(
            token,
            request.new_password,
            request.confirm_password,
        )

    async def refresh_token(self) -> Any:
        return await self.auth_service.refresh_token()

    async def logout(self) -> Any:
        return await self.auth_service.logout()


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTE HANDLERS - PUBLIC
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "/login",
    summary="Log In",
    description="Log in with email and password. The issued token is held for later upstream calls.",
)
async def login(request: LoginRequest, client: UpstreamClientDep) -> JSONResponse:
    controller = AuthController(client)
    return upstream_response(await controller.login(request))


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register Team Account",
)
async def register(request: RegisterRequest, client: UpstreamClientDep) -> JSONResponse:
    controller = AuthController(client)
    return upstream_response(
        await controller.register(request),
        status_code=status.HTTP_201_CREATED,
    )


@router.get(
    "/verify-email/{token}",
    summary="Verify Email",
)
async def verify_email(token: str, client: UpstreamClientDep) -> JSONResponse:
    controller = AuthController(client)
    return upstream_response(await controller.verify_email(token))


@router.post(
    "/resend-verification",
    summary="Resend Verification Email",
)
async def resend_verification(request: EmailRequest, client: UpstreamClientDep) -> JSONResponse:
    controller = AuthController(client)
    return upstream_response(await controller.resend_verification(request))


@router.post(
    "/forgot-password",
    summary="Request Password Reset",
)
async def forgot_password(request: EmailRequest, client: UpstreamClientDep) -> JSONResponse:
    controller = AuthController(client)
    return upstream_response(await controller.forgot_password(request))


@router.post(
    "/reset-password/{token}",
    summary="Reset Password",
)
async def reset_password(
    token: str,
    request: ResetPasswordRequest,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = AuthController(client)
    return upstream_response(await controller.reset_password(token, request))


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTE HANDLERS - AUTHENTICATED
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "/refresh-token",
    dependencies=[Depends(authenticate)],
    summary="Refresh Access Token",
)
async def refresh_token(client: UpstreamClientDep) -> JSONResponse:
    controller = AuthController(client)
    return upstream_response(await controller.refresh_token())


@router.delete(
    "/revoke-token",
    dependencies=[Depends(authenticate)],
    summary="Log Out",
    description="Revoke the token upstream and drop the held token.",
)
async def logout(client: UpstreamClientDep) -> JSONResponse:
    controller = AuthController(client)
    return upstream_response(await controller.logout())
