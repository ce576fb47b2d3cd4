"""
Authentication service.

Forwards login, registration, verification and password recovery
to the upstream API and keeps the token store in step with the
tokens the upstream issues and revokes.
"""

from typing import Any
from urllib.parse import quote

from team_bff.infrastructure.upstream_client import UpstreamClient, extract_token
from team_bff.schemas.auth import RegisterRequest
from team_bff.services.base import BaseUpstreamService


class AuthService(BaseUpstreamService):
    """Service for team authentication operations."""

    def __init__(self, client: UpstreamClient):
        super().__init__(client)
        self.token_store = client.token_store

    async def login(self, email: str, password: str) -> Any:
        """
        Log in and hold the issued access token.

        Args:
            email: Account email
            password: Account password

        Returns:
            Upstream response body
        """
        result = await self._forward(
            "Login",
            "POST",
            "/team/auth/login",
            json={"email": email, "password": password},
        )
        token = extract_token(result)
        if token:
            self.token_store.set(token)
        return result

    async def register(self, user: RegisterRequest) -> Any:
        return await self._forward(
            "Registration",
            "POST",
            "/team/auth/register",
            json=user.model_dump(
                include={"first_name", "last_name", "middle_name", "email", "password"},
                exclude_none=True,
            ),
        )

    async def verify_email(self, token: str) -> Any:
        return await self._forward(
            "Email verification",
            "GET",
            f"/team/auth/verify-email/{quote(token, safe='')}",
        )

    async def resend_verification(self, email: str) -> Any:
        return await self._forward(
            "Resend verification",
            "POST",
            "/team/auth/resend-verification",
            json={"email": email},
        )

    async def forgot_password(self, email: str) -> Any:
        return await self._forward(
            "Forgot password request",
            "POST",
            "/team/auth/forgot-password",
            json={"email": email},
        )

    async def reset_password(
        self,
        token: str,
        new_password: str,
        confirm_password: str,
    ) -> Any:
        return await self._forward(
            "Password reset",
            "POST",
            f"/team/auth/reset-password/{quote(token, safe='')}",
            json={
                "new_password": new_password,
                "confirm_password": confirm_password,
            },
        )

    async def refresh_token(self) -> Any:
        """Ask the upstream for a new token and hold it."""
        result = await self._forward(
            "Token refresh",
            "POST",
            "/team/auth/refresh-token",
        )
        token = extract_token(result)
        if token:
            self.token_store.set(token)
        return result

    async def logout(self) -> Any:
        """Revoke the token upstream, then drop it locally."""
        result = await self._forward(
            "Logout",
            "DELETE",
            "/team/auth/revoke-token",
        )
        self.token_store.clear()
        return result
