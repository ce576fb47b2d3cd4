"""
Team account service.

Member management, two-factor setup, credits and password
changes, forwarded one-to-one to the upstream API.
"""

from typing import Any
from urllib.parse import quote

from team_bff.schemas.account import MemberRegisterRequest
from team_bff.services.base import BaseUpstreamService


class AccountService(BaseUpstreamService):
    """Service for team account operations."""

    async def register_member(
        self,
        member: MemberRegisterRequest,
        two_factor_code: str | None = None,
    ) -> Any:
        """
        Register a new team member.

        Args:
            member: New member's details
            two_factor_code: 2FA code for the acting user

        Returns:
            Upstream response body
        """
        return await self._forward(
            "Member registration",
            "POST",
            "/team/account/members/register",
            json=member.model_dump(
                include={"first_name", "last_name", "middle_name", "email"},
                exclude_none=True,
            ),
            two_factor_code=two_factor_code,
        )

    async def add_member(self, email: str, two_factor_code: str | None = None) -> Any:
        return await self._forward(
            "Add member",
            "POST",
            "/team/account/members/add",
            json={"email": email},
            two_factor_code=two_factor_code,
        )

    async def verify_member(self, token: str) -> Any:
        return await self._forward(
            "Member verification",
            "POST",
            f"/team/account/members/verify/{quote(token, safe='')}",
        )

    async def remove_member(self, member_id: str, two_factor_code: str | None = None) -> Any:
        return await self._forward(
            "Remove member",
            "DELETE",
            f"/team/account/members/{quote(member_id, safe='')}",
            two_factor_code=two_factor_code,
        )

    async def get_all_members(self) -> Any:
        return await self._forward("Get all members", "GET", "/team/account/members")

    async def setup_two_factor(self) -> Any:
        return await self._forward("2FA setup", "GET", "/team/account/2fa")

    async def reset_two_factor(self, two_factor_code: str) -> Any:
        return await self._forward(
            "Reset 2FA",
            "POST",
            "/team/account/2fa",
            two_factor_code=two_factor_code,
        )

    async def get_credits(self) -> Any:
        return await self._forward("Get credits", "GET", "/team/account/credits")

    async def buy_credits(self, amount: int | float) -> Any:
        return await self._forward(
            "Buy credits",
            "POST",
            "/team/account/credits",
            json={"amount": amount},
        )

    async def change_password(
        self,
        old_password: str,
        new_password: str,
        confirm_password: str,
        two_factor_code: str | None = None,
    ) -> Any:
        return await self._forward(
            "Change password",
            "POST",
            "/team/account/change-password",
            json={
                "old_password": old_password,
                "new_password": new_password,
                "confirm_password": confirm_password,
            },
            two_factor_code=two_factor_code,
        )
