"""
Team account controller.

Every endpoint requires authentication. Member registration,
addition and removal, 2FA reset and password changes also
require the 2FA header.
"""

import math
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from team_bff.api.responses import upstream_response
from team_bff.core.dependencies import TwoFactorCode, UpstreamClientDep, authenticate
from team_bff.core.exceptions import BadRequestException
from team_bff.infrastructure.upstream_client import UpstreamClient
from team_bff.schemas.account import (
    AddMemberRequest,
    BuyCreditsRequest,
    ChangePasswordRequest,
    MemberRegisterRequest,
)
from team_bff.services.account_service import AccountService

router = APIRouter(dependencies=[Depends(authenticate)])


class AccountController:
    """
    Controller for team account operations.

    Validates required fields, then delegates to AccountService.
    """

    def __init__(self, client: UpstreamClient):
        self.account_service = AccountService(client)

    async def register_member(
        self,
        request: MemberRegisterRequest,
        two_factor_code: str,
    ) -> Any:
        if request.missing("first_name", "last_name", "email"):
            raise BadRequestException("First name, last name, and email are required")
        return await self.account_service.register_member(request, two_factor_code)

    async def add_member(self, request: AddMemberRequest, two_factor_code: str) -> Any:
        if request.missing("email"):
            raise BadRequestException("Email is required")
        return await self.account_service.add_member(request.email, two_factor_code)

    async def verify_member(self, token: str) -> Any:
        if not token.strip():
            raise BadRequestException("Token is required")
        return await self.account_service.verify_member(token)

    async def remove_member(self, member_id: str, two_factor_code: str) -> Any:
        if not member_id.strip():
            raise BadRequestException("Member ID is required")
        return await self.account_service.remove_member(member_id, two_factor_code)

    async def get_all_members(self) -> Any:
        return await self.account_service.get_all_members()

    async def setup_two_factor(self) -> Any:
        return await self.account_service.setup_two_factor()

    async def reset_two_factor(self, two_factor_code: str | None) -> Any:
        if not two_factor_code:
            raise BadRequestException("2FA code is required")
        return await self.account_service.reset_two_factor(two_factor_code)

    async def get_credits(self) -> Any:
        return await self.account_service.get_credits()

    async def buy_credits(self, request: BuyCreditsRequest) -> Any:
        """
        Buy credits for the team.

        Args:
            request: Purchase request with a positive amount

        Raises:
            BadRequestException: If the amount is missing, not finite or not positive
        """
        amount = request.amount
        if amount is None or not math.isfinite(amount) or amount <= 0:
            raise BadRequestException("Valid amount is required")
        return await self.account_service.buy_credits(amount)

    async def change_password(
        self,
        request: ChangePasswordRequest,
        two_factor_code: str,
    ) -> Any:
        if request.missing("old_password", "new_password", "confirm_password"):
            raise BadRequestException(
                "Old password, new password, and confirm password are required"
            )
        if request.new_password != request.confirm_password:
            raise BadRequestException("Passwords do not match")
        return await self.account_service.change_password(
            request.old_password,
            request.new_password,
            request.confirm_password,
            two_factor_code,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTE HANDLERS - MEMBERS
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "/members/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register Team Member",
    description="Create a new user and add them to the team. Requires the 2FA header.",
)
async def register_member(
    request: MemberRegisterRequest,
    two_factor_code: TwoFactorCode,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = AccountController(client)
    return upstream_response(
        await controller.register_member(request, two_factor_code),
        status_code=status.HTTP_201_CREATED,
    )


@router.post(
    "/members/add",
    summary="Add Existing User",
    description="Add an existing user to the team by email. Requires the 2FA header.",
)
async def add_member(
    request: AddMemberRequest,
    two_factor_code: TwoFactorCode,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = AccountController(client)
    return upstream_response(await controller.add_member(request, two_factor_code))


@router.post(
    "/members/verify/{token}",
    summary="Verify Team Member",
)
async def verify_member(token: str, client: UpstreamClientDep) -> JSONResponse:
    controller = AccountController(client)
    return upstream_response(await controller.verify_member(token))


@router.get(
    "/members",
    summary="List Team Members",
)
async def get_all_members(client: UpstreamClientDep) -> JSONResponse:
    controller = AccountController(client)
    return upstream_response(await controller.get_all_members())


@router.delete(
    "/members/{member_id}",
    summary="Remove Team Member",
    description="Requires the 2FA header.",
)
async def remove_member(
    member_id: str,
    two_factor_code: TwoFactorCode,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = AccountController(client)
    return upstream_response(await controller.remove_member(member_id, two_factor_code))


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTE HANDLERS - TWO-FACTOR AUTHENTICATION
# ═══════════════════════════════════════════════════════════════════════════════


@router.get(
    "/2fa",
    summary="Set Up 2FA",
)
async def setup_two_factor(client: UpstreamClientDep) -> JSONResponse:
    controller = AccountController(client)
    return upstream_response(await controller.setup_two_factor())


@router.post(
    "/2fa",
    summary="Reset 2FA",
    description="Requires the current 2FA code in the 2FA header.",
)
async def reset_two_factor(
    two_factor_code: TwoFactorCode,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = AccountController(client)
    return upstream_response(await controller.reset_two_factor(two_factor_code))


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTE HANDLERS - CREDITS & PASSWORD
# ═══════════════════════════════════════════════════════════════════════════════


@router.get(
    "/credits",
    summary="Get Credits",
)
async def get_credits(client: UpstreamClientDep) -> JSONResponse:
    controller = AccountController(client)
    return upstream_response(await controller.get_credits())


@router.post(
    "/credits",
    summary="Buy Credits",
)
async def buy_credits(request: BuyCreditsRequest, client: UpstreamClientDep) -> JSONResponse:
    controller = AccountController(client)
    return upstream_response(await controller.buy_credits(request))


@router.post(
    "/change-password",
    summary="Change Password",
    description="Requires the 2FA header.",
)
async def change_password(
    request: ChangePasswordRequest,
    two_factor_code: TwoFactorCode,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = AccountController(client)
    return upstream_response(await controller.change_password(request, two_factor_code))
