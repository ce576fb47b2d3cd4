"""
Receiving account controller.

Every endpoint requires authentication. Creating, updating,
reactivating and extending an account also require the 2FA header.
"""

from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from team_bff.api.responses import upstream_response
from team_bff.core.dependencies import TwoFactorCode, UpstreamClientDep, authenticate
from team_bff.core.exceptions import BadRequestException
from team_bff.infrastructure.upstream_client import UpstreamClient
from team_bff.schemas.receiving_account import (
    ReceivingAccountCreateRequest,
    ReceivingAccountUpdateRequest,
)
from team_bff.services.receiving_account_service import ReceivingAccountService

router = APIRouter(dependencies=[Depends(authenticate)])


class ReceivingAccountController:
    """Controller for receiving account operations."""

    def __init__(self, client: UpstreamClient):
        self.receiving_account_service = ReceivingAccountService(client)

    async def create_receiving_account(
        self,
        request: ReceivingAccountCreateRequest,
        two_factor_code: str,
    ) -> Any:
        if request.missing("member_id", "payment_rail", "destination_address"):
            raise BadRequestException(
                "Member ID, payment rail, and destination address are required"
            )
        return await self.receiving_account_service.create_receiving_account(
            request, two_factor_code,
        )

    async def update_receiving_account(
        self,
        request: ReceivingAccountUpdateRequest,
        two_factor_code: str,
    ) -> Any:
        if request.missing("receiving_account_id", "payment_rail", "destination_address"):
            raise BadRequestException(
                "Receiving account ID, payment rail, and destination address are required"
            )
        return await self.receiving_account_service.update_receiving_account(
            request, two_factor_code,
        )

    async def get_all_receiving_accounts(self) -> Any:
        return await self.receiving_account_service.get_all_receiving_accounts()

    async def get_receiving_account(self, receiving_account_id: str) -> Any:
        self._require_id(receiving_account_id)
        return await self.receiving_account_service.get_receiving_account(
            receiving_account_id,
        )

    async def reactivate_receiving_account(
        self,
        receiving_account_id: str,
        two_factor_code: str,
    ) -> Any:
        self._require_id(receiving_account_id)
        return await self.receiving_account_service.reactivate_receiving_account(
            receiving_account_id, two_factor_code,
        )

    async def extend_receiving_account(
        self,
        receiving_account_id: str,
        two_factor_code: str,
    ) -> Any:
        self._require_id(receiving_account_id)
        return await self.receiving_account_service.extend_receiving_account(
            receiving_account_id, two_factor_code,
        )

    @staticmethod
    def _require_id(receiving_account_id: str) -> None:
        if not receiving_account_id.strip():
            raise BadRequestException("Receiving account ID is required")


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTE HANDLERS - 2FA PROTECTED
# ═══════════════════════════════════════════════════════════════════════════════


@router.post("/", include_in_schema=False)
@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create Receiving Account",
)
async def create_receiving_account(
    request: ReceivingAccountCreateRequest,
    two_factor_code: TwoFactorCode,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = ReceivingAccountController(client)
    return upstream_response(
        await controller.create_receiving_account(request, two_factor_code),
        status_code=status.HTTP_201_CREATED,
    )


@router.put("/", include_in_schema=False)
@router.put(
    "",
    summary="Update Receiving Account",
)
async def update_receiving_account(
    request: ReceivingAccountUpdateRequest,
    two_factor_code: TwoFactorCode,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = ReceivingAccountController(client)
    return upstream_response(
        await controller.update_receiving_account(request, two_factor_code),
    )


@router.post(
    "/reactivate/{receiving_account_id}",
    summary="Reactivate Receiving Account",
)
async def reactivate_receiving_account(
    receiving_account_id: str,
    two_factor_code: TwoFactorCode,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = ReceivingAccountController(client)
    return upstream_response(
        await controller.reactivate_receiving_account(receiving_account_id, two_factor_code),
    )


@router.post(
    "/extend/{receiving_account_id}",
    summary="Extend Receiving Account",
)
async def extend_receiving_account(
    receiving_account_id: str,
    two_factor_code: TwoFactorCode,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = ReceivingAccountController(client)
    return upstream_response(
        await controller.extend_receiving_account(receiving_account_id, two_factor_code),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTE HANDLERS - READ
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/", include_in_schema=False)
@router.get(
    "",
    summary="List Receiving Accounts",
)
async def get_all_receiving_accounts(client: UpstreamClientDep) -> JSONResponse:
    controller = ReceivingAccountController(client)
    return upstream_response(await controller.get_all_receiving_accounts())


@router.get(
    "/{receiving_account_id}",
    summary="Get Receiving Account",
)
async def get_receiving_account(
    receiving_account_id: str,
    client: UpstreamClientDep,
) -> JSONResponse:
    controller = ReceivingAccountController(client)
    return upstream_response(await controller.get_receiving_account(receiving_account_id))
