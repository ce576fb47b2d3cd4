"""
Receiving account service.

Creation, update and lifecycle of the accounts team members
receive payments into. Payment rail rules are enforced upstream.
"""

from typing import Any
from urllib.parse import quote

from team_bff.schemas.receiving_account import (
    ReceivingAccountCreateRequest,
    ReceivingAccountUpdateRequest,
)
from team_bff.services.base import BaseUpstreamService

BASE_PATH = "/team/receiving-accounts"


class ReceivingAccountService(BaseUpstreamService):
    """Service for receiving account operations."""

    async def create_receiving_account(
        self,
        account: ReceivingAccountCreateRequest,
        two_factor_code: str | None = None,
    ) -> Any:
        return await self._forward(
            "Create receiving account",
            "POST",
            BASE_PATH,
            json=account.model_dump(
                include={"member_id", "payment_rail", "destination_address"},
            ),
            two_factor_code=two_factor_code,
        )

    async def update_receiving_account(
        self,
        account: ReceivingAccountUpdateRequest,
        two_factor_code: str | None = None,
    ) -> Any:
        return await self._forward(
            "Update receiving account",
            "PUT",
            BASE_PATH,
            json=account.model_dump(
                include={"receiving_account_id", "payment_rail", "destination_address"},
            ),
            two_factor_code=two_factor_code,
        )

    async def get_all_receiving_accounts(self) -> Any:
        return await self._forward("Get all receiving accounts", "GET", BASE_PATH)

    async def get_receiving_account(self, receiving_account_id: str) -> Any:
        return await self._forward(
            "Get receiving account",
            "GET",
            f"{BASE_PATH}/{quote(receiving_account_id, safe='')}",
        )

    async def reactivate_receiving_account(
        self,
        receiving_account_id: str,
        two_factor_code: str | None = None,
    ) -> Any:
        return await self._forward(
            "Reactivate receiving account",
            "POST",
            f"{BASE_PATH}/reactivate/{quote(receiving_account_id, safe='')}",
            two_factor_code=two_factor_code,
        )

    async def extend_receiving_account(
        self,
        receiving_account_id: str,
        two_factor_code: str | None = None,
    ) -> Any:
        return await self._forward(
            "Extend receiving account",
            "POST",
            f"{BASE_PATH}/extend/{quote(receiving_account_id, safe='')}",
            two_factor_code=two_factor_code,
        )
