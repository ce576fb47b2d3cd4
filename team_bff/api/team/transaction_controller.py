"""
Transaction controller.

Read-only transaction listing; every endpoint requires authentication.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from team_bff.api.responses import upstream_response
from team_bff.core.dependencies import UpstreamClientDep, authenticate
from team_bff.infrastructure.upstream_client import UpstreamClient
from team_bff.schemas.transaction import TransactionFilters
from team_bff.services.transaction_service import TransactionService

router = APIRouter(dependencies=[Depends(authenticate)])


class TransactionController:
    """Controller for transaction listing."""

    def __init__(self, client: UpstreamClient):
        self.transaction_service = TransactionService(client)

    async def get_recent_transactions(self) -> Any:
        return await self.transaction_service.get_recent_transactions()

    async def get_all_transactions(self, filters: TransactionFilters) -> Any:
        return await self.transaction_service.get_all_transactions(filters)


@router.get(
    "/recent",
    summary="Recent Transactions",
)
async def get_recent_transactions(client: UpstreamClientDep) -> JSONResponse:
    controller = TransactionController(client)
    return upstream_response(await controller.get_recent_transactions())


@router.get("/", include_in_schema=False)
@router.get(
    "",
    summary="List Transactions",
    description="List team transactions, optionally filtered by member and date range, paginated.",
)
async def get_all_transactions(
    client: UpstreamClientDep,
    member_id: Annotated[
        str | None,
        Query(description="Only this member's transactions")
    ] = None,
    from_date: Annotated[
        str | None,
        Query(alias="from", description="Lower bound of the date range")
    ] = None,
    to_date: Annotated[
        str | None,
        Query(alias="to", description="Upper bound of the date range")
    ] = None,
    page: Annotated[
        int | None,
        Query(description="Page number", ge=0)
    ] = None,
    limit: Annotated[
        int | None,
        Query(description="Page size", ge=1)
    ] = None,
) -> JSONResponse:
    controller = TransactionController(client)
    filters = TransactionFilters(
        member_id=member_id,
        from_date=from_date,
        to_date=to_date,
        page=page,
        limit=limit,
    )
    return upstream_response(await controller.get_all_transactions(filters))
