from typing import Any

from team_bff.schemas.transaction import TransactionFilters
from team_bff.services.base import BaseUpstreamService


class TransactionService(BaseUpstreamService):
    """Read-only access to team transactions."""

    async def get_recent_transactions(self) -> Any:
        return await self._forward(
            "Get recent transactions",
            "GET",
            "/team/transactions/recent",
        )

    async def get_all_transactions(self, filters: TransactionFilters | None = None) -> Any:
        """List transactions, sending only the filters that are set."""
        params = filters.to_query_params() if filters else {}
        return await self._forward(
            "Get all transactions",
            "GET",
            "/team/transactions",
            params=params or None,
        )
