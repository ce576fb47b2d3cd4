"""
Transaction listing filters
"""

from typing import Any

from pydantic import BaseModel, Field


class TransactionFilters(BaseModel):
    """Optional filters for the transaction list."""

    member_id: str | None = Field(default=None, description="Only this member's transactions")
    from_date: str | None = Field(default=None, description="Lower bound, as accepted upstream")
    to_date: str | None = Field(default=None, description="Upper bound, as accepted upstream")
    page: int | None = Field(default=None, ge=0)
    limit: int | None = Field(default=None, ge=1)

    def to_query_params(self) -> dict[str, Any]:
        """Upstream query parameters for the filters that are set."""
        params: dict[str, Any] = {}
        if self.member_id:
            params["member_id"] = self.member_id
        if self.from_date:
            params["from"] = self.from_date
        if self.to_date:
            params["to"] = self.to_date
        if self.page is not None:
            params["page"] = self.page
        if self.limit:
            params["limit"] = self.limit
        return params
