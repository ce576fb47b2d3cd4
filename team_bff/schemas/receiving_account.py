"""
Receiving account request schemas
"""

from pydantic import Field

from team_bff.schemas.base import TeamBaseRequest


class ReceivingAccountCreateRequest(TeamBaseRequest):
    """Request to create a receiving account for a team member."""

    member_id: str | int | None = Field(
        default=None,
        description="Team member the account belongs to",
    )
    payment_rail: str | None = Field(
        default=None,
        description="Payment rail identifier, validated upstream",
        json_schema_extra={"example": "ach"},
    )
    destination_address: str | None = Field(
        default=None,
        description="Destination address on the payment rail",
    )


class ReceivingAccountUpdateRequest(TeamBaseRequest):
    """Request to update an existing receiving account."""

    receiving_account_id: str | int | None = Field(default=None)
    payment_rail: str | None = Field(default=None)
    destination_address: str | None = Field(default=None)
