"""
Team account request schemas
"""

from pydantic import Field

from team_bff.schemas.base import TeamBaseRequest


class MemberRegisterRequest(TeamBaseRequest):
    """Request to register a new team member."""

    first_name: str | None = Field(
        default=None,
        max_length=100,
        json_schema_extra={"example": "Jane"},
    )
    last_name: str | None = Field(
        default=None,
        max_length=100,
        json_schema_extra={"example": "Smith"},
    )
    middle_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(
        default=None,
        json_schema_extra={"example": "jane.smith@acme.com"},
    )


class AddMemberRequest(TeamBaseRequest):
    """Request to add an existing user as a team member."""

    email: str | None = Field(
        default=None,
        json_schema_extra={"example": "jane.smith@acme.com"},
    )


class BuyCreditsRequest(TeamBaseRequest):
    """Credit purchase request."""

    amount: int | float | None = Field(
        default=None,
        description="Amount of credits to buy (must be positive)",
        json_schema_extra={"example": 100},
    )


class ChangePasswordRequest(TeamBaseRequest):
    """Password change request schema."""

    old_password: str | None = Field(default=None, description="Current password")
    new_password: str | None = Field(default=None, description="New password")
    confirm_password: str | None = Field(
        default=None,
        description="New password confirmation (must match new_password)",
    )
