"""
Authentication request schemas
"""

from pydantic import Field

from team_bff.schemas.base import TeamBaseRequest


class LoginRequest(TeamBaseRequest):
    """Login request schema."""

    email: str | None = Field(
        default=None,
        description="Account email address",
        json_schema_extra={"example": "john.doe@acme.com"},
    )
    password: str | None = Field(default=None, description="Account password")


class RegisterRequest(TeamBaseRequest):
    """Team account registration request schema."""

    first_name: str | None = Field(
        default=None,
        max_length=100,
        json_schema_extra={"example": "John"},
    )
    last_name: str | None = Field(
        default=None,
        max_length=100,
        json_schema_extra={"example": "Doe"},
    )
    middle_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(
        default=None,
        json_schema_extra={"example": "john.doe@acme.com"},
    )
    password: str | None = Field(default=None, description="Account password")


class EmailRequest(TeamBaseRequest):
    """Request carrying only an email address."""

    email: str | None = Field(
        default=None,
        json_schema_extra={"example": "john.doe@acme.com"},
    )


class ResetPasswordRequest(TeamBaseRequest):
    """Password reset confirmation schema."""

    new_password: str | None = Field(default=None, description="New password")
    confirm_password: str | None = Field(
        default=None,
        description="New password confirmation (must match new_password)",
    )
