"""
Pydantic schemas for request validation
"""

from team_bff.schemas.base import TeamBaseRequest, UpstreamEnvelope, ErrorResponse
from team_bff.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    EmailRequest,
    ResetPasswordRequest,
)
from team_bff.schemas.account import (
    MemberRegisterRequest,
    AddMemberRequest,
    BuyCreditsRequest,
    ChangePasswordRequest,
)
from team_bff.schemas.receiving_account import (
    ReceivingAccountCreateRequest,
    ReceivingAccountUpdateRequest,
)
from team_bff.schemas.transaction import TransactionFilters

__all__ = [
    "TeamBaseRequest",
    "UpstreamEnvelope",
    "ErrorResponse",
    "LoginRequest",
    "RegisterRequest",
    "EmailRequest",
    "ResetPasswordRequest",
    "MemberRegisterRequest",
    "AddMemberRequest",
    "BuyCreditsRequest",
    "ChangePasswordRequest",
    "ReceivingAccountCreateRequest",
    "ReceivingAccountUpdateRequest",
    "TransactionFilters",
]
