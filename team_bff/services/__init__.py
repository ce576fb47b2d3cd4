"""
Service layer.

Each service forwards one area of the team API to the upstream
client and logs failures before re-raising them.
"""

from team_bff.services.auth_service import AuthService
from team_bff.services.account_service import AccountService
from team_bff.services.receiving_account_service import ReceivingAccountService
from team_bff.services.transaction_service import TransactionService

__all__ = [
    "AuthService",
    "AccountService",
    "ReceivingAccountService",
    "TransactionService",
]
