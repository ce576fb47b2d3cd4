"""
Team API module.

Forwards team authentication, account, receiving account and
transaction endpoints to the upstream API.
"""

from team_bff.api.team.router import router
from team_bff.api.team.account_controller import AccountController
from team_bff.api.team.auth_controller import AuthController
from team_bff.api.team.receiving_account_controller import ReceivingAccountController
from team_bff.api.team.transaction_controller import TransactionController

__all__ = [
    "router",
    "AccountController",
    "AuthController",
    "ReceivingAccountController",
    "TransactionController",
]
