"""
Team API router configuration.

Aggregates all team endpoints into a single router
for mounting in the main application.
"""

from fastapi import APIRouter

from team_bff.api.responses import COMMON_RESPONSES
from team_bff.api.team.account_controller import router as account_router
from team_bff.api.team.auth_controller import router as auth_router
from team_bff.api.team.receiving_account_controller import router as receiving_account_router
from team_bff.api.team.transaction_controller import router as transaction_router

# Main team router
router = APIRouter(
    prefix="/team",
    responses=COMMON_RESPONSES,
)

# Include sub-routers
router.include_router(
    auth_router,
    prefix="/auth",
    tags=["Authentication"],
)

router.include_router(
    account_router,
    prefix="/account",
    tags=["Account"],
)

router.include_router(
    transaction_router,
    prefix="/transactions",
    tags=["Transactions"],
)

router.include_router(
    receiving_account_router,
    prefix="/receiving-accounts",
    tags=["Receiving Accounts"],
)
