"""
FastAPI dependencies for dependency injection
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from team_bff.core.exceptions import TwoFactorRequiredException, UnauthorizedException
from team_bff.infrastructure.token_store import TokenStore
from team_bff.infrastructure.upstream_client import UpstreamClient

AUTH_REQUIRED_MESSAGE = "Authentication required. Please provide a valid token."


def get_token_store(request: Request) -> TokenStore:
    """Get the application's token store."""
    return request.app.state.token_store


def get_upstream_client(request: Request) -> UpstreamClient:
    """Get the application's shared upstream client."""
    return request.app.state.upstream_client


TokenStoreDep = Annotated[TokenStore, Depends(get_token_store)]
UpstreamClientDep = Annotated[UpstreamClient, Depends(get_upstream_client)]


async def authenticate(
    token_store: TokenStoreDep,
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """
    Require a bearer token and hand it to the upstream client.

    The token replaces whatever the store currently holds.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthorizedException(detail=AUTH_REQUIRED_MESSAGE)

    token = authorization[len("Bearer "):].strip()
    if not token:
        raise UnauthorizedException(detail=AUTH_REQUIRED_MESSAGE)

    token_store.set(token)
    return token


async def require_two_factor(
    two_factor_code: Annotated[str | None, Header(alias="2FA")] = None,
) -> str:
    """Require the 2FA header for sensitive operations."""
    if not two_factor_code or not two_factor_code.strip():
        raise TwoFactorRequiredException()
    return two_factor_code.strip()


# Type aliases for common dependencies
TwoFactorCode = Annotated[str, Depends(require_two_factor)]
