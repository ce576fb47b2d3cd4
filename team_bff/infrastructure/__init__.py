"""Infrastructure: the upstream HTTP client and its token state."""

from team_bff.infrastructure.token_store import TokenStore
from team_bff.infrastructure.upstream_client import UpstreamClient

__all__ = ["TokenStore", "UpstreamClient"]
