"""
Base service with the common upstream forwarding call.

Each concrete service maps its operations one-to-one onto
upstream endpoints through this class.
"""

import logging
from typing import Any

from team_bff.core.exceptions import AppException
from team_bff.infrastructure.upstream_client import UpstreamClient

TWO_FACTOR_HEADER = "2FA"


class BaseUpstreamService:
    """
    Base service forwarding operations to the upstream API.

    Attributes:
        client: Shared upstream client
    """

    def __init__(self, client: UpstreamClient):
        """
        Initialize service.

        Args:
            client: Upstream client used for every call
        """
        self.client = client
        self.logger = logging.getLogger(type(self).__module__)

    @staticmethod
    def two_factor_headers(two_factor_code: str | None) -> dict[str, str]:
        """Build the 2FA header when a code is given."""
        if not two_factor_code:
            return {}
        return {TWO_FACTOR_HEADER: two_factor_code}

    async def _forward(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        two_factor_code: str | None = None,
    ) -> Any:
        """
        Forward one call upstream and return its JSON body.

        Args:
            operation: Human-readable name used when logging a failure
            method: HTTP method
            path: Upstream path, relative to the upstream base URL
            json: Optional request body
            params: Optional query parameters
            two_factor_code: Optional 2FA code sent as a header

        Returns:
            Decoded upstream response body

        Raises:
            AppException: Any upstream, network or authentication failure
        """
        try:
            return await self.client.request(
                method,
                path,
                json=json,
                params=params,
                headers=self.two_factor_headers(two_factor_code),
            )
        except AppException as e:
            self.logger.error(f"{operation} failed: {e.message}")
            raise
