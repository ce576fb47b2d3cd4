"""Upstream Client: wraps httpx.AsyncClient with bearer auth, refresh-on-401 and error mapping.

Invariants:
    - Every request carries "Authorization: Bearer <token>" when the store holds a token
    - A 401 triggers at most one refresh and at most one replay of the original request
    - The refresh call itself is never auto-refreshed
    - A failed refresh clears the token store and raises UnauthorizedException
    - All failures are mapped to AppException subclasses (core/exceptions.py)

Design Decisions:
    - Wrapper over raw client: services never see httpx types
    - Single shared AsyncClient per app: connection pooling, closed on shutdown
"""

import logging
from typing import Any

import httpx

from team_bff.core.exceptions import (
    AppException,
    ServiceUnavailableException,
    UnauthorizedException,
    UpstreamException,
)
from team_bff.infrastructure.token_store import TokenStore

logger = logging.getLogger(__name__)

REFRESH_TOKEN_PATH = "/team/auth/refresh-token"

_DEFAULT_ERROR_MESSAGE = "An error occurred with the API request"


def extract_token(body: Any) -> str | None:
    """Pull data.token out of an upstream response envelope."""
    if not isinstance(body, dict):
        return None
    data = body.get("data")
    if not isinstance(data, dict):
        return None
    token = data.get("token")
    return token or None


def _error_message(response: httpx.Response) -> tuple[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return _DEFAULT_ERROR_MESSAGE, response.text or None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"]), body
    return _DEFAULT_ERROR_MESSAGE, body


class UpstreamClient:
    """Forwards requests to the upstream API on behalf of the current token holder."""

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token_store = token_store
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        allow_refresh: bool = True,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        On a 401 the token is refreshed once and the request replayed once.
        """
        response = await self._send(method, path, json, params, headers)

        if (
            response.status_code == httpx.codes.UNAUTHORIZED
            and allow_refresh
            and path != REFRESH_TOKEN_PATH
        ):
            new_token = await self._refresh_access_token()
            if new_token:
                logger.info(
                    "Access token refreshed, retrying request",
                    extra={"method": method.upper(), "upstream_url": path},
                )
                response = await self._send(method, path, json, params, headers)

        return self._handle_response(method, path, response)

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("POST", path, json=json, headers=headers)

    async def put(
        self,
        path: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("PUT", path, json=json, headers=headers)

    async def delete(
        self,
        path: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("DELETE", path, json=json, headers=headers)

    async def _send(
        self,
        method: str,
        path: str,
        json: Any,
        params: dict[str, Any] | None,
        headers: dict[str, str] | None,
    ) -> httpx.Response:
        # Token is read per attempt so a replay picks up a refreshed token
        request_headers = {**self.token_store.authorization_header(), **(headers or {})}
        try:
            return await self.client.request(
                method,
                path,
                json=json,
                params=params,
                headers=request_headers,
            )
        except httpx.RequestError as e:
            logger.error(
                f"Network error: {e}",
                extra={"method": method.upper(), "upstream_url": path},
            )
            raise ServiceUnavailableException() from e

    async def _refresh_access_token(self) -> str | None:
        try:
            body = await self.request("POST", REFRESH_TOKEN_PATH, allow_refresh=False)
        except AppException as e:
            logger.error(f"Token refresh failed: {e.message}")
            self.token_store.clear()
            raise UnauthorizedException(
                detail="Authentication failed. Please log in again.",
            ) from e

        token = extract_token(body)
        if token:
            self.token_store.set(token)
        return token

    def _handle_response(self, method: str, path: str, response: httpx.Response) -> Any:
        if response.is_error:
            message, body = _error_message(response)
            logger.error(
                f"API Error: {response.status_code} - {message}",
                extra={
                    "method": method.upper(),
                    "upstream_url": path,
                    "status_code": response.status_code,
                    "response": body,
                },
            )
            raise UpstreamException(response.status_code, message, body=body)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"API Client Error: undecodable response body: {e}",
                extra={"method": method.upper(), "upstream_url": path},
            )
            raise AppException(detail="An unexpected error occurred") from e
