"""Upstream client: bearer injection, refresh-once-on-401, and error mapping.

Invariants:
    - Authorization header present iff the store holds a token
    - A 401 triggers exactly one refresh and at most one replay
    - A failed refresh clears the token and raises a 401 authentication error
    - Upstream errors keep their status; network failures become 503
"""

import httpx
import pytest

from team_bff.core.exceptions import (
    AppException,
    ServiceUnavailableException,
    UnauthorizedException,
    UpstreamException,
)
from team_bff.infrastructure.token_store import TokenStore
from team_bff.infrastructure.upstream_client import (
    REFRESH_TOKEN_PATH,
    UpstreamClient,
    extract_token,
)

ENVELOPE = {"success": True, "data": {"id": "acc_1", "balance": 42}}


async def test_attaches_bearer_token_when_held(upstream, upstream_client):
    upstream_client.token_store.set("tok-1")

    await upstream_client.get("/team/account/credits")

    assert upstream.calls[0].headers["Authorization"] == "Bearer tok-1"


async def test_sends_no_authorization_without_token(upstream, upstream_client):
    await upstream_client.get("/team/account/credits")

    assert "Authorization" not in upstream.calls[0].headers


async def test_returns_upstream_body_unchanged(upstream, upstream_client):
    upstream.add("GET", "/team/account/credits", 200, ENVELOPE)

    result = await upstream_client.get("/team/account/credits")

    assert result == ENVELOPE


async def test_forwards_extra_headers_and_query_params(upstream, upstream_client):
    await upstream_client.request(
        "GET", "/team/transactions", params={"page": 2}, headers={"2FA": "654321"},
    )

    call = upstream.calls[0]
    assert call.headers["2FA"] == "654321"
    assert call.url.params["page"] == "2"


async def test_empty_body_returns_none(upstream, upstream_client):
    upstream.add("DELETE", "/team/auth/revoke-token", 204)

    assert await upstream_client.delete("/team/auth/revoke-token") is None


async def test_refreshes_once_and_retries_with_new_token(upstream, upstream_client):
    upstream_client.token_store.set("expired")
    upstream.add("GET", "/team/account/credits", 401, {"message": "Token expired"})
    upstream.add("GET", "/team/account/credits", 200, ENVELOPE)
    upstream.add("POST", REFRESH_TOKEN_PATH, 200, {"success": True, "data": {"token": "fresh"}})

    result = await upstream_client.get("/team/account/credits")

    assert result == ENVELOPE
    assert upstream.paths() == [
        "/team/account/credits",
        REFRESH_TOKEN_PATH,
        "/team/account/credits",
    ]
    assert upstream.calls[1].headers["Authorization"] == "Bearer expired"
    assert upstream.calls[2].headers["Authorization"] == "Bearer fresh"
    assert upstream_client.token_store.access_token == "fresh"


async def test_second_401_is_surfaced_without_another_refresh(upstream, upstream_client):
    upstream_client.token_store.set("expired")
    upstream.add("GET", "/team/account/credits", 401, {"message": "Token expired"})
    upstream.add("POST", REFRESH_TOKEN_PATH, 200, {"success": True, "data": {"token": "fresh"}})

    with pytest.raises(UpstreamException) as exc_info:
        await upstream_client.get("/team/account/credits")

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Token expired"
    assert upstream.paths().count(REFRESH_TOKEN_PATH) == 1
    assert upstream.paths().count("/team/account/credits") == 2


async def test_failed_refresh_clears_token_and_raises_auth_error(upstream, upstream_client):
    upstream_client.token_store.set("expired")
    upstream.add("GET", "/team/account/credits", 401, {"message": "Token expired"})
    upstream.add("POST", REFRESH_TOKEN_PATH, 401, {"message": "Refresh denied"})

    with pytest.raises(UnauthorizedException) as exc_info:
        await upstream_client.get("/team/account/credits")

    assert exc_info.value.message == "Authentication failed. Please log in again."
    assert upstream_client.token_store.access_token is None
    # The refresh call's own 401 does not trigger a nested refresh
    assert upstream.paths() == ["/team/account/credits", REFRESH_TOKEN_PATH]


async def test_refresh_network_failure_is_an_auth_error(upstream, upstream_client):
    upstream_client.token_store.set("expired")
    upstream.add("GET", "/team/account/credits", 401, {"message": "Token expired"})
    upstream.add("POST", REFRESH_TOKEN_PATH, error=httpx.ConnectError)

    with pytest.raises(UnauthorizedException):
        await upstream_client.get("/team/account/credits")

    assert upstream_client.token_store.access_token is None


async def test_refresh_without_token_surfaces_original_401(upstream, upstream_client):
    upstream_client.token_store.set("expired")
    upstream.add("GET", "/team/account/credits", 401, {"message": "Token expired"})
    upstream.add("POST", REFRESH_TOKEN_PATH, 200, {"success": True, "data": {}})

    with pytest.raises(UpstreamException) as exc_info:
        await upstream_client.get("/team/account/credits")

    assert exc_info.value.status_code == 401
    assert upstream.paths() == ["/team/account/credits", REFRESH_TOKEN_PATH]
    assert upstream_client.token_store.access_token == "expired"


async def test_upstream_error_keeps_status_and_message(upstream, upstream_client):
    upstream.add("POST", "/team/account/credits", 402, {"success": False, "message": "Insufficient funds"})

    with pytest.raises(UpstreamException) as exc_info:
        await upstream_client.post("/team/account/credits", {"amount": 5})

    assert exc_info.value.status_code == 402
    assert exc_info.value.message == "Insufficient funds"
    assert exc_info.value.body == {"success": False, "message": "Insufficient funds"}


async def test_upstream_error_without_message_uses_default(upstream, upstream_client):
    upstream.add("GET", "/team/account/members", 404, {"success": False})

    with pytest.raises(UpstreamException) as exc_info:
        await upstream_client.get("/team/account/members")

    assert exc_info.value.message == "An error occurred with the API request"


async def test_network_failure_maps_to_503(upstream, upstream_client):
    upstream.add("GET", "/team/account/members", error=httpx.ConnectTimeout)

    with pytest.raises(ServiceUnavailableException) as exc_info:
        await upstream_client.get("/team/account/members")

    assert exc_info.value.status_code == 503
    assert exc_info.value.message == "Network error. Please check your connection."


async def test_undecodable_success_body_is_internal_error():
    def handler(request):
        return httpx.Response(200, content=b"<html>oops</html>")

    client = UpstreamClient(
        base_url="https://upstream.test/v0",
        token_store=TokenStore(),
        transport=httpx.MockTransport(handler),
    )
    try:
        with pytest.raises(AppException) as exc_info:
            await client.get("/team/account/credits")
    finally:
        await client.aclose()

    assert exc_info.value.status_code == 500


@pytest.mark.parametrize(
    "body, expected",
    [
        ({"success": True, "data": {"token": "abc"}}, "abc"),
        ({"success": True, "data": {"token": ""}}, None),
        ({"success": True, "data": None}, None),
        ({"success": True}, None),
        (None, None),
    ],
)
def test_extract_token(body, expected):
    assert extract_token(body) == expected
