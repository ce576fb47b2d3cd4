"""Auth routes: validation, token lifecycle across login, refresh and logout.

Invariants:
    - Missing required fields return 400 without an upstream call
    - Login and refresh hold the issued token; logout drops it
    - After logout, public calls go upstream without credentials and
      authenticated calls are rejected locally
"""

import pytest

from tests.conftest import AUTH

LOGIN_OK = {"success": True, "data": {"token": "issued-1", "user": {"email": "jo@acme.com"}}}


async def test_login_returns_upstream_body_and_holds_token(client, upstream, token_store):
    upstream.add("POST", "/team/auth/login", 200, LOGIN_OK)

    res = await client.post(
        "/api/team/auth/login",
        json={"email": "jo@acme.com", "password": "s3cret"},
    )

    assert res.status_code == 200
    assert res.json() == LOGIN_OK
    assert upstream.body(upstream.calls[0]) == {"email": "jo@acme.com", "password": "s3cret"}
    assert token_store.access_token == "issued-1"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"email": "jo@acme.com"},
        {"password": "s3cret"},
        {"email": "", "password": "s3cret"},
        {"email": "jo@acme.com", "password": "   "},
    ],
)
async def test_login_missing_fields_is_400_without_upstream_call(client, upstream, payload):
    res = await client.post("/api/team/auth/login", json=payload)

    assert res.status_code == 400
    assert res.json() == {
        "success": False,
        "status": 400,
        "message": "Email and password are required",
    }
    assert upstream.calls == []


async def test_login_without_body_is_400(client, upstream):
    res = await client.post("/api/team/auth/login")

    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request data"
    assert upstream.calls == []


async def test_login_upstream_rejection_is_forwarded(client, upstream, token_store):
    upstream.add("POST", "/team/auth/login", 400, {"success": False, "message": "Invalid credentials"})

    res = await client.post(
        "/api/team/auth/login",
        json={"email": "jo@acme.com", "password": "wrong"},
    )

    assert res.status_code == 400
    assert res.json()["message"] == "Invalid credentials"
    assert token_store.access_token is None


async def test_register_returns_201(client, upstream):
    body = {"success": True, "data": {"id": "usr_1"}}
    upstream.add("POST", "/team/auth/register", 200, body)

    res = await client.post(
        "/api/team/auth/register",
        json={
            "first_name": "Jo",
            "last_name": "Doe",
            "email": "jo@acme.com",
            "password": "s3cret",
        },
    )

    assert res.status_code == 201
    assert res.json() == body
    assert upstream.body(upstream.calls[0]) == {
        "first_name": "Jo",
        "last_name": "Doe",
        "email": "jo@acme.com",
        "password": "s3cret",
    }


async def test_register_missing_last_name(client, upstream):
    res = await client.post(
        "/api/team/auth/register",
        json={"first_name": "Jo", "email": "jo@acme.com", "password": "s3cret"},
    )

    assert res.status_code == 400
    assert res.json()["message"] == "First name, last name, email, and password are required"
    assert upstream.calls == []


async def test_verify_email_forwards_token(client, upstream):
    res = await client.get("/api/team/auth/verify-email/abc123")

    assert res.status_code == 200
    assert upstream.paths() == ["/team/auth/verify-email/abc123"]
    assert upstream.calls[0].method == "GET"


@pytest.mark.parametrize("path", ["/api/team/auth/resend-verification", "/api/team/auth/forgot-password"])
async def test_email_only_endpoints_require_email(client, upstream, path):
    res = await client.post(path, json={})

    assert res.status_code == 400
    assert res.json()["message"] == "Email is required"
    assert upstream.calls == []


async def test_reset_password_mismatch(client, upstream):
    res = await client.post(
        "/api/team/auth/reset-password/tok",
        json={"new_password": "one", "confirm_password": "two"},
    )

    assert res.status_code == 400
    assert res.json()["message"] == "Passwords do not match"
    assert upstream.calls == []


async def test_reset_password_forwards(client, upstream):
    res = await client.post(
        "/api/team/auth/reset-password/tok",
        json={"new_password": "same", "confirm_password": "same"},
    )

    assert res.status_code == 200
    assert upstream.paths() == ["/team/auth/reset-password/tok"]
    assert upstream.body(upstream.calls[0]) == {"new_password": "same", "confirm_password": "same"}


async def test_refresh_token_requires_authentication(client, upstream):
    res = await client.post("/api/team/auth/refresh-token")

    assert res.status_code == 401
    assert res.json()["message"] == "Authentication required. Please provide a valid token."
    assert upstream.calls == []


async def test_refresh_token_holds_new_token(client, upstream, token_store):
    upstream.add("POST", "/team/auth/refresh-token", 200, {"success": True, "data": {"token": "renewed"}})

    res = await client.post("/api/team/auth/refresh-token", headers=AUTH)

    assert res.status_code == 200
    assert upstream.calls[0].headers["Authorization"] == "Bearer token-abc"
    assert token_store.access_token == "renewed"


async def test_logout_clears_token(client, upstream, token_store):
    upstream.add("POST", "/team/auth/login", 200, LOGIN_OK)
    upstream.add("DELETE", "/team/auth/revoke-token", 200, {"success": True, "message": "Logged out"})

    await client.post("/api/team/auth/login", json={"email": "jo@acme.com", "password": "s3cret"})
    res = await client.delete("/api/team/auth/revoke-token", headers=AUTH)

    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Logged out"}
    assert token_store.access_token is None

    # Public calls now go out without credentials
    await client.post("/api/team/auth/forgot-password", json={"email": "jo@acme.com"})
    assert "Authorization" not in upstream.calls[-1].headers

    # Authenticated calls without a token are rejected locally
    calls_before = len(upstream.calls)
    res = await client.get("/api/team/account/credits")
    assert res.status_code == 401
    assert len(upstream.calls) == calls_before


async def test_failed_logout_keeps_token(client, upstream, token_store):
    upstream.add("DELETE", "/team/auth/revoke-token", 500, {"message": "db down"})

    res = await client.delete("/api/team/auth/revoke-token", headers=AUTH)

    assert res.status_code == 500
    assert token_store.access_token == "token-abc"


async def test_rejected_refresh_is_not_refreshed_again(client, upstream):
    upstream.add("POST", "/team/auth/refresh-token", 401, {"message": "refresh token expired"})

    res = await client.post("/api/team/auth/refresh-token", headers=AUTH)

    assert res.status_code == 401
    assert res.json()["message"] == "refresh token expired"
    assert upstream.paths() == ["/team/auth/refresh-token"]


@pytest.mark.parametrize("email", ["Jo@ACME.COM", "admin@localhost", "not-an-email"])
async def test_login_forwards_email_unchanged(client, upstream, email):
    res = await client.post(
        "/api/team/auth/login",
        json={"email": email, "password": "s3cret"},
    )

    assert res.status_code == 200
    assert upstream.body(upstream.calls[0]) == {"email": email, "password": "s3cret"}


async def test_forgot_password_forwards_email_unchanged(client, upstream):
    await client.post("/api/team/auth/forgot-password", json={"email": "Ops@Team.Example"})

    assert upstream.body(upstream.calls[0]) == {"email": "Ops@Team.Example"}
