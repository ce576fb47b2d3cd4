"""Shared fixtures: an in-process app wired to a recorded fake upstream.

Invariants:
    - No test reaches the network; the upstream is an httpx.MockTransport
    - Every upstream call is recorded in FakeUpstream.calls, in order
    - Each test gets its own app, token store and upstream client
"""

import json
from collections import defaultdict, deque

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from team_bff.config import Settings
from team_bff.infrastructure.token_store import TokenStore
from team_bff.infrastructure.upstream_client import UpstreamClient
from team_bff.main import create_application

UPSTREAM_BASE_URL = "https://upstream.test/v0"
UPSTREAM_PREFIX = "/v0"

AUTH = {"Authorization": "Bearer token-abc"}
AUTH_2FA = {**AUTH, "2FA": "123456"}


class FakeUpstream:
    """Scripted upstream API: queued responses per (method, path), all calls recorded."""

    def __init__(self):
        self.calls: list[httpx.Request] = []
        self._responses: dict[tuple[str, str], deque] = defaultdict(deque)

    def add(self, method: str, path: str, status: int = 200, json_body=None, *, error=None):
        """Queue a response; the last queued response for a route is reused."""
        self._responses[(method.upper(), path)].append((status, json_body, error))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        path = request.url.path.removeprefix(UPSTREAM_PREFIX)
        queue = self._responses.get((request.method, path))
        if not queue:
            return httpx.Response(200, json={"success": True, "data": {}})

        status, body, error = queue.popleft() if len(queue) > 1 else queue[0]
        if error is not None:
            raise error(f"upstream unreachable: {path}", request=request)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def paths(self) -> list[str]:
        return [call.url.path.removeprefix(UPSTREAM_PREFIX) for call in self.calls]

    @staticmethod
    def body(call: httpx.Request):
        return json.loads(call.content) if call.content else None


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        upstream_base_url=UPSTREAM_BASE_URL,
        access_token=None,
        log_format="text",
        debug=False,
    )


@pytest.fixture
def app(settings, upstream):
    return create_application(settings=settings, transport=httpx.MockTransport(upstream))


@pytest.fixture
def token_store(app) -> TokenStore:
    return app.state.token_store


@pytest.fixture
async def client(app):
    """FastAPI test client driven in-process over ASGI."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    await app.state.upstream_client.aclose()


@pytest.fixture
async def upstream_client(upstream):
    """Bare upstream client for client-level tests."""
    client = UpstreamClient(
        base_url=UPSTREAM_BASE_URL,
        token_store=TokenStore(),
        transport=httpx.MockTransport(upstream),
    )
    yield client
    await client.aclose()
