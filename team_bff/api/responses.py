"""
Response helpers shared by the team controllers.
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from team_bff.schemas.base import ErrorResponse, UpstreamEnvelope

# OpenAPI documentation for what every forwarded endpoint can return
COMMON_RESPONSES: dict[int | str, dict[str, Any]] = {
    200: {"model": UpstreamEnvelope, "description": "Upstream response body, unchanged"},
    400: {"model": ErrorResponse, "description": "Missing or invalid input"},
    401: {"model": ErrorResponse, "description": "Authentication or 2FA code required"},
    500: {"model": ErrorResponse, "description": "Internal Server Error"},
    503: {"model": ErrorResponse, "description": "Upstream API unreachable"},
}


def upstream_response(result: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Return the upstream body unchanged with the controller's status code."""
    return JSONResponse(status_code=status_code, content=result)
