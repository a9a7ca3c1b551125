"""Strava OAuth token relay endpoint."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from workout_planner.config import get_settings
from workout_planner.services.strava_auth import StravaAuthService, StravaTokenError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/strava", tags=["strava"])

TOKEN_PATH = "/api/strava/token"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _json(status_code: int, payload: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=payload, headers=CORS_HEADERS)


@router.api_route("/token", methods=["GET", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"])
def exchange_token(request: Request) -> Response:
    """
    Exchange an authorization code for a Strava access token.

    Query parameters:
        code: authorization code returned by Strava's consent screen (required)
        clientId: accepted for compatibility; the configured client id is always used

    Returns:
        200 with ``access_token``, ``expires_in``, ``refresh_token`` and ``athlete``,
        or a JSON ``error`` payload with status 400/405/500.
    """
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    if request.method != "GET":
        return _json(405, {"error": "Method not allowed"})

    code = request.query_params.get("code")
    client_id = request.query_params.get("clientId")

    if not code:
        return _json(400, {"error": "Authorization code required"})

    settings = get_settings()
    if client_id and client_id != settings.strava_client_id:
        logger.debug("Ignoring clientId=%s; using configured Strava client", client_id)

    try:
        result = StravaAuthService(settings).exchange_code(code)
    except StravaTokenError as err:
        payload: dict[str, Any] = {"error": err.message}
        if err.details is not None:
            payload["details"] = err.details
        return _json(400, payload)
    except Exception:
        logger.exception("Token exchange error")
        return _json(500, {"error": "Internal server error"})

    return _json(200, result.model_dump())


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer methods the relay route never matched with its own 405 shape and CORS headers."""
    if exc.status_code == 405 and request.url.path == TOKEN_PATH:
        return _json(405, {"error": "Method not allowed"})
    return await http_exception_handler(request, exc)
