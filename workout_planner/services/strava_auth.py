"""Exchange Strava OAuth authorization codes for access tokens."""
from __future__ import annotations

import logging
from typing import Any

import requests

from workout_planner.config import Settings, get_settings
from workout_planner.models.schemas import TokenExchangeResult


logger = logging.getLogger(__name__)


class StravaTokenError(Exception):
    """Strava declined the authorization code (expired, invalid or reused)."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class StravaAuthService:
    """Single-shot relay to the Strava token endpoint using server-side credentials."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def exchange_code(self, code: str) -> TokenExchangeResult:
        """
        Trade an authorization code for tokens.

        Exactly one request is made; authorization codes are single-use so a
        failed exchange is never retried.

        Raises:
            StravaTokenError: Strava answered with a non-2xx status.
            requests.RequestException: the request itself failed.
            ValueError: the response body was not JSON.
        """
        settings = self._settings
        resp = requests.post(
            settings.strava_token_url,
            json={
                "client_id": settings.strava_client_id,
                "client_secret": settings.strava_client_secret,
                "code": code,
                "grant_type": "authorization_code",
            },
            timeout=settings.strava_timeout_seconds,
        )
        data = resp.json()

        if not resp.ok:
            message = data.get("message") if isinstance(data, dict) else None
            details = data.get("errors") if isinstance(data, dict) else None
            logger.warning("Strava rejected authorization code (HTTP %s): %s", resp.status_code, message)
            raise StravaTokenError(message or "Failed to exchange token", details)

        if not isinstance(data, dict):
            raise ValueError("Unexpected token response payload")

        athlete = data.get("athlete")
        logger.info(
            "Exchanged Strava authorization code for athlete %s",
            athlete.get("id") if isinstance(athlete, dict) else "unknown",
        )
        return TokenExchangeResult(
            access_token=data.get("access_token"),
            expires_in=data.get("expires_in"),
            refresh_token=data.get("refresh_token"),
            athlete=athlete,
        )
