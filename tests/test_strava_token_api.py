"""Integration tests for the Strava token relay endpoint."""
from __future__ import annotations

from typing import Any

import pytest
import requests
from fastapi.testclient import TestClient


TOKEN_URL = "/api/strava/token"


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None, raise_on_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._raise_on_json = raise_on_json

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._raise_on_json:
            raise requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        return self._payload


@pytest.fixture
def upstream(monkeypatch: pytest.MonkeyPatch):
    """Capture outbound token requests and answer with a configurable response."""

    calls: list[dict[str, Any]] = []
    state: dict[str, Any] = {"response": FakeResponse(200, {})}

    def fake_post(url, json=None, timeout=None, **kwargs):
        calls.append({"url": url, "json": json, "timeout": timeout})
        result = state["response"]
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr("workout_planner.services.strava_auth.requests.post", fake_post)
    state["calls"] = calls
    return state


def _assert_cors(response) -> None:
    assert response.headers["access-control-allow-origin"] == "*"
    assert "GET" in response.headers["access-control-allow-methods"]
    assert response.headers["access-control-allow-headers"] == "Content-Type"


def test_successful_exchange_returns_token_fields(test_client: TestClient, upstream):
    upstream["response"] = FakeResponse(
        200,
        {
            "token_type": "Bearer",
            "access_token": "abc",
            "expires_at": 1790000000,
            "expires_in": 21600,
            "refresh_token": "xyz",
            "athlete": {"id": 1},
        },
    )

    response = test_client.get(TOKEN_URL, params={"code": "VALIDCODE"})

    assert response.status_code == 200
    assert response.json() == {
        "access_token": "abc",
        "expires_in": 21600,
        "refresh_token": "xyz",
        "athlete": {"id": 1},
    }
    _assert_cors(response)

    (call,) = upstream["calls"]
    assert call["url"] == "https://www.strava.com/oauth/token"
    assert call["json"] == {
        "client_id": "test-client-id",
        "client_secret": "test-client-secret",
        "code": "VALIDCODE",
        "grant_type": "authorization_code",
    }


def test_client_id_parameter_is_ignored(test_client: TestClient, upstream):
    upstream["response"] = FakeResponse(200, {"access_token": "abc"})

    response = test_client.get(TOKEN_URL, params={"code": "VALIDCODE", "clientId": "999"})

    assert response.status_code == 200
    assert upstream["calls"][0]["json"]["client_id"] == "test-client-id"


def test_missing_code_is_rejected(test_client: TestClient, upstream):
    response = test_client.get(TOKEN_URL)

    assert response.status_code == 400
    assert response.json() == {"error": "Authorization code required"}
    assert upstream["calls"] == []
    _assert_cors(response)


def test_upstream_rejection_passes_message_through(test_client: TestClient, upstream):
    upstream["response"] = FakeResponse(400, {"message": "Bad code"})

    response = test_client.get(TOKEN_URL, params={"code": "USED"})

    assert response.status_code == 400
    assert response.json() == {"error": "Bad code"}
    assert len(upstream["calls"]) == 1


def test_upstream_rejection_includes_details(test_client: TestClient, upstream):
    errors = [{"resource": "AuthorizationCode", "field": "code", "code": "invalid"}]
    upstream["response"] = FakeResponse(400, {"errors": errors})

    response = test_client.get(TOKEN_URL, params={"code": "EXPIRED"})

    assert response.status_code == 400
    assert response.json() == {"error": "Failed to exchange token", "details": errors}


def test_network_failure_returns_generic_error(test_client: TestClient, upstream):
    upstream["response"] = requests.ConnectionError("connection refused")

    response = test_client.get(TOKEN_URL, params={"code": "VALIDCODE"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    _assert_cors(response)


def test_malformed_upstream_body_returns_generic_error(test_client: TestClient, upstream):
    upstream["response"] = FakeResponse(502, raise_on_json=True)

    response = test_client.get(TOKEN_URL, params={"code": "VALIDCODE"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_options_preflight_returns_empty_ok(test_client: TestClient, upstream):
    response = test_client.options(TOKEN_URL)

    assert response.status_code == 200
    assert response.content == b""
    _assert_cors(response)

@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "TRACE", "PROPFIND"])
def test_other_methods_are_not_allowed(test_client: TestClient, upstream, method: str):
    response = test_client.request(method, TOKEN_URL, params={"code": "VALIDCODE"})

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}
    assert upstream["calls"] == []
    _assert_cors(response)


def test_head_is_not_allowed(test_client: TestClient, upstream):
    response = test_client.head(TOKEN_URL, params={"code": "VALIDCODE"})

    assert response.status_code == 405
    assert upstream["calls"] == []
    _assert_cors(response)


def test_method_errors_elsewhere_keep_default_shape(test_client: TestClient):
    response = test_client.delete("/api/planner/week")

    assert response.status_code == 405
    assert response.json() == {"detail": "Method Not Allowed"}
    assert "access-control-allow-origin" not in response.headers


@pytest.mark.parametrize("expires_in", ["21600", 21600.5, None])
def test_token_fields_are_relayed_verbatim(test_client: TestClient, upstream, expires_in):
    upstream["response"] = FakeResponse(
        200,
        {
            "access_token": 12345,
            "expires_in": expires_in,
            "refresh_token": ["r1"],
            "athlete": {"id": 1, "username": "runner"},
        },
    )

    response = test_client.get(TOKEN_URL, params={"code": "VALIDCODE"})

    assert response.status_code == 200
    assert response.json() == {
        "access_token": 12345,
        "expires_in": expires_in,
        "refresh_token": ["r1"],
        "athlete": {"id": 1, "username": "runner"},
    }
