"""Tests for the GitHub token exchange."""

import json

import httpx
import pytest

from travis_client.auth.exchange import exchange_github_token
from travis_client.errors import (
    AuthError,
    DecodeError,
    ForbiddenError,
    RateLimitedError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from travis_client.testing import RecordingTransport, create_error_response, create_mock_response


@pytest.mark.unit
async def test_exchange_returns_access_token(endpoint):
    transport = RecordingTransport(lambda request: create_mock_response({"access_token": "abc123"}))

    async with httpx.AsyncClient(transport=transport) as http:
        token = await exchange_github_token(http, endpoint, "gh-token")

    assert token == "abc123"


@pytest.mark.unit
async def test_exchange_sends_one_post_with_github_token(endpoint):
    transport = RecordingTransport(lambda request: create_mock_response({"access_token": "abc123"}))

    async with httpx.AsyncClient(transport=transport) as http:
        await exchange_github_token(http, endpoint, "gh-token")

    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.travis.test/auth/github"
    assert json.loads(request.content) == {"github_token": "gh-token"}
    assert request.headers["Travis-API-Version"] == "3"
    assert "Authorization" not in request.headers


@pytest.mark.unit
async def test_exchange_401_is_auth_error(endpoint):
    transport = RecordingTransport(lambda request: create_error_response(401, "login_required", "bad token"))

    async with httpx.AsyncClient(transport=transport) as http:
        with pytest.raises(AuthError) as exc_info:
            await exchange_github_token(http, endpoint, "gh-token")

    assert isinstance(exc_info.value, UnauthorizedError)
    assert exc_info.value.status_code == 401
    assert len(transport.requests) == 1


@pytest.mark.unit
async def test_exchange_403_is_auth_error(endpoint):
    transport = RecordingTransport(lambda request: httpx.Response(403, text="access denied"))

    async with httpx.AsyncClient(transport=transport) as http:
        with pytest.raises(ForbiddenError):
            await exchange_github_token(http, endpoint, "gh-token")


@pytest.mark.unit
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"token": "abc"}),
        httpx.Response(200, json={"access_token": ""}),
        httpx.Response(200, json=["abc123"]),
        httpx.Response(200),
    ],
)
async def test_exchange_malformed_body_is_decode_error(endpoint, response):
    transport = RecordingTransport(lambda request: response)

    async with httpx.AsyncClient(transport=transport) as http:
        with pytest.raises(DecodeError):
            await exchange_github_token(http, endpoint, "gh-token")


@pytest.mark.unit
async def test_exchange_rate_limited_is_not_retried(endpoint):
    transport = RecordingTransport(lambda request: httpx.Response(429, headers={"Retry-After": "30"}))

    async with httpx.AsyncClient(transport=transport) as http:
        with pytest.raises(RateLimitedError) as exc_info:
            await exchange_github_token(http, endpoint, "gh-token")

    assert exc_info.value.retry_after == "30"
    assert len(transport.requests) == 1


@pytest.mark.unit
async def test_exchange_server_error(endpoint):
    transport = RecordingTransport(lambda request: httpx.Response(502, text="<html>bad gateway</html>"))

    async with httpx.AsyncClient(transport=transport) as http:
        with pytest.raises(ServerError):
            await exchange_github_token(http, endpoint, "gh-token")

    assert len(transport.requests) == 1


@pytest.mark.unit
async def test_exchange_transport_failure(endpoint):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(TransportError) as exc_info:
            await exchange_github_token(http, endpoint, "gh-token")

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.unit
async def test_exchange_never_logs_tokens(endpoint, caplog):
    import logging

    caplog.set_level(logging.DEBUG)
    transport = RecordingTransport(lambda request: create_mock_response({"access_token": "travis-secret"}))

    async with httpx.AsyncClient(transport=transport) as http:
        await exchange_github_token(http, endpoint, "gh-secret")

    assert "gh-secret" not in caplog.text
    assert "travis-secret" not in caplog.text
