"""Tests for the Travis error payload model."""

import pytest
from httpx import Response

from travis_client.errors.models import TravisErrorPayload


@pytest.mark.unit
def test_parse_travis_error():
    response = Response(
        status_code=403,
        json={
            "@type": "error",
            "error_type": "insufficient_access",
            "error_message": "operation requires create_env_var access to repository",
            "resource_type": "repository",
            "permission": "create_env_var",
        },
    )

    payload = TravisErrorPayload.from_response(response)

    assert payload is not None
    assert payload.error_type == "insufficient_access"
    assert payload.error_message == "operation requires create_env_var access to repository"
    assert payload.resource_type == "repository"
    assert payload.extensions == {"permission": "create_env_var"}


@pytest.mark.unit
def test_parse_error_without_type_marker():
    response = Response(status_code=400, json={"error_message": "bad input"})

    payload = TravisErrorPayload.from_response(response)

    assert payload is not None
    assert payload.error_message == "bad input"
    assert payload.extensions is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "response",
    [
        Response(status_code=500, headers={"content-type": "text/plain"}, text="Internal Server Error"),
        Response(status_code=400, json={"message": "something else"}),
        Response(status_code=400, json=["error"]),
        Response(status_code=404),
    ],
)
def test_non_travis_bodies_return_none(response):
    assert TravisErrorPayload.from_response(response) is None


@pytest.mark.unit
def test_to_exception_message():
    payload = TravisErrorPayload(
        error_type="not_found",
        error_message="build not found",
        resource_type="build",
        extensions={"id": 42},
    )

    message = payload.to_exception_message()

    assert message.splitlines() == [
        "build not found",
        "Error Type: not_found",
        "Resource Type: build",
        "Extension fields:",
        "  - id: 42",
    ]


@pytest.mark.unit
def test_to_exception_message_falls_back_to_error_type():
    assert TravisErrorPayload(error_type="login_required").to_exception_message() == "login_required"


@pytest.mark.unit
def test_to_exception_message_empty():
    assert TravisErrorPayload().to_exception_message() == "Unknown API error"
