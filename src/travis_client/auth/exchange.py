"""Exchange of a GitHub token for a Travis API access token."""

import logging
from typing import Any

import httpx

from travis_client.endpoints import Endpoint
from travis_client.errors.handler import decode_response
from travis_client.request import RequestSpec, build_request
from travis_client.transport.dispatch import send

logger = logging.getLogger(__name__)

AUTH_GITHUB_PATH = "/auth/github"


def _parse_access_token(data: Any) -> str:
    token = data["access_token"]
    if not isinstance(token, str) or not token:
        raise ValueError("access_token must be a non-empty string")
    return token


async def exchange_github_token(http: httpx.AsyncClient, endpoint: Endpoint, github_token: str) -> str:
    """Trade a GitHub token for a Travis API token.

    Performs exactly one ``POST /auth/github`` round-trip. Nothing is retried;
    callers who want another attempt construct a new client.

    Args:
        http: Client used to send the request.
        endpoint: Travis deployment to authenticate against.
        github_token: GitHub personal access token.

    Returns:
        The Travis API access token.

    Raises:
        AuthError: If Travis rejects the GitHub token (401/403).
        DecodeError: If the response has no usable ``access_token``.
        TransportError: If the request never got a response.
        APIError: Any other non-2xx classification.
    """
    spec = RequestSpec("POST", AUTH_GITHUB_PATH, body={"github_token": github_token})
    request = build_request(spec, endpoint)

    logger.debug(f"Exchanging GitHub token (***) at {endpoint.base_url}")
    response = await send(http, request)
    token = decode_response(response, _parse_access_token)
    logger.debug(f"Obtained Travis API token (***) from {endpoint.base_url}")
    return token
