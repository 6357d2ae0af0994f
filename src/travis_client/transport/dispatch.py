"""Sending built requests and separating transport failures from HTTP errors."""

import logging

import httpx

from travis_client.errors.exceptions import TransportError

logger = logging.getLogger(__name__)


async def send(http: httpx.AsyncClient, request: httpx.Request) -> httpx.Response:
    """Send one request and return the fully read response.

    Args:
        http: Client owning the connection pool.
        request: Request produced by ``build_request``.

    Returns:
        The HTTP response, whatever its status code.

    Raises:
        TransportError: If no HTTP response was received (DNS, connect, TLS,
            timeout, protocol errors).
    """
    logger.debug(f"{request.method} {request.url}")
    try:
        response = await http.send(request)
    except httpx.TransportError as e:
        logger.debug(f"{request.method} {request.url} failed without a response: {e!r}")
        raise TransportError(f"{request.method} {request.url} failed: {e}") from e

    logger.debug(f"{request.method} {request.url} -> {response.status_code}")
    return response
