"""Classification of Travis HTTP responses into values or typed errors."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from travis_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from travis_client.errors.models import TravisErrorPayload

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitedError,
}


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching APIError subclass for a non-2xx response.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code

    if status_code in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    # Only 4xx bodies carry a Travis error document
    payload = None
    if 400 <= status_code < 500:
        payload = TravisErrorPayload.from_response(response)

    if payload:
        message = f"HTTP {status_code}: {payload.to_exception_message()}"
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    logger.debug(f"Classified error response: {message}")

    if exc_class is RateLimitedError:
        raise RateLimitedError(
            message=message,
            retry_after=response.headers.get("retry-after"),
            status_code=status_code,
            response=response,
            payload=payload,
        )

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        payload=payload,
    )


def decode_response(response: httpx.Response, model: type[T] | Callable[[Any], T] | None = None) -> Any:
    """Decode a Travis response into ``model``.

    Non-2xx responses are raised through :func:`raise_for_status`. Successful
    responses are parsed as JSON and handed to ``model.from_api_response`` when
    the model defines it, otherwise to ``model`` itself.

    Args:
        response: HTTP response object
        model: Target type or parser. None returns the parsed JSON document.

    Returns:
        The decoded value, or None for an empty body when no model was asked for.

    Raises:
        DecodeError: If the body is empty, not JSON, or rejected by the model.
        APIError: Subclass matching the status code for non-2xx responses.
    """
    raise_for_status(response)

    if response.status_code == 204 or not response.content:
        if model is None:
            return None
        raise DecodeError(
            f"HTTP {response.status_code}: expected a JSON body, got an empty response",
            body="",
            status_code=response.status_code,
            response=response,
        )

    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(
            f"HTTP {response.status_code}: response body is not valid JSON: {e}",
            body=response.text,
            status_code=response.status_code,
            response=response,
        ) from e

    if model is None:
        return data

    parse = getattr(model, "from_api_response", model)
    try:
        return parse(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        name = getattr(model, "__name__", repr(model))
        raise DecodeError(
            f"HTTP {response.status_code}: response does not match {name}: {e!r}",
            body=response.text,
            status_code=response.status_code,
            response=response,
        ) from e
