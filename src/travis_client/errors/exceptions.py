"""Structured exceptions for Travis API errors."""

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from travis_client.errors.models import TravisErrorPayload


class APIError(Exception):
    """Base exception for every failure surfaced by the client."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        payload: "TravisErrorPayload | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.payload = payload


class TransportError(APIError):
    """The request never produced an HTTP response (DNS, connect, TLS, timeout)."""

    pass


class DecodeError(APIError):
    """A response body did not match the expected shape."""

    def __init__(self, message: str, body: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.body = body


class AuthError(APIError):
    """The credential was rejected."""

    pass


class UnauthorizedError(AuthError):
    """401 Unauthorized."""

    pass


class ForbiddenError(AuthError):
    """403 Forbidden."""

    pass


class RateLimitedError(APIError):
    """429 Too Many Requests.

    ``retry_after`` is the raw ``Retry-After`` header value, or None when the
    server did not send one. The client never sleeps on it.
    """

    def __init__(self, message: str, retry_after: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after

    @property
    def retry_after_seconds(self) -> float | None:
        """Parse ``retry_after`` as delay-seconds or an HTTP-date.

        Returns:
            Seconds to wait, or None if the hint is missing, negative or unparseable.
        """
        if not self.retry_after:
            return None

        try:
            delay = int(self.retry_after)
            return float(delay) if delay >= 0 else None
        except ValueError:
            pass

        try:
            retry_date = parsedate_to_datetime(self.retry_after)
            delay = (retry_date - datetime.now(UTC)).total_seconds()
        except (ValueError, TypeError):
            return None
        return delay if delay >= 0 else None


class ClientError(APIError):
    """4xx client errors other than authentication and rate limiting."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity."""

    pass


class ServerError(APIError):
    """5xx server errors."""

    pass
