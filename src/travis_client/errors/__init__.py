"""Error taxonomy and response decoding for the Travis client."""

from travis_client.errors.exceptions import (
    APIError,
    AuthError,
    BadRequestError,
    ClientError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from travis_client.errors.handler import decode_response, raise_for_status
from travis_client.errors.models import TravisErrorPayload

__all__ = [
    "APIError",
    "AuthError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "DecodeError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitedError",
    "ServerError",
    "TransportError",
    "TravisErrorPayload",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "decode_response",
    "raise_for_status",
]
