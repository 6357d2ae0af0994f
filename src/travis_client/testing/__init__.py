"""Testing utilities for code built on the Travis client.

Example:
    ```python
    from travis_client import Client
    from travis_client.testing import RecordingTransport, create_mock_response


    async def test_lists_builds():
        transport = RecordingTransport(lambda request: create_mock_response({"builds": []}))
        client = await Client.public(transport=transport)
        assert await client.builds("owner/repo").list() == []
        assert transport.requests[0].url.path == "/repo/owner%2Frepo/builds"
    ```
"""

from collections.abc import Callable
from typing import Any

import httpx


def create_mock_response(json: Any = None, *, status_code: int = 200, headers: dict[str, str] | None = None) -> httpx.Response:
    """Successful JSON response."""
    return httpx.Response(status_code=status_code, json=json, headers=headers)


def create_error_response(
    status_code: int,
    error_type: str | None = None,
    error_message: str | None = None,
    *,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Error response in the Travis v3 error format, or with an empty body when no error is given."""
    if error_type is None and error_message is None:
        return httpx.Response(status_code=status_code, headers=headers)

    payload = {"@type": "error", "error_type": error_type, "error_message": error_message}
    return httpx.Response(status_code=status_code, json=payload, headers=headers)


class RecordingTransport(httpx.MockTransport):
    """``httpx.MockTransport`` that keeps every request it handled.

    ``handler`` may be a plain function or a coroutine function.
    """

    def __init__(self, handler: Callable[[httpx.Request], Any]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


__all__ = ["RecordingTransport", "create_error_response", "create_mock_response"]
