"""Transport that logs unsuccessful responses.

```python
from travis_client.transport.response_logging import ResponseLoggingTransport
import httpx

transport = ResponseLoggingTransport(wrapped_transport=httpx.AsyncHTTPTransport())

async with httpx.AsyncClient(transport=transport) as client:
    response = await client.get("https://api.travis-ci.org/repo/travis-ci%2Ftravis-web")
```
"""

import logging

import httpx

logger = logging.getLogger(__name__)


class ResponseLoggingTransport(httpx.AsyncBaseTransport):
    """Log every non-2xx response at DEBUG with the start of its body.

    The response is passed through untouched. Status classification happens
    in :mod:`travis_client.errors.handler`.

    Args:
        wrapped_transport: The underlying transport to wrap
        max_body_chars: How much of an error body to include in the log line
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        max_body_chars: int = 200,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.max_body_chars = max_body_chars

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        response = await self._wrapped_transport.handle_async_request(request)

        if response.is_success or not logger.isEnabledFor(logging.DEBUG):
            return response

        # Reading buffers the body on the response, the client still sees all of it
        body = await response.aread()
        snippet = body[: self.max_body_chars].decode("utf-8", errors="replace")
        logger.debug(f"{request.method} {request.url} returned {response.status_code}: {snippet}")
        return response
