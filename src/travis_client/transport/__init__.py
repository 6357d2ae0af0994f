"""Transport layer for the Travis client.

The client talks to the network through any ``httpx.AsyncBaseTransport``.
Pass your own (a proxy-aware transport, ``httpx.MockTransport`` in tests) or
let :func:`create_transport` build the default stack.

Modules:
    dispatch: Sending requests and mapping transport failures
    response_logging: Transport that logs unsuccessful responses

Example:
    ```python
    from travis_client.transport import create_transport

    transport = create_transport(verify="/etc/ssl/certs/ca-bundle.crt")
    ```
"""

from typing import Any

import httpx

from travis_client.transport.dispatch import send
from travis_client.transport.response_logging import ResponseLoggingTransport


def create_transport(**transport_options: Any) -> httpx.AsyncBaseTransport:
    """Build the default transport stack.

    Args:
        **transport_options: Passed to ``httpx.AsyncHTTPTransport`` (TLS
            verification, proxies, limits, ...). Timeouts are configured on
            the ``httpx.AsyncClient`` instead.

    Returns:
        ``ResponseLoggingTransport`` wrapping an ``httpx.AsyncHTTPTransport``.
    """
    return ResponseLoggingTransport(wrapped_transport=httpx.AsyncHTTPTransport(**transport_options))


__all__ = ["ResponseLoggingTransport", "create_transport", "send"]
