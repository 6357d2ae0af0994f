"""Async Python client for the Travis CI v3 API.

Travis hosts CI for open source projects (travis-ci.org) and for private
projects (travis-ci.com, "pro"). ``Client.public`` and ``Client.pro`` cover
the two; ``Client.custom`` points at a self-hosted deployment.

Typically one client is created per application and shared.

Example:
    ```python
    import asyncio

    from travis_client import Client, GithubToken, RateLimitedError


    async def main():
        async with await Client.public(GithubToken("gh-access-token")) as travis:
            try:
                for repo in await travis.repos().list("rust-lang"):
                    print(repo.slug)
            except RateLimitedError as e:
                print(f"slow down, retry after {e.retry_after_seconds}s")


    asyncio.run(main())
    ```
"""

__version__ = "0.1.0"

from travis_client.auth.credentials import ApiToken, Credential, GithubToken, NoCredential  # noqa: E402
from travis_client.client import Client  # noqa: E402
from travis_client.endpoints import Endpoint, Tier, resolve_endpoint  # noqa: E402
from travis_client.errors import (  # noqa: E402
    APIError,
    AuthError,
    ClientError,
    DecodeError,
    RateLimitedError,
    ServerError,
    TransportError,
)
from travis_client.request import RequestSpec, build_request  # noqa: E402

__all__ = [
    "APIError",
    "ApiToken",
    "AuthError",
    "Client",
    "ClientError",
    "Credential",
    "DecodeError",
    "Endpoint",
    "GithubToken",
    "NoCredential",
    "RateLimitedError",
    "RequestSpec",
    "ServerError",
    "Tier",
    "TransportError",
    "__version__",
    "build_request",
    "resolve_endpoint",
]
