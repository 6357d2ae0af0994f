"""Entry point for all Travis operations."""

import logging
from collections.abc import AsyncIterator, Callable
from typing import Any, TypeVar, overload

import httpx

from travis_client.auth.credentials import ApiToken, Credential, GithubToken, NoCredential
from travis_client.auth.exchange import exchange_github_token
from travis_client.endpoints import Endpoint, Tier, resolve_endpoint
from travis_client.errors.handler import decode_response, raise_for_status
from travis_client.models import Build, page_parser
from travis_client.request import RequestSpec, build_request
from travis_client.resources import Builds, Env, Jobs, Repos
from travis_client.transport import create_transport, send

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _resolve_token(http: httpx.AsyncClient, endpoint: Endpoint, credential: Credential | None) -> str | None:
    if credential is None or isinstance(credential, NoCredential):
        return None
    if isinstance(credential, ApiToken):
        return credential.token
    if isinstance(credential, GithubToken):
        return await exchange_github_token(http, endpoint, credential.token)
    raise TypeError(f"Unsupported credential type: {type(credential).__name__}")


class Client:
    """Async client for one Travis deployment.

    Build instances with the async factories, which resolve the endpoint and,
    for a :class:`~travis_client.auth.GithubToken`, exchange it for a Travis
    API token before returning:

        ```python
        async with await Client.public(GithubToken("gh-token")) as travis:
            async for build in travis.builds("rust-lang/rust").iter():
                print(build.number, build.state)
        ```

    One client is meant to be shared. It holds no mutable state after
    construction, so concurrent calls are independent; connection pooling is
    left to httpx. Nothing is retried and nothing is cached: rate limits
    surface as :class:`~travis_client.errors.RateLimitedError` for the caller
    to act on. The token obtained at construction is used for the client's
    whole lifetime; build a new client to re-authenticate.

    Args:
        endpoint: Where the API lives.
        http: Client used to send requests.
        token: Travis API token, or None for anonymous access.
        owns_http: Close ``http`` in :meth:`aclose`.
    """

    def __init__(
        self,
        endpoint: Endpoint,
        http: httpx.AsyncClient,
        token: str | None = None,
        *,
        owns_http: bool = True,
    ) -> None:
        self._endpoint = endpoint
        self._http = http
        self._token = token
        self._owns_http = owns_http

    @classmethod
    async def public(
        cls,
        credential: Credential | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> "Client":
        """Create a client for open source builds on travis-ci.org."""
        return await cls._create(resolve_endpoint(Tier.PUBLIC, credential), credential, transport, http)

    @classmethod
    async def pro(
        cls,
        credential: Credential | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> "Client":
        """Create a client for private builds on travis-ci.com."""
        return await cls._create(resolve_endpoint(Tier.PRO, credential), credential, transport, http)

    @classmethod
    async def custom(
        cls,
        base_url: str,
        credential: Credential | None = None,
        *,
        tier: Tier = Tier.PUBLIC,
        transport: httpx.AsyncBaseTransport | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> "Client":
        """Create a client for a self-hosted Travis deployment."""
        return await cls._create(Endpoint(base_url=base_url, tier=tier), credential, transport, http)

    @classmethod
    async def _create(
        cls,
        endpoint: Endpoint,
        credential: Credential | None,
        transport: httpx.AsyncBaseTransport | None,
        http: httpx.AsyncClient | None,
    ) -> "Client":
        if http is not None and transport is not None:
            raise ValueError("Pass either transport or http, not both")

        owns_http = http is None
        if http is None:
            http = httpx.AsyncClient(transport=transport or create_transport())

        try:
            token = await _resolve_token(http, endpoint, credential)
        except BaseException:
            if owns_http:
                await http.aclose()
            raise

        logger.debug(f"Created Travis client for {endpoint.base_url} (authenticated: {token is not None})")
        return cls(endpoint, http, token, owns_http=owns_http)

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def __repr__(self) -> str:
        return f"Client(endpoint={self._endpoint.base_url!r}, authenticated={self.is_authenticated})"

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def _send(self, spec: RequestSpec) -> httpx.Response:
        request = build_request(spec, self._endpoint, self._token)
        return await send(self._http, request)

    @overload
    async def execute(self, spec: RequestSpec, model: None = None) -> Any: ...

    @overload
    async def execute(self, spec: RequestSpec, model: type[T] | Callable[[Any], T]) -> T: ...

    async def execute(self, spec: RequestSpec, model: type[T] | Callable[[Any], T] | None = None) -> Any:
        """Send one request and decode its response.

        Every typed operation of the client goes through here.

        Args:
            spec: What to call.
            model: Class with ``from_api_response`` or a callable taking the
                parsed JSON. None returns the parsed JSON as is.

        Returns:
            The decoded response.

        Raises:
            TransportError: No HTTP response was received.
            AuthError: 401/403.
            RateLimitedError: 429, with the server's Retry-After hint.
            ClientError: Other 4xx.
            ServerError: 5xx.
            DecodeError: 2xx whose body does not fit ``model``.
        """
        response = await self._send(spec)
        return decode_response(response, model)

    async def execute_text(self, spec: RequestSpec) -> str:
        """Like :meth:`execute`, returning the body as text instead of JSON."""
        response = await self._send(spec)
        raise_for_status(response)
        return response.text

    async def paginate(self, spec: RequestSpec, collection: str, item_model: Any) -> AsyncIterator[Any]:
        """Yield every item of a paginated collection, one page request at a time.

        Args:
            spec: Request for the first page.
            collection: Member holding the items, e.g. ``"builds"``.
            item_model: Model each item is decoded into.
        """
        parse = page_parser(collection, item_model)
        next_spec: RequestSpec | None = spec
        while next_spec is not None:
            page = await self.execute(next_spec, parse)
            for item in page.items:
                yield item
            next_spec = RequestSpec.from_href(page.next_href) if page.next_href else None

    def repos(self) -> Repos:
        """Repositories, listed per owner."""
        return Repos(self)

    def builds(self, slug: str) -> Builds:
        """Builds of the repository ``owner/name``."""
        return Builds(self, slug)

    def jobs(self, build_id: int) -> Jobs:
        """Jobs of a build."""
        return Jobs(self, build_id)

    def env(self, slug: str) -> Env:
        """Environment variables of the repository ``owner/name``."""
        return Env(self, slug)

    async def build(self, build_id: int) -> Build:
        """Fetch a single build by id."""
        return await self.execute(RequestSpec("GET", f"/build/{build_id}"), Build)

    async def raw_log(self, job_id: int) -> str:
        """Fetch the plain text log of a job."""
        return await self.execute_text(RequestSpec("GET", f"/job/{job_id}/log.txt"))
