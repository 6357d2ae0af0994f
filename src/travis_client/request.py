"""Construction of outgoing Travis API requests.

Every request the client sends, including the GitHub token exchange, is built
here, so the API version header and the authorization header are applied in
exactly one place.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from travis_client import __version__
from travis_client.endpoints import Endpoint

API_VERSION = "3"
API_VERSION_HEADER = "Travis-API-Version"
JSON_MEDIA_TYPE = "application/json"
USER_AGENT = f"travis-client/{__version__}"

ALLOWED_METHODS: frozenset[str] = frozenset(["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"])

QueryParams = Sequence[tuple[str, str]] | Mapping[str, str]


@dataclass(frozen=True)
class RequestSpec:
    """Logical description of one API call.

    Attributes:
        method: HTTP method, normalized to upper case.
        path: Path relative to the endpoint base URL. Must not carry a scheme,
            host, query string or fragment.
        params: Query parameters as ordered ``(name, value)`` pairs. Names may
            repeat. A mapping is accepted and taken in iteration order.
        body: JSON-serializable request body, or None.

    Raises:
        ValueError: If the method is unknown or the path is not a relative path.
    """

    method: str
    path: str
    params: QueryParams = ()
    body: Any = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method!r}")

        if "://" in self.path or self.path.startswith("//"):
            raise ValueError(f"Request path must be relative to the endpoint, got {self.path!r}")
        if "?" in self.path or "#" in self.path:
            raise ValueError(f"Request path must not contain a query or fragment, got {self.path!r}")

        params = self.params.items() if isinstance(self.params, Mapping) else self.params
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "params", tuple((str(name), str(value)) for name, value in params))

    @classmethod
    def from_href(cls, href: str, method: str = "GET") -> "RequestSpec":
        """Build a spec from an ``@href`` the API returned, e.g. a pagination link."""
        url = httpx.URL(href)
        # raw_path keeps escaped slugs such as owner%2Frepo intact
        path = url.raw_path.decode("ascii").split("?", 1)[0]
        return cls(method=method, path=path, params=url.params.multi_items())


def quote_segment(raw: str) -> str:
    """Percent-encode a value for use as one path segment (``owner/repo`` -> ``owner%2Frepo``)."""
    return quote(raw, safe="")


def join_url(base_url: str, path: str) -> str:
    """Join a base URL and a relative path with exactly one slash between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def build_headers(token: str | None = None) -> dict[str, str]:
    """Headers carried by every Travis request."""
    headers = {
        API_VERSION_HEADER: API_VERSION,
        "Accept": JSON_MEDIA_TYPE,
        "Content-Type": JSON_MEDIA_TYPE,
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def build_request(spec: RequestSpec, endpoint: Endpoint, token: str | None = None) -> httpx.Request:
    """Turn a RequestSpec into a concrete ``httpx.Request``.

    Args:
        spec: What to call.
        endpoint: Where the API lives.
        token: Travis API token. When present, sent as ``Authorization: token <value>``.

    Returns:
        A request ready to hand to an ``httpx.AsyncClient``.
    """
    return httpx.Request(
        spec.method,
        join_url(endpoint.base_url, spec.path),
        params=list(spec.params) if spec.params else None,
        headers=build_headers(token),
        json=spec.body,
    )
