"""Builds of a repository."""

from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from travis_client.models import Build, State, page_parser
from travis_client.request import RequestSpec, quote_segment

if TYPE_CHECKING:
    from travis_client.client import Client


@dataclass
class BuildListOptions:
    """Filters and ordering for build listings.

    ``sort_by`` accepts ``id``, ``started_at`` or ``finished_at``; append
    ``:desc`` to reverse the order.
    """

    include: list[str] = field(default_factory=list)
    limit: int = 25
    sort_by: str = "started_at"
    created_by: str | None = None
    event_type: str | None = None
    previous_state: State | None = None
    state: State | None = None

    def to_params(self) -> list[tuple[str, str]]:
        params = []
        if self.include:
            params.append(("include", ",".join(self.include)))
        params.append(("limit", str(self.limit)))
        params.append(("sort_by", self.sort_by))
        for name in ("created_by", "event_type", "previous_state", "state"):
            value = getattr(self, name)
            if value is not None:
                params.append((name, str(value)))
        return params


class Builds:
    """Builds of one repository, usually obtained through ``client.builds("owner/name")``."""

    def __init__(self, client: "Client", slug: str):
        self._client = client
        self.slug = slug

    def _list_spec(self, options: BuildListOptions | None) -> RequestSpec:
        options = options or BuildListOptions()
        return RequestSpec("GET", f"/repo/{quote_segment(self.slug)}/builds", params=options.to_params())

    async def list(self, options: BuildListOptions | None = None) -> list[Build]:
        """First page of builds."""
        page = await self._client.execute(self._list_spec(options), page_parser("builds", Build))
        return page.items

    def iter(self, options: BuildListOptions | None = None) -> AsyncIterator[Build]:
        """Every build, following pagination links."""
        return self._client.paginate(self._list_spec(options), "builds", Build)
