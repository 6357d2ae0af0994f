"""Repositories of a GitHub user or organization."""

from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from travis_client.models import Repository, page_parser
from travis_client.request import RequestSpec, quote_segment

if TYPE_CHECKING:
    from travis_client.client import Client


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class RepoListOptions:
    include: list[str] = field(default_factory=list)
    limit: int = 25
    sort_by: str = "started_at"
    active: bool | None = None
    starred: bool | None = None
    private: bool | None = None

    def to_params(self) -> list[tuple[str, str]]:
        params = []
        if self.include:
            params.append(("include", ",".join(self.include)))
        params.append(("limit", str(self.limit)))
        params.append(("sort_by", self.sort_by))
        for name in ("active", "starred", "private"):
            value = getattr(self, name)
            if value is not None:
                params.append((name, _flag(value)))
        return params


class Repos:
    def __init__(self, client: "Client"):
        self._client = client

    def _list_spec(self, owner: str, options: RepoListOptions | None) -> RequestSpec:
        options = options or RepoListOptions()
        return RequestSpec("GET", f"/owner/{quote_segment(owner)}/repos", params=options.to_params())

    async def list(self, owner: str, options: RepoListOptions | None = None) -> list[Repository]:
        """First page of repositories of ``owner``.

        See https://developer.travis-ci.org/resource/repositories#for_owner
        """
        page = await self._client.execute(self._list_spec(owner, options), page_parser("repositories", Repository))
        return page.items

    def iter(self, owner: str, options: RepoListOptions | None = None) -> AsyncIterator[Repository]:
        """Every repository of ``owner``, following pagination links."""
        return self._client.paginate(self._list_spec(owner, options), "repositories", Repository)
