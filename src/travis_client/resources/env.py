"""Environment variables of a repository."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from travis_client.models import EnvVar
from travis_client.request import RequestSpec, quote_segment

if TYPE_CHECKING:
    from travis_client.client import Client


@dataclass
class EnvVarCreate:
    name: str
    value: str
    public: bool = False

    def to_body(self) -> dict[str, Any]:
        return {
            "env_var.name": self.name,
            "env_var.value": self.value,
            "env_var.public": self.public,
        }


@dataclass
class EnvVarPatch:
    """Partial update; fields left as None are not sent."""

    name: str | None = None
    value: str | None = None
    public: bool | None = None

    def to_body(self) -> dict[str, Any]:
        body = {
            "env_var.name": self.name,
            "env_var.value": self.value,
            "env_var.public": self.public,
        }
        return {key: value for key, value in body.items() if value is not None}


def _parse_env_vars(data: dict[str, Any]) -> list[EnvVar]:
    return [EnvVar.from_api_response(env_var) for env_var in data["env_vars"]]


class Env:
    """Environment variables of one repository, usually from ``client.env("owner/name")``."""

    def __init__(self, client: "Client", slug: str):
        self._client = client
        self.slug = slug

    def _path(self, suffix: str) -> str:
        return f"/repo/{quote_segment(self.slug)}/{suffix}"

    async def vars(self) -> list[EnvVar]:
        return await self._client.execute(RequestSpec("GET", self._path("env_vars")), _parse_env_vars)

    async def get(self, var_id: str) -> EnvVar:
        return await self._client.execute(RequestSpec("GET", self._path(f"env_var/{quote_segment(var_id)}")), EnvVar)

    async def set(self, options: EnvVarCreate) -> EnvVar:
        """Create a new variable."""
        spec = RequestSpec("POST", self._path("env_vars"), body=options.to_body())
        return await self._client.execute(spec, EnvVar)

    async def update(self, var_id: str, options: EnvVarPatch) -> EnvVar:
        spec = RequestSpec("PATCH", self._path(f"env_var/{quote_segment(var_id)}"), body=options.to_body())
        return await self._client.execute(spec, EnvVar)

    async def delete(self, var_id: str) -> None:
        # Whatever body comes back is ignored
        await self._client.execute_text(RequestSpec("DELETE", self._path(f"env_var/{quote_segment(var_id)}")))
