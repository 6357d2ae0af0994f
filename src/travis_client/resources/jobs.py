"""Jobs of a build."""

from typing import TYPE_CHECKING, Any

from travis_client.models import Job
from travis_client.request import RequestSpec

if TYPE_CHECKING:
    from travis_client.client import Client


def _parse_jobs(data: dict[str, Any]) -> list[Job]:
    return [Job.from_api_response(job) for job in data["jobs"]]


class Jobs:
    def __init__(self, client: "Client", build_id: int):
        self._client = client
        self.build_id = build_id

    async def list(self) -> list[Job]:
        return await self._client.execute(RequestSpec("GET", f"/build/{self.build_id}/jobs"), _parse_jobs)
