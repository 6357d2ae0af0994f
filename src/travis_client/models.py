"""Typed representations of Travis v3 resources.

Each model builds itself from a decoded JSON document with
``from_api_response``. A missing required member raises ``KeyError`` and an
unknown state raises ``ValueError``; the response decoder turns both into
``DecodeError``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class State(Enum):
    """Lifecycle state of a build or job."""

    RECEIVED = "received"  # workload received, machine booting
    CREATED = "created"  # created but not yet started
    QUEUED = "queued"
    STARTED = "started"
    CANCELED = "canceled"
    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"  # travis itself errored

    def __str__(self) -> str:
        return self.value


def _state(value: str | None) -> State | None:
    return State(value) if value is not None else None


@dataclass
class Owner:
    """A GitHub user or organization."""

    id: int
    login: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Owner":
        return cls(id=data["id"], login=data.get("login"))


@dataclass
class Branch:
    """A git branch ref."""

    name: str

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Branch":
        return cls(name=data["name"])


@dataclass
class Commit:
    id: int
    sha: str | None = None
    ref: str | None = None
    message: str | None = None
    compare_url: str | None = None
    committed_at: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Commit":
        return cls(
            id=data["id"],
            sha=data.get("sha"),
            ref=data.get("ref"),
            message=data.get("message"),
            compare_url=data.get("compare_url"),
            committed_at=data.get("committed_at"),
        )


@dataclass
class Job:
    """A job of a build.

    Builds embed jobs in their minimal representation, so everything but the
    id is optional.
    """

    id: int
    number: str | None = None
    state: State | None = None
    started_at: str | None = None
    finished_at: str | None = None
    queue: str | None = None
    commit: Commit | None = None
    owner: Owner | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Job":
        commit = data.get("commit")
        owner = data.get("owner")
        return cls(
            id=data["id"],
            number=data.get("number"),
            state=_state(data.get("state")),
            started_at=data.get("started_at"),
            finished_at=data.get("finished_at"),
            queue=data.get("queue"),
            commit=Commit.from_api_response(commit) if commit else None,
            owner=Owner.from_api_response(owner) if owner else None,
        )


@dataclass
class Build:
    id: int
    number: str
    state: State
    event_type: str | None = None
    duration: int | None = None
    previous_state: State | None = None
    pull_request_title: str | None = None
    pull_request_number: int | None = None
    started_at: str | None = None
    finished_at: str | None = None
    branch: Branch | None = None
    commit: Commit | None = None
    created_by: Owner | None = None
    jobs: list[Job] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Build":
        branch = data.get("branch")
        commit = data.get("commit")
        created_by = data.get("created_by")
        return cls(
            id=data["id"],
            number=data["number"],
            state=State(data["state"]),
            event_type=data.get("event_type"),
            duration=data.get("duration"),
            previous_state=_state(data.get("previous_state")),
            pull_request_title=data.get("pull_request_title"),
            pull_request_number=data.get("pull_request_number"),
            started_at=data.get("started_at"),
            finished_at=data.get("finished_at"),
            branch=Branch.from_api_response(branch) if branch else None,
            commit=Commit.from_api_response(commit) if commit else None,
            created_by=Owner.from_api_response(created_by) if created_by else None,
            jobs=[Job.from_api_response(job) for job in data.get("jobs") or []],
        )


@dataclass
class RepoPermissions:
    """What the authenticated user may do with a repository."""

    read: bool = False
    admin: bool = False
    activate: bool = False
    deactivate: bool = False
    star: bool = False
    unstar: bool = False
    create_cron: bool = False
    create_env_var: bool = False
    create_key_pair: bool = False
    delete_key_pair: bool = False
    create_request: bool = False

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "RepoPermissions":
        known = cls.__dataclass_fields__.keys()
        return cls(**{key: bool(value) for key, value in data.items() if key in known})


@dataclass
class Repository:
    id: int
    name: str
    slug: str
    description: str | None = None
    github_language: str | None = None
    active: bool = False
    private: bool = False
    starred: bool = False
    owner: Owner | None = None
    default_branch: Branch | None = None
    permissions: RepoPermissions = field(default_factory=RepoPermissions)

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Repository":
        owner = data.get("owner")
        default_branch = data.get("default_branch")
        return cls(
            id=data["id"],
            name=data["name"],
            slug=data["slug"],
            description=data.get("description"),
            github_language=data.get("github_language"),
            active=bool(data.get("active", False)),
            private=bool(data.get("private", False)),
            starred=bool(data.get("starred", False)),
            owner=Owner.from_api_response(owner) if owner else None,
            default_branch=Branch.from_api_response(default_branch) if default_branch else None,
            permissions=RepoPermissions.from_api_response(data.get("@permissions") or {}),
        )


@dataclass
class EnvVarPermissions:
    read: bool = False
    write: bool = False

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "EnvVarPermissions":
        return cls(read=bool(data.get("read", False)), write=bool(data.get("write", False)))


@dataclass
class EnvVar:
    """A repository environment variable. Private values come back as None."""

    id: str
    name: str | None = None
    value: str | None = None
    public: bool | None = None
    permissions: EnvVarPermissions = field(default_factory=EnvVarPermissions)

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "EnvVar":
        return cls(
            id=data["id"],
            name=data.get("name"),
            value=data.get("value"),
            public=data.get("public"),
            permissions=EnvVarPermissions.from_api_response(data.get("@permissions") or {}),
        )


@dataclass
class Pagination:
    """The ``@pagination`` member of a collection response."""

    count: int
    limit: int | None = None
    offset: int | None = None
    next_href: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Pagination":
        next_page = data.get("next")
        return cls(
            count=data["count"],
            limit=data.get("limit"),
            offset=data.get("offset"),
            next_href=next_page["@href"] if next_page else None,
        )


@dataclass
class Page:
    """One page of a paginated collection."""

    items: list[Any]
    pagination: Pagination | None = None

    @property
    def next_href(self) -> str | None:
        return self.pagination.next_href if self.pagination else None


def page_parser(collection: str, item_model: Any):
    """Return a parser for a collection response such as ``{"builds": [...], "@pagination": {...}}``."""

    def parse(data: dict[str, Any]) -> Page:
        pagination = data.get("@pagination")
        return Page(
            items=[item_model.from_api_response(item) for item in data[collection]],
            pagination=Pagination.from_api_response(pagination) if pagination else None,
        )

    parse.__name__ = f"Page[{collection}]"
    return parse
