"""Typed accessors for Travis resources, all built on ``Client.execute``."""

from travis_client.resources.builds import BuildListOptions, Builds
from travis_client.resources.env import Env, EnvVarCreate, EnvVarPatch
from travis_client.resources.jobs import Jobs
from travis_client.resources.repos import RepoListOptions, Repos

__all__ = [
    "BuildListOptions",
    "Builds",
    "Env",
    "EnvVarCreate",
    "EnvVarPatch",
    "Jobs",
    "RepoListOptions",
    "Repos",
]
