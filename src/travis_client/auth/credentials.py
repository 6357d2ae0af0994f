"""Credentials accepted by the Travis client.

A credential is one of three frozen values:

- ``NoCredential()``: anonymous access to public resources.
- ``GithubToken(token)``: a GitHub personal token, exchanged for a Travis
  API token when the client is constructed.
- ``ApiToken(token)``: a Travis API token used as is.

The library never reads the environment on its own. Callers who keep tokens
in environment variables, a ``.env`` file or a token file can opt into
:class:`CredentialResolver` or :func:`credential_from_env`:

    ```python
    from travis_client.auth import credential_from_env

    credential = credential_from_env(
        api_token_var="TRAVIS_API_TOKEN",
        github_token_var="GITHUB_TOKEN",
    )
    ```

Token values are never logged and never appear in ``repr``.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from travis_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)


def _require_token(token: str, kind: str) -> None:
    if not isinstance(token, str) or not token.strip():
        raise ValueError(f"{kind} requires a non-empty token")


@dataclass(frozen=True)
class NoCredential:
    """Unauthenticated access."""


@dataclass(frozen=True)
class GithubToken:
    """GitHub token to trade for a Travis API token.

    Pick GitHub scopes that match the repositories you need: public repos on
    travis-ci.org, private ones on travis-ci.com.
    """

    token: str = field(repr=False)

    def __post_init__(self) -> None:
        _require_token(self.token, "GithubToken")


@dataclass(frozen=True)
class ApiToken:
    """Travis API token, e.g. from ``travis token`` or the profile page."""

    token: str = field(repr=False)

    def __post_init__(self) -> None:
        _require_token(self.token, "ApiToken")


Credential = NoCredential | GithubToken | ApiToken


def _mask(value: str | None) -> str:
    return "None" if value is None else "***"


class CredentialResolver:
    """Resolve secret strings from an explicit value, the environment, a .env file or a default.

    Resolution order (first match wins):

    1. Explicit ``value``
    2. Environment variable (including anything loaded from ``.env``)
    3. ``default``

    Args:
        dotenv_path: Path to a .env file. None lets python-dotenv search
            parent directories.
        load_dotenv: Whether to load the .env file at all.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                # An unreadable .env is not fatal, values may still be in os.environ
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve a secret.

        Args:
            value: Explicit value, wins over every other source.
            env_var_name: Environment variable to consult.
            default: Fallback when nothing else is set.
            required: Raise instead of returning None.

        Returns:
            The resolved value, or None.

        Raises:
            CredentialNotFoundError: If ``required`` and no source had a value.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            logger.debug(f"Resolved credential from {source}: {_mask(result)}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from a file, stripped of surrounding whitespace.

        The path may come from ``file_path`` or from the environment variable
        ``env_var_name``; ``~`` and ``$VAR`` are expanded.

        Raises:
            CredentialFileError: If ``required`` and the file cannot be read.
        """
        path_to_use = None
        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name)

        if not path_to_use:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content


def credential_from_env(
    *,
    api_token_var: str | None = None,
    github_token_var: str | None = None,
    resolver: CredentialResolver | None = None,
) -> Credential:
    """Build a Credential from environment variables the caller names.

    A Travis API token wins over a GitHub token. When neither variable is set
    the result is ``NoCredential()``.
    """
    resolver = resolver or CredentialResolver(load_dotenv=False)

    api_token = resolver.resolve(env_var_name=api_token_var) if api_token_var else None
    if api_token:
        return ApiToken(api_token)

    github_token = resolver.resolve(env_var_name=github_token_var) if github_token_var else None
    if github_token:
        return GithubToken(github_token)

    return NoCredential()
