"""Exceptions raised while resolving credentials from the environment or files.

These belong to the opt-in :class:`~travis_client.auth.CredentialResolver`
and never come out of network calls; rejected credentials surface as
:class:`~travis_client.errors.AuthError` instead.
"""


class CredentialError(Exception):
    """Base exception for credential resolution errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """A required credential was not set in any source.

    Attributes:
        env_var_name: The environment variable that was checked, if any.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """A credential file could not be read."""

    pass
