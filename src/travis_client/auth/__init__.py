"""Credentials, opt-in credential resolution, and GitHub token exchange.

Example:
    ```python
    from travis_client import Client
    from travis_client.auth import GithubToken

    client = await Client.pro(GithubToken("gh-access-token"))
    ```
"""

from travis_client.auth.credentials import (
    ApiToken,
    Credential,
    CredentialResolver,
    GithubToken,
    NoCredential,
    credential_from_env,
)
from travis_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from travis_client.auth.exchange import exchange_github_token

__all__ = [
    "ApiToken",
    "Credential",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "GithubToken",
    "NoCredential",
    "credential_from_env",
    "exchange_github_token",
]
