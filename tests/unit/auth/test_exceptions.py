"""Tests for credential resolution exceptions."""

import pytest

from travis_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from travis_client.errors import APIError


class TestCredentialNotFoundError:
    """Test CredentialNotFoundError exception."""

    def test_is_credential_error(self):
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")

    def test_env_var_name_attribute(self):
        error = CredentialNotFoundError("Token not found", env_var_name="TRAVIS_API_TOKEN")

        assert str(error) == "Token not found"
        assert error.env_var_name == "TRAVIS_API_TOKEN"

    def test_env_var_name_optional(self):
        assert CredentialNotFoundError("Test error").env_var_name is None


class TestCredentialFileError:
    def test_is_credential_error(self):
        assert issubclass(CredentialFileError, CredentialError)


def test_credential_errors_are_not_api_errors():
    """Local resolution problems never look like a rejected credential."""
    assert not issubclass(CredentialError, APIError)
