"""Tests for endpoint resolution."""

import pytest

from travis_client.auth import ApiToken, GithubToken, NoCredential
from travis_client.endpoints import PRO_HOST, PUBLIC_HOST, Endpoint, Tier, resolve_endpoint


@pytest.mark.unit
def test_public_tier():
    assert resolve_endpoint(Tier.PUBLIC) == Endpoint(base_url="https://api.travis-ci.org", tier=Tier.PUBLIC)


@pytest.mark.unit
def test_pro_tier():
    assert resolve_endpoint(Tier.PRO) == Endpoint(base_url="https://api.travis-ci.com", tier=Tier.PRO)


@pytest.mark.unit
@pytest.mark.parametrize("tier", list(Tier))
def test_credential_does_not_affect_endpoint(tier):
    credentials = [None, NoCredential(), ApiToken("a"), ApiToken("b"), GithubToken("gh")]

    endpoints = {resolve_endpoint(tier, credential) for credential in credentials}

    assert len(endpoints) == 1


@pytest.mark.unit
def test_tiers_use_different_hosts():
    assert PUBLIC_HOST != PRO_HOST


@pytest.mark.unit
def test_endpoint_is_immutable():
    endpoint = resolve_endpoint(Tier.PUBLIC)

    with pytest.raises(AttributeError):
        endpoint.base_url = "https://elsewhere.example"
