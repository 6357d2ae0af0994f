"""Base URL resolution for the hosted Travis CI tiers."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from travis_client.auth.credentials import Credential

PUBLIC_HOST = "https://api.travis-ci.org"
PRO_HOST = "https://api.travis-ci.com"


class Tier(Enum):
    """Deployment variant of the Travis service."""

    PUBLIC = "public"
    PRO = "pro"


_HOSTS = {
    Tier.PUBLIC: PUBLIC_HOST,
    Tier.PRO: PRO_HOST,
}


@dataclass(frozen=True)
class Endpoint:
    """Base URL of a Travis API deployment and the tier it belongs to."""

    base_url: str
    tier: Tier


def resolve_endpoint(tier: Tier, credential: "Credential | None" = None) -> Endpoint:
    """Resolve the endpoint for a tier.

    The credential is accepted so call sites can pass what they have, but it
    never influences which host is selected.

    Args:
        tier: Public (travis-ci.org) or pro (travis-ci.com).
        credential: Ignored for URL selection.

    Returns:
        Endpoint for the tier's hosted API.
    """
    return Endpoint(base_url=_HOSTS[tier], tier=tier)
