"""Identity types and builders."""

from federate.identity.builder import IdentityBuilder, build, passthrough
from federate.identity.models import ConsumerKey, IdentityID, LinkedInIdentity, OAuth1Info

__all__ = [
    "ConsumerKey",
    "IdentityBuilder",
    "IdentityID",
    "LinkedInIdentity",
    "OAuth1Info",
    "build",
    "passthrough",
]
