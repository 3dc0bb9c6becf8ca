"""Identity providers and their collaborator protocols."""

from federate.providers.base import HTTPLayer, OAuth1Signer, Signer
from federate.providers.linkedin import API, LinkedInProvider
from federate.providers.profile import ProfileError, ProfileSuccess, classify

__all__ = [
    "API",
    "HTTPLayer",
    "LinkedInProvider",
    "OAuth1Signer",
    "ProfileError",
    "ProfileSuccess",
    "Signer",
    "classify",
]
