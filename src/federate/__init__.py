"""LinkedIn OAuth1 profile federation."""

from federate.core.constants import AuthenticationMethod
from federate.core.errors import (
    AuthenticationError,
    ConfigurationError,
    FederationError,
    SpecifiedProfileError,
    UnspecifiedProfileError,
)
from federate.identity import LinkedInIdentity, OAuth1Info
from federate.providers import LinkedInProvider

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "AuthenticationMethod",
    "ConfigurationError",
    "FederationError",
    "LinkedInIdentity",
    "LinkedInProvider",
    "OAuth1Info",
    "SpecifiedProfileError",
    "UnspecifiedProfileError",
    "__version__",
]
