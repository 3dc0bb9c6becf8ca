"""Provider constants."""

from __future__ import annotations

from enum import Enum
from typing import Literal

ProviderID = Literal["linkedin"]
LINKEDIN: ProviderID = "linkedin"


class AuthenticationMethod(str, Enum):
    """How an identity proved itself to the provider."""

    OAUTH1 = "oauth1"
    OAUTH2 = "oauth2"
    CREDENTIALS = "credentials"
