"""Credential and identity records."""

from __future__ import annotations

from dataclasses import dataclass

from federate.core.constants import AuthenticationMethod


@dataclass(frozen=True)
class OAuth1Info:
    """OAuth1 access token pair issued by the handshake."""

    token: str
    secret: str

    def __repr__(self) -> str:
        return f"OAuth1Info(token={self.token!r}, secret='***')"


@dataclass(frozen=True)
class ConsumerKey:
    """Application (consumer) key pair registered with the provider."""

    key: str
    secret: str

    def __repr__(self) -> str:
        return f"ConsumerKey(key={self.key!r}, secret='***')"


@dataclass(frozen=True)
class IdentityID:
    """Provider-qualified user key."""

    user_id: str
    provider_id: str


@dataclass(frozen=True)
class LinkedInIdentity:
    """Normalized LinkedIn profile."""

    provider_user_id: str
    provider_id: str
    auth_method: AuthenticationMethod
    auth_info: OAuth1Info
    first_name: str = ""
    last_name: str = ""
    full_name: str = ""
    avatar_url: str | None = None  # None when LinkedIn omits pictureUrl
    email: str | None = None

    @property
    def identity_id(self) -> IdentityID:
        return IdentityID(self.provider_user_id, self.provider_id)

    def to_dict(self) -> dict[str, object]:
        """Public fields for display; the credential secret is left out."""
        return {
            "provider_user_id": self.provider_user_id,
            "provider_id": self.provider_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "full_name": self.full_name,
            "avatar_url": self.avatar_url,
            "email": self.email,
            "auth_method": self.auth_method.value,
        }
