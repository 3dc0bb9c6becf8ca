"""Collaborator protocols injected into providers, plus the default OAuth1 signer."""

from __future__ import annotations

from typing import Any, Protocol

import httpx
from authlib.integrations.httpx_client import OAuth1Auth

from federate.identity.models import ConsumerKey, OAuth1Info


class Signer(Protocol):
    """Produces a signing directive for one outbound request."""

    def sign(self, consumer: ConsumerKey, auth_info: OAuth1Info) -> httpx.Auth: ...


class ProfileResponseLike(Protocol):
    def json(self) -> Any: ...


class HTTPLayer(Protocol):
    """Async GET transport. Raises httpx.HTTPError on transport failure."""

    async def get(self, url: str, *, auth: httpx.Auth) -> ProfileResponseLike: ...


class OAuth1Signer:
    """HMAC-SHA1 OAuth1 signer; the signature travels in the Authorization header."""

    def sign(self, consumer: ConsumerKey, auth_info: OAuth1Info) -> httpx.Auth:
        return OAuth1Auth(
            client_id=consumer.key,
            client_secret=consumer.secret,
            token=auth_info.token,
            token_secret=auth_info.secret,
        )
