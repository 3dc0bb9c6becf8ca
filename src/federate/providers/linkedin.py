"""LinkedIn OAuth1 provider: fetch the member profile and normalize it."""

from __future__ import annotations

from typing import Generic, TypeVar

import httpx
from loguru import logger

from federate.config.schema import OAuth1Settings
from federate.core.constants import LINKEDIN, AuthenticationMethod
from federate.core.errors import SpecifiedProfileError, UnspecifiedProfileError
from federate.identity.builder import IdentityBuilder, build
from federate.identity.models import LinkedInIdentity, OAuth1Info
from federate.providers.base import HTTPLayer, OAuth1Signer, Signer
from federate.providers.profile import MalformedProfile, ProfileError, classify

API = (
    "https://api.linkedin.com/v1/people/"
    "~:(id,first-name,last-name,formatted-name,picture-url,email-address)?format=json"
)

I = TypeVar("I")  # noqa: E741


class LinkedInProvider(Generic[I]):
    """Resolves an OAuth1 credential into a LinkedIn identity.

    Collaborators are injected: ``signer`` builds the OAuth1 directive,
    ``http_layer`` performs the GET, ``identity_builder`` wraps the normalized
    identity into whatever the caller wants (sync or async).
    """

    id = LINKEDIN
    auth_method = AuthenticationMethod.OAUTH1

    def __init__(
        self,
        settings: OAuth1Settings,
        http_layer: HTTPLayer,
        identity_builder: IdentityBuilder[I],
        *,
        signer: Signer | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_layer
        self._identity_builder = identity_builder
        self._signer = signer or OAuth1Signer()

    async def build_identity(self, auth_info: OAuth1Info) -> I:
        """Fetch the profile for auth_info and return the built identity.

        Raises SpecifiedProfileError when LinkedIn reports an error in the body,
        UnspecifiedProfileError for transport failures and malformed payloads.
        Builder failures propagate unchanged.
        """
        sign = self._signer.sign(self._settings.consumer, auth_info)
        logger.debug("Fetching {} profile", self.id)
        try:
            response = await self._http.get(API, auth=sign)
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("{} profile request failed: {}", self.id, exc)
            raise UnspecifiedProfileError(self.id, reason="transport", original_error=exc) from exc

        try:
            profile = classify(data)
        except MalformedProfile as exc:
            logger.warning("{} returned an unexpected profile payload: {}", self.id, exc)
            raise UnspecifiedProfileError(self.id, reason="malformed", original_error=exc) from exc

        if isinstance(profile, ProfileError):
            logger.warning(
                "{} reported profile error code={} requestId={}",
                self.id,
                profile.error_code,
                profile.request_id,
            )
            raise SpecifiedProfileError(
                self.id,
                profile.error_code,
                message=profile.message,
                request_id=profile.request_id,
                timestamp=profile.timestamp,
            )

        identity = LinkedInIdentity(
            provider_user_id=profile.id,
            provider_id=self.id,
            first_name=profile.first_name or "",
            last_name=profile.last_name or "",
            full_name=profile.formatted_name or "",
            avatar_url=profile.picture_url,
            email=profile.email_address,
            auth_method=self.auth_method,
            auth_info=auth_info,
        )
        return await build(self._identity_builder, identity)

    resolve = build_identity
