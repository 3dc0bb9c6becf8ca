"""Config schema and accessor."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from typing import Any

from loguru import logger

from federate.config.loader import _deep_update
from federate.core.constants import LINKEDIN
from federate.core.errors import ConfigurationError
from federate.identity.models import ConsumerKey

# Env keys that override config (loaded once per reload)
_ENV_OVERRIDE_KEYS = (
    "FEDERATE_LINKEDIN_CONSUMER_KEY",
    "FEDERATE_LINKEDIN_CONSUMER_SECRET",
    "FEDERATE_HTTP_TIMEOUT",
)


def _load_env_overrides() -> dict[str, str]:
    return {k: os.environ.get(k, "") for k in _ENV_OVERRIDE_KEYS}


@dataclass(frozen=True)
class OAuth1Settings:
    """OAuth1 provider settings. Handshake URLs default to LinkedIn's."""

    consumer_key: str = ""
    consumer_secret: str = ""
    # handshake endpoints, read by the external OAuth1 handshake component
    request_token_url: str = "https://api.linkedin.com/uas/oauth/requestToken"
    access_token_url: str = "https://api.linkedin.com/uas/oauth/accessToken"
    authorization_url: str = "https://api.linkedin.com/uas/oauth/authenticate"
    callback_url: str = ""

    @property
    def consumer(self) -> ConsumerKey:
        return ConsumerKey(self.consumer_key, self.consumer_secret)

    def require_consumer(self) -> OAuth1Settings:
        """Return self; raise ConfigurationError if the consumer pair is incomplete."""
        missing = [
            name for name in ("consumer_key", "consumer_secret") if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"{LINKEDIN}: missing {', '.join(missing)}",
                code="missing_consumer",
                details={"missing": missing},
            )
        return self

    def __repr__(self) -> str:
        return f"OAuth1Settings(consumer_key={self.consumer_key!r}, consumer_secret='***')"


class Config:
    """Config accessor with attribute-style access for nested keys."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}
        self._env: dict[str, str] = _load_env_overrides()

    def reload(self, data: dict[str, Any], *, validate: bool = True) -> None:
        """Replace config data."""
        self._data = data or {}
        self._env = _load_env_overrides()
        if validate:
            self._validate()
        logger.debug("Config reloaded: providers={}", sorted(self.providers))

    def _validate(self) -> None:
        """Validate config structure; raise ConfigurationError on failure."""
        providers = self._data.get("providers")
        if providers is not None and not isinstance(providers, dict):
            raise ConfigurationError(
                "providers must be a mapping",
                code="invalid_providers",
                details={"type": type(providers).__name__},
            )
        linkedin = self.providers.get(LINKEDIN)
        if linkedin is not None and not isinstance(linkedin, dict):
            raise ConfigurationError(
                f"providers.{LINKEDIN} must be a mapping",
                code="invalid_provider",
                details={"provider": LINKEDIN, "type": type(linkedin).__name__},
            )
        try:
            timeout = self.http_timeout_seconds
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(
                "http_timeout_seconds must be a number",
                code="invalid_timeout",
                original_error=exc,
            ) from exc
        if timeout <= 0:
            raise ConfigurationError(
                "http_timeout_seconds must be positive",
                code="invalid_timeout",
                details={"value": timeout},
            )

    @property
    def providers(self) -> dict[str, Any]:
        p = self._data.get("providers")
        return p if isinstance(p, dict) else {}

    @property
    def http_timeout_seconds(self) -> float:
        """Profile request timeout; FEDERATE_HTTP_TIMEOUT wins over the file."""
        env_val = self._env.get("FEDERATE_HTTP_TIMEOUT", "").strip()
        if env_val:
            return float(env_val)
        return float(self._data.get("http_timeout_seconds", 10.0))

    @property
    def linkedin(self) -> OAuth1Settings:
        """providers.linkedin merged over the defaults; FEDERATE_LINKEDIN_* env wins."""
        section = self.providers.get(LINKEDIN)
        merged = _deep_update(asdict(OAuth1Settings()), section if isinstance(section, dict) else {})
        known = {f.name for f in fields(OAuth1Settings)}
        values = {k: "" if v is None else str(v) for k, v in merged.items() if k in known}
        for env_key, name in (
            ("FEDERATE_LINKEDIN_CONSUMER_KEY", "consumer_key"),
            ("FEDERATE_LINKEDIN_CONSUMER_SECRET", "consumer_secret"),
        ):
            if self._env.get(env_key):
                values[name] = self._env[env_key]
        return OAuth1Settings(**values)


cfg: Config = Config({})
