"""Federation domain exceptions."""

from __future__ import annotations

UNSPECIFIED_PROFILE_ERROR = "[Federate][{}] error retrieving profile information"
SPECIFIED_PROFILE_ERROR = (
    "[Federate][{}] error retrieving profile information. "
    "Error code: {}, requestId: {}, message: {}, timestamp: {}"
)
UNAVAILABLE = "unavailable"


class FederationError(Exception):
    """Base for federation domain errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_error = original_error


class ConfigurationError(FederationError):
    """Config validation or load failure."""


class AuthenticationError(FederationError):
    """A provider could not authenticate the user."""

    def __init__(
        self,
        message: str,
        *,
        provider_id: str,
        code: str | None = None,
        details: dict[str, object] | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details, original_error=original_error)
        self.provider_id = provider_id


class SpecifiedProfileError(AuthenticationError):
    """The provider answered with an application-level error in the profile body."""

    def __init__(
        self,
        provider_id: str,
        error_code: object,
        *,
        message: str | None = None,
        request_id: str | None = None,
        timestamp: str | None = None,
    ) -> None:
        super().__init__(
            SPECIFIED_PROFILE_ERROR.format(
                provider_id,
                error_code,
                request_id if request_id is not None else UNAVAILABLE,
                message if message is not None else UNAVAILABLE,
                timestamp if timestamp is not None else UNAVAILABLE,
            ),
            provider_id=provider_id,
            code="specified_profile_error",
            details={
                "error_code": error_code,
                "request_id": request_id,
                "message": message,
                "timestamp": timestamp,
            },
        )
        self.error_code = error_code


class UnspecifiedProfileError(AuthenticationError):
    """Anything else that prevented building an identity (transport, parse, shape)."""

    def __init__(
        self,
        provider_id: str,
        *,
        reason: str | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(
            UNSPECIFIED_PROFILE_ERROR.format(provider_id),
            provider_id=provider_id,
            code="unspecified_profile_error",
            details={"reason": reason} if reason else None,
            original_error=original_error,
        )
