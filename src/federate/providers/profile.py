"""LinkedIn profile wire format, classified into an explicit union at the boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Wire field names (case-sensitive)
ERROR_CODE = "errorCode"
MESSAGE = "message"
REQUEST_ID = "requestId"
TIMESTAMP = "timestamp"
ID = "id"
FIRST_NAME = "firstName"
LAST_NAME = "lastName"
FORMATTED_NAME = "formattedName"
PICTURE_URL = "pictureUrl"
EMAIL_ADDRESS = "emailAddress"


class MalformedProfile(ValueError):
    """Body is neither a usable error nor a usable success payload."""


@dataclass(frozen=True)
class ProfileError:
    """Error variant: LinkedIn reported a failure in the body."""

    error_code: Any
    message: str | None = None
    request_id: str | None = None
    timestamp: str | None = None


@dataclass(frozen=True)
class ProfileSuccess:
    """Success variant. Optional fields are None when absent on the wire."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    formatted_name: str | None = None
    picture_url: str | None = None
    email_address: str | None = None


ProfileResponse = ProfileError | ProfileSuccess


def _opt_str(data: dict[str, Any], key: str) -> str | None:
    val = data.get(key)
    return val if isinstance(val, str) else None


def classify(data: Any) -> ProfileResponse:
    """Classify a decoded JSON body. Raises MalformedProfile for anything unusable."""
    if not isinstance(data, dict):
        raise MalformedProfile(f"expected JSON object, got {type(data).__name__}")

    if data.get(ERROR_CODE) is not None:
        return ProfileError(
            error_code=data[ERROR_CODE],
            message=_opt_str(data, MESSAGE),
            request_id=_opt_str(data, REQUEST_ID),
            timestamp=_opt_str(data, TIMESTAMP),
        )

    user_id = data.get(ID)
    if not isinstance(user_id, str) or not user_id:
        raise MalformedProfile(f"missing or invalid {ID!r} in profile")
    return ProfileSuccess(
        id=user_id,
        first_name=_opt_str(data, FIRST_NAME),
        last_name=_opt_str(data, LAST_NAME),
        formatted_name=_opt_str(data, FORMATTED_NAME),
        picture_url=_opt_str(data, PICTURE_URL),
        email_address=_opt_str(data, EMAIL_ADDRESS),
    )
