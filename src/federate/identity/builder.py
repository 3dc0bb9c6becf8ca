"""Identity post-processors: turn a normalized identity into the caller's user value."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import TypeVar

from federate.identity.models import LinkedInIdentity

I = TypeVar("I")  # noqa: E741

IdentityBuilder = Callable[[LinkedInIdentity], I | Awaitable[I]]


def passthrough(identity: LinkedInIdentity) -> LinkedInIdentity:
    """Default builder: hand the normalized identity back unchanged."""
    return identity


async def build(builder: IdentityBuilder[I], identity: LinkedInIdentity) -> I:
    """Run builder, awaiting it when it is a coroutine function or returns an awaitable."""
    result = builder(identity)
    if inspect.isawaitable(result):
        result = await result
    return result
