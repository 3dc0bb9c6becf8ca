"""HTTP layer backed by httpx."""

from __future__ import annotations

import httpx


class HTTPXLayer:
    """Async GET over httpx. One short-lived client per request; no retries."""

    def __init__(self, *, timeout: float = 10.0) -> None:
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    async def get(self, url: str, *, auth: httpx.Auth) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.get(url, auth=auth, headers=self._headers())
