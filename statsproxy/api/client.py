"""Async httpx wrapper for the upstream sports data APIs."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from statsproxy.errors import UpstreamError

log = logging.getLogger(__name__)

NHL_BASE_URL = "https://api-web.nhle.com/v1"
ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports"


class APIClient:
    """Async HTTP client for one upstream JSON API.

    Every failure, HTTP, transport or undecodable body, surfaces as
    ``UpstreamError`` prefixed with ``name``.
    """

    def __init__(
        self,
        base_url: str = NHL_BASE_URL,
        name: str = "NHL",
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.name = name
        kwargs: dict[str, Any] = {"base_url": base_url, "timeout": timeout}
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    async def get(self, path: str) -> Any:
        """GET ``path`` relative to the base URL and return decoded JSON."""
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as exc:
            log.warning("%s API request %s failed: %s", self.name, path, exc)
            raise UpstreamError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            log.warning("%s API %s returned %s", self.name, path, response.status_code)
            raise UpstreamError.from_status(
                response.status_code, response.reason_phrase, source=self.name
            )

        try:
            return response.json()
        except ValueError as exc:
            log.warning("%s API %s returned a non-JSON body", self.name, path)
            raise UpstreamError(
                f"{self.name} API error: invalid JSON response",
                upstream_status=response.status_code,
                reason=response.reason_phrase,
            ) from exc
