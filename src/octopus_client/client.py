"""
octopus_client.client

Host client for an Octopus Deploy server.

Responsibilities:
- Build the shared `httpx.AsyncClient` (base URL, API key header, TLS, timeouts) from settings.
- Wire the resource client into the API services (`client.interruptions`).
- Own the connection pool lifecycle (`aclose` / `async with`).
"""

from __future__ import annotations

from types import TracebackType

import httpx

from octopus_client.services.interruptions import InterruptionService
from octopus_client.settings import ClientSettings
from octopus_client.transport.resource_client import ResourceClient

API_KEY_HEADER = "X-Octopus-ApiKey"


def build_http_client(settings: ClientSettings) -> httpx.AsyncClient:
    headers = {"Accept": "application/json"}
    if settings.api_key:
        headers[API_KEY_HEADER] = settings.api_key
    return httpx.AsyncClient(
        base_url=settings.base_url,
        headers=headers,
        timeout=settings.timeout_seconds,
        verify=settings.verify_ssl,
    )


class OctopusClient:
    """
    Composition root. Pass `http=` to reuse an existing httpx client (or a stubbed
    transport in tests); in that case the caller keeps ownership and `aclose` leaves it open.
    """

    def __init__(
        self,
        *,
        settings: ClientSettings | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._owns_http = http is None
        self._http = http or build_http_client(self._settings)

        self._resources = ResourceClient(http=self._http)
        self.interruptions = InterruptionService(resources=self._resources)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> OctopusClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


# --- Module Notes -----------------------------------------------------------
# Logging is not configured here; applications call
# `observability.logging.configure_logging` once at startup if they want JSON logs.
