"""
octopus_client.transport.resource_client

Generic resource client over a pre-configured `httpx.AsyncClient`.

Responsibilities:
- Issue GET/POST requests against paths relative to the client's base URL.
- Return the decoded JSON payload, or raise a typed error:
  - non-2xx -> `TransportError` (404 -> `NotFound`) carrying status and server body
  - network failure -> `TransportError` without a status
  - malformed JSON -> `DecodeError`
- Bound a round trip by a caller deadline and report expiry as `Cancelled`.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx

from octopus_client.errors import Cancelled, DecodeError, NotFound, TransportError
from octopus_client.observability.logging import get_logger

log = get_logger(__name__)


class ResourceClient:
    """
    Thin boundary between services and HTTP.
    Holds no state besides the shared httpx client, so one instance can serve many tasks.
    """

    def __init__(self, *, http: httpx.AsyncClient) -> None:
        self._http = http

    async def get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        deadline: float | None = None,
    ) -> Any:
        return await self._send("GET", path, params=params, deadline=deadline)

    async def post(
        self,
        path: str,
        *,
        body: Any = None,
        deadline: float | None = None,
    ) -> Any:
        # body=None sends an empty request (used to claim responsibility).
        return await self._send("POST", path, body=body, deadline=deadline)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
        deadline: float | None = None,
    ) -> Any:
        try:
            async with asyncio.timeout(deadline):
                response = await self._request(method, path, params=params, body=body)
        except TimeoutError as e:
            log.info("http.cancelled", method=method, path=path, deadline=deadline)
            raise Cancelled(f"{method} {path} exceeded deadline of {deadline}s") from e

        log.debug("http.request", method=method, path=path, status=response.status_code)
        _raise_for_status(method, path, response)
        return _decode_body(method, path, response)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None,
        body: Any,
    ) -> httpx.Response:
        try:
            # Non-streaming request: httpx reads and releases the body before returning.
            return await self._http.request(
                method,
                path,
                params=params,
                json=body,
            )
        except httpx.RequestError as e:
            log.warning("http.transport_failure", method=method, path=path, error=str(e))
            raise TransportError(
                f"{method} {path} failed: {e}", method=method, path=path
            ) from e


def _raise_for_status(method: str, path: str, response: httpx.Response) -> None:
    if response.is_success:
        return
    body = _error_body(response)
    message = f"{method} {path} returned HTTP {response.status_code}"
    log.warning("http.error_status", method=method, path=path, status=response.status_code)
    if response.status_code == 404:
        raise NotFound(message, method=method, path=path, status_code=404, body=body)
    raise TransportError(
        message, method=method, path=path, status_code=response.status_code, body=body
    )


def _error_body(response: httpx.Response) -> Any:
    # Octopus error bodies are usually JSON ({"ErrorMessage": ..., "Errors": [...]}).
    try:
        return response.json()
    except ValueError:
        return response.text


def _decode_body(method: str, path: str, response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"{method} {path} returned malformed JSON", diagnostic=str(e)) from e


# --- Module Notes -----------------------------------------------------------
# No retries at this layer: POSTs (claim/submit) are not idempotent, and the caller
# decides whether a timed-out submission should be re-sent.
