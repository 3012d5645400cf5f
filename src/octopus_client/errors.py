"""
octopus_client.errors

Error taxonomy for the interruptions client.

Responsibilities:
- Give callers one base type (`OctopusClientError`) to catch.
- Carry enough context (HTTP status, server body, link name) to diagnose failures.
"""

from __future__ import annotations

from typing import Any


class OctopusClientError(Exception):
    pass


class InvalidArgument(OctopusClientError, ValueError):
    """
    The caller supplied an empty or malformed identifier/payload.
    Raised before any request is issued.
    """


class MissingLink(OctopusClientError, LookupError):
    def __init__(self, *, link: str, resource_id: str | None = None) -> None:
        self.link = link
        self.resource_id = resource_id
        target = resource_id or "resource"
        super().__init__(f"{target} has no '{link}' link")


class TransportError(OctopusClientError):
    """
    HTTP failure or non-2xx response.
    `status_code` is None when no response was received (connect/read failures).
    """

    def __init__(
        self,
        message: str,
        *,
        method: str,
        path: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class NotFound(TransportError):
    pass


class DecodeError(OctopusClientError):
    def __init__(self, message: str, *, diagnostic: str) -> None:
        self.diagnostic = diagnostic
        super().__init__(f"{message}: {diagnostic}")


class Cancelled(OctopusClientError):
    """
    The caller's deadline expired before the round trip completed.
    """


# --- Module Notes -----------------------------------------------------------
# asyncio task cancellation is not converted into `Cancelled`; `CancelledError`
# propagates unchanged so task groups and timeouts above us keep working.
