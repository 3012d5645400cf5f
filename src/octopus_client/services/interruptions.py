"""
octopus_client.services.interruptions

Interruptions service: list, fetch, claim and resolve manual gates.

Responsibilities:
- Build well-known paths for list/get; follow the interruption's own links for
  take-responsibility, get-responsibility and submit.
- Validate caller input before any request is issued.
- Decode responses into typed models via `resources.codec`.

Lifecycle of one interruption as seen from here:

    PENDING --take_responsibility--> PENDING (held) --submit--> RESOLVED
    PENDING ------------------------ submit ------------------> RESOLVED

Holding responsibility is advisory; the server may accept a submit without a prior claim.

The claim verb is not a confirmed server contract: take_responsibility sends POST
(empty body) to the `Responsible` link while get_responsibility sends GET to the same
link. Older clients issued GET for both; confirm against the server API before relying
on the verb distinction.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from typing import Any
from urllib.parse import quote

from octopus_client.errors import InvalidArgument
from octopus_client.observability.logging import get_logger
from octopus_client.resources.codec import (
    decode_interruption,
    decode_interruption_list,
    decode_user,
    encode_submit_request,
)
from octopus_client.resources.links import LinkName, next_page_link, resolve_link
from octopus_client.resources.models import (
    Interruption,
    InterruptionSubmitRequest,
    ListResponse,
    ResolutionKind,
    User,
)
from octopus_client.transport.resource_client import ResourceClient

log = get_logger(__name__)

INTERRUPTIONS_PATH = "/api/interruptions"


class InterruptionService:
    """
    Stateless: every call issues its own request, so one instance may be shared
    across tasks. Claim and submit are never retried here.
    """

    def __init__(self, *, resources: ResourceClient) -> None:
        self._resources = resources

    async def get_all(self, *, deadline: float | None = None) -> list[Interruption]:
        # First page only, in server order; use `iter_all` to walk every page.
        payload = await self._resources.get(INTERRUPTIONS_PATH, deadline=deadline)
        page = decode_interruption_list(payload)
        log.debug("interruptions.get_all", count=len(page.items), total=page.total_results)
        return list(page.items)

    async def get_page(
        self,
        *,
        skip: int | None = None,
        take: int | None = None,
        regarding: str | None = None,
        pending_only: bool | None = None,
        ids: str | Iterable[str] | None = None,
        deadline: float | None = None,
    ) -> ListResponse[Interruption]:
        params = _page_params(
            skip=skip, take=take, regarding=regarding, pending_only=pending_only, ids=ids
        )
        payload = await self._resources.get(
            INTERRUPTIONS_PATH, params=params or None, deadline=deadline
        )
        return decode_interruption_list(payload)

    async def iter_all(
        self,
        *,
        pending_only: bool | None = None,
        deadline: float | None = None,
    ) -> AsyncIterator[Interruption]:
        """
        Yield every interruption, following the envelope's `Page.Next` link.
        `deadline` applies to each page request, not to the whole walk.
        """
        page = await self.get_page(pending_only=pending_only, deadline=deadline)
        visited: set[str] = set()
        while True:
            for item in page.items:
                yield item
            next_path = next_page_link(page)
            if next_path is None or next_path in visited:
                return
            visited.add(next_path)
            payload = await self._resources.get(next_path, deadline=deadline)
            page = decode_interruption_list(payload)

    async def get(self, interruption_id: str, *, deadline: float | None = None) -> Interruption:
        if not isinstance(interruption_id, str) or not interruption_id.strip():
            raise InvalidArgument("interruption id must be a non-empty string")

        path = f"{INTERRUPTIONS_PATH}/{quote(interruption_id, safe='')}"
        payload = await self._resources.get(path, deadline=deadline)
        return decode_interruption(payload)

    async def take_responsibility(
        self, interruption: Interruption, *, deadline: float | None = None
    ) -> User:
        path = resolve_link(_require_interruption(interruption), LinkName.responsible)
        # Claiming mutates server state: POST with an empty body.
        payload = await self._resources.post(path, deadline=deadline)
        user = decode_user(payload)
        log.info(
            "interruptions.take_responsibility",
            interruption_id=interruption.id,
            user_id=user.id,
        )
        return user

    async def get_responsibility(
        self, interruption: Interruption, *, deadline: float | None = None
    ) -> User | None:
        """
        Return the user currently holding the interruption, or None when the
        server answers with an empty body (nobody has claimed it).
        """
        path = resolve_link(_require_interruption(interruption), LinkName.responsible)
        payload = await self._resources.get(path, deadline=deadline)
        if payload is None:
            return None
        return decode_user(payload)

    async def submit(
        self,
        interruption: Interruption,
        request: InterruptionSubmitRequest,
        *,
        deadline: float | None = None,
    ) -> Interruption:
        _check_submit_request(request)
        path = resolve_link(_require_interruption(interruption), LinkName.submit)

        log.info(
            "interruptions.submit",
            interruption_id=interruption.id,
            result=str(request.result),
        )
        payload = await self._resources.post(
            path, body=encode_submit_request(request), deadline=deadline
        )
        updated = decode_interruption(payload)
        if updated.is_pending:
            # The server is the source of truth; surface the anomaly but return what it said.
            log.warning("interruptions.submit_still_pending", interruption_id=updated.id)
        return updated


def _require_interruption(interruption: Any) -> Interruption:
    if not isinstance(interruption, Interruption):
        raise InvalidArgument(
            f"expected an Interruption, got {type(interruption).__name__}"
        )
    return interruption


def _check_submit_request(request: Any) -> None:
    if not isinstance(request, InterruptionSubmitRequest):
        raise InvalidArgument(
            f"expected an InterruptionSubmitRequest, got {type(request).__name__}"
        )
    # Unknown outcomes are passed through for newer servers, but must be non-empty.
    if not isinstance(request.result, ResolutionKind) and not str(request.result).strip():
        raise InvalidArgument("submit request result must be a non-empty resolution")


def _page_params(
    *,
    skip: int | None,
    take: int | None,
    regarding: str | None,
    pending_only: bool | None,
    ids: str | Iterable[str] | None,
) -> dict[str, Any]:
    if skip is not None and skip < 0:
        raise InvalidArgument("skip must be >= 0")
    if take is not None and take <= 0:
        raise InvalidArgument("take must be > 0")

    params: dict[str, Any] = {}
    if skip is not None:
        params["skip"] = skip
    if take is not None:
        params["take"] = take
    if regarding:
        params["regarding"] = regarding
    if pending_only is not None:
        params["pendingOnly"] = pending_only
    if ids is not None:
        # A bare string is one id, not an iterable of characters.
        joined = ids if isinstance(ids, str) else ",".join(ids)
        if joined:
            params["ids"] = joined
    return params


# --- Module Notes -----------------------------------------------------------
# take_responsibility and get_responsibility share the `Responsible` link; they differ
# only by verb (POST claims, GET observes).
