"""
octopus_client.resources.links

Link navigation over a resource's embedded `Links` map.

Responsibilities:
- Turn a link name into the concrete path for the next request.
- Fail with `MissingLink` when the server did not advertise the link.
"""

from __future__ import annotations

import enum
from typing import Protocol

from octopus_client.errors import MissingLink


class LinkName(enum.StrEnum):
    self_ = "Self"
    submit = "Submit"
    responsible = "Responsible"


# Envelope link used to walk list pages.
NEXT_PAGE = "Page.Next"


class Linked(Protocol):
    links: dict[str, str]


def resolve_link(resource: Linked, name: LinkName | str) -> str:
    # Links are concrete paths; templated links (`{?skip,take}`) are never expanded here.
    path = resource.links.get(str(name)) if resource.links else None
    if not path:
        raise MissingLink(link=str(name), resource_id=getattr(resource, "id", None))
    return path


def next_page_link(envelope: Linked) -> str | None:
    return envelope.links.get(NEXT_PAGE) or None


# --- Module Notes -----------------------------------------------------------
# Links are capabilities ("what can be done next"), not references to other entities.
