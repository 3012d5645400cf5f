"""
octopus_client.resources.codec

JSON codec for interruption resources.

Responsibilities:
- Validate raw payloads (already-parsed JSON or JSON text) into typed models.
- Encode models back to the PascalCase wire shape.
- Report malformed payloads as `DecodeError` with the parser diagnostic attached.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from octopus_client.errors import DecodeError
from octopus_client.resources.models import (
    Interruption,
    InterruptionSubmitRequest,
    ListResponse,
    User,
)

M = TypeVar("M", bound=BaseModel)

_SUBMIT_FIELDS = frozenset({"instructions", "notes", "result"})


def _decode(model: type[M], payload: Any, *, what: str) -> M:
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return model.model_validate_json(payload)
        return model.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"invalid {what} payload", diagnostic=str(e)) from e


def decode_interruption(payload: Any) -> Interruption:
    return _decode(Interruption, payload, what="interruption")


def decode_interruption_list(payload: Any) -> ListResponse[Interruption]:
    return _decode(ListResponse[Interruption], payload, what="interruption list")


def decode_user(payload: Any) -> User:
    return _decode(User, payload, what="user")


def encode(model: BaseModel) -> dict[str, Any]:
    # JSON mode: datetimes become ISO-8601 strings, enums their values, sets become lists.
    return model.model_dump(mode="json", by_alias=True)


def encode_submit_request(request: InterruptionSubmitRequest) -> dict[str, Any]:
    return request.model_dump(mode="json", by_alias=True, include=set(_SUBMIT_FIELDS))


# --- Module Notes -----------------------------------------------------------
# The submit body carries exactly Instructions/Notes/Result and nothing else.
