"""
octopus_client.resources.models

Typed models for the resources returned by the interruptions API.

Responsibilities:
- Define `Interruption`, its `Form` and the tagged form controls.
- Define `User`, `InterruptionSubmitRequest` and the generic `ListResponse` envelope.
- Map PascalCase wire names (`IsPending`, `Links`, ...) onto snake_case attributes.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Annotated, Any, Generic, Literal, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    SerializerFunctionWrapHandler,
    Tag,
    model_serializer,
)
from pydantic.alias_generators import to_pascal

T = TypeVar("T")


class WireModel(BaseModel):
    # Unknown server fields are dropped; attributes may be set by name or by wire alias.
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, extra="ignore")


class ResolutionKind(enum.StrEnum):
    # Values are sent verbatim in the submit body's `Result` field.
    proceed = "Proceed"
    abort = "Abort"


MANUAL_INTERVENTION_APPROVE = ResolutionKind.proceed
MANUAL_INTERVENTION_ABORT = ResolutionKind.abort


# --- Form controls ------------------------------------------------------------


class ParagraphControl(WireModel):
    type: Literal["Paragraph"] = "Paragraph"
    text: str = ""
    resolve_links: bool = False


class TextAreaControl(WireModel):
    type: Literal["TextArea"] = "TextArea"
    label: str = ""


class SubmitButton(WireModel):
    text: str
    value: str
    requires_confirmation: bool = False


class SubmitButtonGroupControl(WireModel):
    type: Literal["SubmitButtonGroup"] = "SubmitButtonGroup"
    buttons: list[SubmitButton] = Field(default_factory=list)


class OpaqueControl(WireModel):
    """
    Any control type this client does not model explicitly.
    Every wire field is kept (as an extra) so re-encoding returns the original payload.
    """

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, extra="allow")

    type: str | None = None

    @model_serializer(mode="wrap")
    def _omit_absent_type(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # A control that arrived without `Type` is re-encoded without one.
        data = handler(self)
        if self.type is None:
            data.pop("Type", None)
            data.pop("type", None)
        return data


_KNOWN_CONTROL_TYPES = frozenset({"Paragraph", "TextArea", "SubmitButtonGroup"})


def _control_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("Type", value.get("type"))
    else:
        kind = getattr(value, "type", None)
    if isinstance(value, OpaqueControl) or kind not in _KNOWN_CONTROL_TYPES:
        return "Opaque"
    return kind


Control = Annotated[
    Union[
        Annotated[ParagraphControl, Tag("Paragraph")],
        Annotated[TextAreaControl, Tag("TextArea")],
        Annotated[SubmitButtonGroupControl, Tag("SubmitButtonGroup")],
        Annotated[OpaqueControl, Tag("Opaque")],
    ],
    Discriminator(_control_tag),
]


class FormElement(WireModel):
    name: str
    control: Control
    is_value_required: bool = False


class Form(WireModel):
    # `values` keeps explicit nulls: a null means "field present, not yet answered".
    values: dict[str, Any] = Field(default_factory=dict)
    elements: list[FormElement] = Field(default_factory=list)


# --- Resources ------------------------------------------------------------------


class Interruption(WireModel):
    id: str
    title: str = ""
    created_at: datetime | None = Field(default=None, alias="Created")
    is_pending: bool = False
    form: Form = Field(default_factory=Form)
    related_document_ids: frozenset[str] = frozenset()
    responsible_team_ids: frozenset[str] = frozenset()
    responsible_user_id: str | None = None
    can_take_responsibility: bool = False
    has_responsibility: bool = False
    task_id: str | None = None
    correlation_id: str | None = None
    is_linked_to_other_interruption: bool = False
    links: dict[str, str] = Field(default_factory=dict)

    @property
    def is_held(self) -> bool:
        # Advisory: someone has claimed the interruption but it is not resolved yet.
        return self.is_pending and self.responsible_user_id is not None


class User(WireModel):
    id: str
    username: str = ""
    display_name: str = ""
    email_address: str | None = None
    is_active: bool = False
    is_service: bool = False
    can_password_be_edited: bool = False
    is_requestor: bool = False
    links: dict[str, str] = Field(default_factory=dict)


class InterruptionSubmitRequest(WireModel):
    instructions: str = ""
    notes: str = ""
    # Known outcomes become `ResolutionKind`; any other server value is kept as a plain str.
    result: Annotated[ResolutionKind | str, Field(union_mode="left_to_right")]


class ListResponse(WireModel, Generic[T]):
    item_type: str = ""
    total_results: int = 0
    items_per_page: int = 0
    number_of_pages: int = 0
    last_page_number: int = 0
    items: list[T] = Field(default_factory=list)
    links: dict[str, str] = Field(default_factory=dict)


# --- Module Notes -----------------------------------------------------------
# Interruptions are only ever built by decoding server responses (see `resources.codec`);
# the client never fabricates one locally.
