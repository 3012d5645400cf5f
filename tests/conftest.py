"""
tests.conftest

Shared fixtures: server payloads and a client wired to a stubbed httpx transport.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from octopus_client.client import OctopusClient
from octopus_client.settings import ClientSettings

BASE_URL = "http://octopus.test"

_FORM = {
    "Values": {"Instructions": None, "Notes": None, "Result": None},
    "Elements": [
        {
            "Name": "Instructions",
            "Control": {"Type": "Paragraph", "Text": "Manual Approval", "ResolveLinks": False},
            "IsValueRequired": False,
        },
        {
            "Name": "Notes",
            "Control": {"Type": "TextArea", "Label": "Notes"},
            "IsValueRequired": False,
        },
        {
            "Name": "Result",
            "Control": {
                "Type": "SubmitButtonGroup",
                "Buttons": [
                    {"Text": "Proceed", "Value": "Proceed", "RequiresConfirmation": False},
                    {"Text": "Abort", "Value": "Abort", "RequiresConfirmation": True},
                ],
            },
            "IsValueRequired": False,
        },
    ],
}

INTERRUPTION: dict[str, Any] = {
    "Id": "Interruptions-1",
    "Title": "InterruptionTitle",
    "Created": "2018-12-31T13:38:39.440+00:00",
    "IsPending": True,
    "Form": _FORM,
    "RelatedDocumentIds": ["Deployments-1", "ServerTasks-1", "Projects-1", "Environments-1"],
    "ResponsibleTeamIds": ["Teams-1"],
    "ResponsibleUserId": None,
    "CanTakeResponsibility": True,
    "HasResponsibility": False,
    "TaskId": "ServerTasks-1",
    "CorrelationId": (
        "ServerTasks-1_CNMPMXUEE6/24921723bcb741409134629931dd6b97/dbfadf8e4aaa4acbb45d45c4c39d0f12"
    ),
    "IsLinkedToOtherInterruption": False,
    "Links": {
        "Self": "/api/interruptions/Interruptions-1",
        "Submit": "/api/interruptions/Interruptions-1/submit",
        "Responsible": "/api/interruptions/Interruptions-1/responsible",
    },
}

USER: dict[str, Any] = {
    "Id": "Users-1",
    "Username": "user@example.com",
    "DisplayName": "User Name",
    "IsActive": True,
    "IsService": False,
    "EmailAddress": "user@example.com",
    "CanPasswordBeEdited": True,
    "IsRequestor": True,
    "Links": {
        "Self": "/api/users/Users-1",
        "Permissions": "/api/users/Users-1/permissions",
        "ApiKeys": "/api/users/Users-1/apikeys{/id}{?skip,take}",
        "Avatar": "https://www.gravatar.com/avatar/ae0e3d90eeddb248c041469b38cc64fd?d=blank",
    },
}


def list_envelope(items: list[dict[str, Any]], **links: str) -> dict[str, Any]:
    return {
        "ItemType": "Interruption",
        "TotalResults": len(items),
        "ItemsPerPage": 30,
        "NumberOfPages": 1,
        "LastPageNumber": 0,
        "Items": items,
        "Links": {
            "Self": "/api/interruptions?regarding=&pendingOnly=False",
            "Template": "/api/interruptions{?skip,take,regarding,pendingOnly,ids}",
            "Page.All": "/api/interruptions?skip=0&take=2147483647",
            "Page.Current": "/api/interruptions?skip=0&take=30",
            "Page.Last": "/api/interruptions?skip=0&take=30",
            **links,
        },
    }


@pytest.fixture
def interruption_payload() -> dict[str, Any]:
    return copy.deepcopy(INTERRUPTION)


@pytest.fixture
def submitted_payload() -> dict[str, Any]:
    payload = copy.deepcopy(INTERRUPTION)
    payload["IsPending"] = False
    return payload


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return copy.deepcopy(USER)


@pytest.fixture
def make_envelope():
    return list_envelope


@pytest.fixture
def list_payload() -> dict[str, Any]:
    return list_envelope([copy.deepcopy(INTERRUPTION)])


class Recorder:
    """
    httpx MockTransport handler that records every request before answering it.
    """

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)


@pytest_asyncio.fixture
async def connect():
    """
    Factory: connect(respond) -> (OctopusClient, Recorder).
    """

    opened: list[httpx.AsyncClient] = []

    def _connect(
        respond: Callable[[httpx.Request], httpx.Response],
    ) -> tuple[OctopusClient, Recorder]:
        recorder = Recorder(respond)
        http = httpx.AsyncClient(transport=httpx.MockTransport(recorder), base_url=BASE_URL)
        opened.append(http)
        client = OctopusClient(settings=ClientSettings(base_url=BASE_URL), http=http)
        return client, recorder

    yield _connect

    for http in opened:
        await http.aclose()


def respond_json(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def _respond(_: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return _respond


@pytest.fixture
def json_responder():
    return respond_json


# --- Module Notes -----------------------------------------------------------
# Tests never touch the network: every client is bound to an httpx.MockTransport.
