"""Shared fixtures for the SMS client tests.

  * `RecordingRequester` stands in for the authenticated transport: it returns a
    queued `RawResponse` and records every call so tests can assert request shape.
  * `message_json` / `list_json` / `fault_json` are provider-shaped payloads.
  * respx is used directly in tests that exercise the real `BasicAuthRequester`.
"""
from __future__ import annotations

import json
import pytest
from typing import Any

from twilio_sms.clients import RawResponse, SmsClient

BASE_URL = "https://api.twilio.com/2010-04-01"
ACCOUNT_SID = "AC0123456789abcdef0123456789abcdef"
AUTH_TOKEN = "test-token"
MESSAGES_URL = f"{BASE_URL}/Accounts/{ACCOUNT_SID}/SMS/Messages.json"


class RecordingRequester:
    def __init__(self):
        self.calls: list[tuple[str, str, dict[str, str]]] = []
        self._responses: list[RawResponse] = []

    def queue(self, status_code: int, body: Any):
        if not isinstance(body, (bytes, str)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode()
        self._responses.append(RawResponse(status_code=status_code, body=body))

    def _next(self) -> RawResponse:
        assert self._responses, "no response queued"
        return self._responses.pop(0)

    async def post(self, endpoint, form):
        self.calls.append(("POST", endpoint, dict(form)))
        return self._next()

    async def get(self, endpoint, params):
        self.calls.append(("GET", endpoint, dict(params)))
        return self._next()


@pytest.fixture
def requester() -> RecordingRequester:
    return RecordingRequester()


@pytest.fixture
def sms_client(requester) -> SmsClient:
    return SmsClient(BASE_URL, ACCOUNT_SID, requester)


@pytest.fixture
def message_json() -> dict[str, Any]:
    return {
        "account_sid": ACCOUNT_SID,
        "api_version": "2010-04-01",
        "body": "Jenny please?! I love you <3",
        "date_created": "Wed, 18 Aug 2010 20:01:40 +0000",
        "date_sent": None,
        "date_updated": "Wed, 18 Aug 2010 20:01:40 +0000",
        "direction": "outbound-api",
        "from": "+14158141829",
        "price": None,
        "sid": "SM90c6fc909d8504d45ecdb3a3d5b3556e",
        "status": "queued",
        "to": "+14159352345",
        "uri": f"/2010-04-01/Accounts/{ACCOUNT_SID}/SMS/Messages/SM90c6fc909d8504d45ecdb3a3d5b3556e.json",
    }


@pytest.fixture
def list_json(message_json) -> dict[str, Any]:
    second = dict(message_json, sid="SM800f449d0399ed014aae2bcc0cc2f2ec", status="sent",
                  date_sent="Mon, 16 Aug 2010 03:45:01 +0000", price="-0.00750")
    return {
        "start": 0,
        "end": 1,
        "total": 2,
        "num_pages": 1,
        "page": 0,
        "page_size": 50,
        "uri": f"/2010-04-01/Accounts/{ACCOUNT_SID}/SMS/Messages.json",
        "first_page_uri": f"/2010-04-01/Accounts/{ACCOUNT_SID}/SMS/Messages.json?Page=0&PageSize=50",
        "last_page_uri": f"/2010-04-01/Accounts/{ACCOUNT_SID}/SMS/Messages.json?Page=0&PageSize=50",
        "next_page_uri": None,
        "previous_page_uri": None,
        "sms_messages": [message_json, second],
    }


@pytest.fixture
def fault_json() -> dict[str, Any]:
    return {
        "status": 400,
        "message": "The 'To' number +1555 is not a valid phone number.",
        "code": 21211,
        "more_info": "https://www.twilio.com/docs/errors/21211",
    }
