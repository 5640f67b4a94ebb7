"""Pydantic v2 records mirroring the provider's SMS JSON shapes.

All records are frozen. Field names follow the wire format except `from`, which is
exposed as `from_` and (de)serialized through its alias.
Timestamps are kept as the provider's RFC 2822 strings; the `*_at` properties parse them.
"""
from __future__ import annotations

from datetime import datetime
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageDirection(str, Enum):
    INBOUND = "inbound"
    OUTBOUND_API = "outbound-api"
    OUTBOUND_CALL = "outbound-call"
    OUTBOUND_REPLY = "outbound-reply"


class MessageStatus(str, Enum):
    ACCEPTED = "accepted"
    QUEUED = "queued"
    SENDING = "sending"
    SENT = "sent"
    DELIVERED = "delivered"
    UNDELIVERED = "undelivered"
    FAILED = "failed"
    RECEIVING = "receiving"
    RECEIVED = "received"


class WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


def _parse_rfc2822(val: Optional[str]) -> Optional[datetime]:
    if not val:
        return None
    try:
        # e.g. 'Wed, 18 Aug 2010 20:01:40 +0000'
        return parsedate_to_datetime(val)
    except (TypeError, ValueError):
        return None


# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------
class MessageRecord(WireModel):
    sid: str = Field(..., min_length=1)
    # Unknown values from newer API releases are kept as plain strings.
    status: Union[MessageStatus, str] = Field(..., union_mode="left_to_right")
    account_sid: str = ""
    api_version: str = ""
    body: str = ""
    date_created: Optional[str] = None
    date_sent: Optional[str] = None
    date_updated: Optional[str] = None
    direction: Union[MessageDirection, str] = Field("", union_mode="left_to_right")
    from_: str = Field("", alias="from")
    to: str = ""
    price: Optional[float] = None
    uri: str = ""

    @property
    def created_at(self) -> Optional[datetime]:
        return _parse_rfc2822(self.date_created)

    @property
    def sent_at(self) -> Optional[datetime]:
        return _parse_rfc2822(self.date_sent)

    @property
    def updated_at(self) -> Optional[datetime]:
        return _parse_rfc2822(self.date_updated)


class MessageListPage(WireModel):
    start: int = 0
    end: int = 0
    total: int = 0
    page: int = 0
    page_size: int = 0
    num_pages: int = 0
    uri: str = ""
    first_page_uri: str = ""
    last_page_uri: str = ""
    next_page_uri: str = ""
    previous_page_uri: str = ""
    messages: List[MessageRecord] = Field(default_factory=list, alias="sms_messages")

    @field_validator(
        'uri', 'first_page_uri', 'last_page_uri', 'next_page_uri', 'previous_page_uri',
        mode='before',
    )
    def null_uri_to_empty(cls, v):  # type: ignore
        return "" if v is None else v

    @field_validator('messages', mode='before')
    def null_messages_to_empty(cls, v):  # type: ignore
        return [] if v is None else v

    @property
    def has_next(self) -> bool:
        return bool(self.next_page_uri)


# ---------------------------------------------------------------------------
# Request options / faults
# ---------------------------------------------------------------------------
class SendOptions(WireModel):
    """Optional send parameters. None and "" both mean "leave unset"."""
    status_callback: Optional[str] = None
    application_sid: Optional[str] = None

    def form_fields(self) -> dict[str, str]:
        out: dict[str, str] = {}
        if self.status_callback:
            out["StatusCallback"] = self.status_callback
        if self.application_sid:
            out["ApplicationSid"] = self.application_sid
        return out


class ApiFault(WireModel):
    status: int
    message: str
    code: Optional[int] = None
    more_info: Optional[str] = None

    def __str__(self) -> str:
        code = f" (code {self.code})" if self.code is not None else ""
        return f"{self.status}: {self.message}{code}"


__all__ = [
    'MessageDirection', 'MessageStatus',
    'MessageRecord', 'MessageListPage', 'SendOptions', 'ApiFault',
]
