"""Facade over the provider's SMS resource: send, fetch and list messages.

Every operation issues exactly one request through the injected `HttpRequester` and
returns a `Result`: a parsed record on the expected status, a parsed `ApiFault` on any
other status, or a decode failure when the body does not fit the branch's shape.
Transport errors raised by the requester are not caught here.
"""
from __future__ import annotations
from typing import Mapping, Optional, Type, TypeVar
from urllib.parse import urljoin
import logging

from pydantic import BaseModel, ValidationError

from .base import HttpRequester, RawResponse
from .errors import ConfigurationError
from .models import ApiFault, MessageListPage, MessageRecord, SendOptions
from .result import Result, success, fault, decode_failure
from twilio_sms.logging import (
    log_request_sent,
    log_message_resolved,
    log_provider_fault,
    log_decode_failure,
)

logger = logging.getLogger("twilio_sms.sms_client")

API_FORMAT = "json"
SMS_RESOURCE = "SMS/Messages"

HTTP_OK = 200
HTTP_CREATED = 201

M = TypeVar('M', bound=BaseModel)

def sms_endpoint(base_url: str, account_sid: str, message_sid: str | None = None, fmt: str = API_FORMAT) -> str:
    """Build the SMS resource URL; pure string composition."""
    root = f"{base_url.rstrip('/')}/Accounts/{account_sid}/{SMS_RESOURCE}"
    if message_sid:
        return f"{root}/{message_sid}.{fmt}"
    return f"{root}.{fmt}"

def _require(name: str, value: str) -> None:
    if not value:
        raise ValueError(f"{name} must be a non-empty string")

class SmsClient:
    base_url: str
    account_sid: str
    requester: HttpRequester

    def __init__(self, base_url: str, account_sid: str, requester: HttpRequester):
        if not base_url or not account_sid:
            raise ConfigurationError("base_url and account_sid are required")
        self.base_url = base_url.rstrip('/')
        self.account_sid = account_sid
        self.requester = requester

    def endpoint(self, message_sid: str | None = None) -> str:
        return sms_endpoint(self.base_url, self.account_sid, message_sid)

    async def simple_send_message(self, from_: str, to: str, body: str) -> Result[MessageRecord]:
        """Send without StatusCallback / ApplicationSid."""
        return await self.send_message(from_, to, body)

    async def send_message(self, from_: str, to: str, body: str, options: Optional[SendOptions] = None) -> Result[MessageRecord]:
        """Send an SMS.

        options.status_callback: URL the provider POSTs to when the message status changes.
        options.application_sid: application whose SMS status callback URL receives updates.
        Empty optional values are left off the request. Body length is enforced by the provider.
        """
        _require("from_", from_)
        _require("to", to)
        _require("body", body)
        form = {"From": from_, "To": to, "Body": body}
        if options is not None:
            form.update(options.form_fields())
        endpoint = self.endpoint()
        log_request_sent("POST", endpoint, sorted(form), account_sid=self.account_sid)
        raw = await self.requester.post(endpoint, form)
        return self._resolve("send_message", raw, HTTP_CREATED, MessageRecord)

    async def get_message(self, message_sid: str) -> Result[MessageRecord]:
        _require("message_sid", message_sid)
        endpoint = self.endpoint(message_sid)
        log_request_sent("GET", endpoint, account_sid=self.account_sid)
        raw = await self.requester.get(endpoint, {})
        return self._resolve("get_message", raw, HTTP_OK, MessageRecord)

    async def list_messages(self, filters: Optional[Mapping[str, str]] = None) -> Result[MessageListPage]:
        """List messages, newest first as returned by the provider.

        Recognized filters: "To", "From", "DateSent" (YYYY-MM-DD, GMT).
        Any other key is forwarded as-is.
        """
        params = dict(filters or {})
        endpoint = self.endpoint()
        log_request_sent("GET", endpoint, sorted(params), account_sid=self.account_sid)
        raw = await self.requester.get(endpoint, params)
        return self._resolve("list_messages", raw, HTTP_OK, MessageListPage)

    async def next_page(self, page: MessageListPage) -> Result[MessageListPage] | None:
        """Fetch the page after `page`, or None when it is the last one."""
        if not page.next_page_uri:
            return None
        # next_page_uri is host-relative and already carries the paging query
        endpoint = urljoin(self.base_url + '/', page.next_page_uri)
        log_request_sent("GET", endpoint, account_sid=self.account_sid)
        raw = await self.requester.get(endpoint, {})
        return self._resolve("list_messages", raw, HTTP_OK, MessageListPage)

    def _resolve(self, operation: str, raw: RawResponse, expected_status: int, model: Type[M]) -> Result[M]:
        if raw.status_code != expected_status:
            try:
                api_fault = ApiFault.model_validate_json(raw.body)
            except ValidationError as e:
                log_decode_failure(operation, raw.status_code, f"fault body: {e.error_count()} error(s)", account_sid=self.account_sid)
                return decode_failure(f"Could not decode fault body: {e}", status_code=raw.status_code, raw=raw.body)
            logger.warning("%s failed %s: %s", operation, raw.status_code, raw.text[:200])
            log_provider_fault(operation, raw.status_code, api_fault.code, api_fault.message, account_sid=self.account_sid)
            return fault(api_fault, status_code=raw.status_code, raw=raw.body)
        try:
            value = model.model_validate_json(raw.body)
        except ValidationError as e:
            log_decode_failure(operation, raw.status_code, f"{model.__name__}: {e.error_count()} error(s)", account_sid=self.account_sid)
            return decode_failure(f"Could not decode {model.__name__}: {e}", status_code=raw.status_code, raw=raw.body)
        log_message_resolved(operation, raw.status_code, getattr(value, 'sid', None), account_sid=self.account_sid)
        return success(value, raw=raw.body, status_code=raw.status_code)

__all__ = ['SmsClient', 'sms_endpoint', 'API_FORMAT', 'HTTP_OK', 'HTTP_CREATED']
