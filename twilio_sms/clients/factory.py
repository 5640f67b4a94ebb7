from __future__ import annotations
from typing import Optional

from twilio_sms.core.settings import Settings, get_settings
from .base import BasicAuthRequester, Credentials, HttpRequester
from .errors import ConfigurationError
from .sms_client import SmsClient
from twilio_sms.logging import ensure_logging

def get_sms_client(settings: Optional[Settings] = None, requester: Optional[HttpRequester] = None) -> SmsClient:
    """Build an SmsClient from settings (environment by default).

    Installs the package logging at LOG_LEVEL unless structlog is already configured.

    A custom requester skips the auth token requirement; the account sid is still
    needed for the resource path.
    """
    s = settings or get_settings()
    ensure_logging(s.LOG_LEVEL)
    if not s.TWILIO_ACCOUNT_SID:
        raise ConfigurationError("TWILIO_ACCOUNT_SID is not set")
    if requester is None:
        if not s.TWILIO_AUTH_TOKEN:
            raise ConfigurationError("TWILIO_AUTH_TOKEN is not set")
        requester = BasicAuthRequester(
            Credentials(account_sid=s.TWILIO_ACCOUNT_SID, auth_token=s.TWILIO_AUTH_TOKEN),
            timeout=s.TWILIO_HTTP_TIMEOUT,
        )
    return SmsClient(s.base_url, s.TWILIO_ACCOUNT_SID, requester)
