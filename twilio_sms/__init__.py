"""Async client for the Twilio SMS REST resource (send, fetch, list)."""
from .clients import (
    ApiFault,
    MessageListPage,
    MessageRecord,
    SendOptions,
    Result,
    SmsClient,
    get_sms_client,
)

__version__ = "0.1.0"

__all__ = [
    'ApiFault', 'MessageListPage', 'MessageRecord', 'SendOptions',
    'Result', 'SmsClient', 'get_sms_client',
]
