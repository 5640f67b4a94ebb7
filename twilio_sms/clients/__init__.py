from .models import ApiFault, MessageDirection, MessageListPage, MessageRecord, MessageStatus, SendOptions
from .result import Result, success, fault, decode_failure
from .errors import SmsClientError, ConfigurationError, ProviderFaultError, DeserializationError
from .base import BasicAuthRequester, Credentials, HttpRequester, RawResponse
from .sms_client import SmsClient, sms_endpoint
from .factory import get_sms_client

__all__ = [
    'ApiFault','MessageDirection','MessageListPage','MessageRecord','MessageStatus','SendOptions',
    'Result','success','fault','decode_failure',
    'SmsClientError','ConfigurationError','ProviderFaultError','DeserializationError',
    'BasicAuthRequester','Credentials','HttpRequester','RawResponse',
    'SmsClient','sms_endpoint',
    'get_sms_client',
]
