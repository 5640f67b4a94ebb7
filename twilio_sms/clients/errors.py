from __future__ import annotations

from typing import Any

from .models import ApiFault


class SmsClientError(Exception):
    """Base exception for SMS client errors."""

    pass


class ConfigurationError(SmsClientError):
    """Raised when the client is built without a base URL or credentials."""

    pass


class ProviderFaultError(SmsClientError):
    """The provider answered with a non-success status and a well-formed fault body."""

    def __init__(self, fault: ApiFault):
        self.fault = fault
        super().__init__(str(fault))

    @property
    def status_code(self) -> int:
        return self.fault.status


class DeserializationError(SmsClientError):
    """The response body did not match the expected JSON shape."""

    def __init__(self, message: str, status_code: int | None = None, raw: Any | None = None):
        self.status_code = status_code
        self.raw = raw
        super().__init__(message)


__all__ = ['SmsClientError', 'ConfigurationError', 'ProviderFaultError', 'DeserializationError']
