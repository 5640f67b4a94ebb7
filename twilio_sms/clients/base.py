from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Mapping
import httpx
import logging

from .errors import ConfigurationError

logger = logging.getLogger("twilio_sms.transport")

DEFAULT_TIMEOUT = 30.0

@dataclass(frozen=True)
class Credentials:
    account_sid: str
    auth_token: str

    def __repr__(self) -> str:
        return f"Credentials(account_sid={self.account_sid!r}, auth_token='***')"

@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

class HttpRequester(Protocol):
    """Authenticated transport. Transport failures are raised, never returned."""
    async def post(self, endpoint: str, form: Mapping[str, str]) -> RawResponse: ...
    async def get(self, endpoint: str, params: Mapping[str, str]) -> RawResponse: ...

class BasicAuthRequester:
    """HttpRequester signing each request with HTTP basic auth (account sid / auth token).

    One short-lived httpx.AsyncClient per call; httpx errors propagate unchanged.
    """
    credentials: Credentials
    timeout: float

    def __init__(self, credentials: Credentials, timeout: float = DEFAULT_TIMEOUT):
        if not credentials.account_sid or not credentials.auth_token:
            raise ConfigurationError("Both account sid and auth token are required")
        self.credentials = credentials
        self.timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            auth=(self.credentials.account_sid, self.credentials.auth_token),
            headers={"Accept": "application/json"},
        )

    async def post(self, endpoint: str, form: Mapping[str, str]) -> RawResponse:
        async with self._client() as client:
            resp = await client.post(endpoint, data=dict(form))
        logger.debug("POST %s -> %s", endpoint, resp.status_code)
        return RawResponse(status_code=resp.status_code, body=resp.content)

    async def get(self, endpoint: str, params: Mapping[str, str]) -> RawResponse:
        async with self._client() as client:
            resp = await client.get(endpoint, params=dict(params) if params else None)
        logger.debug("GET %s -> %s", endpoint, resp.status_code)
        return RawResponse(status_code=resp.status_code, body=resp.content)
