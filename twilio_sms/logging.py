"""structlog setup and event helpers for the SMS client.

Importing this module does not touch the global structlog configuration. Applications
that already configure structlog keep their setup; `get_sms_client` only calls
`configure_logging` when nothing has been configured yet.
Message bodies and credentials are never passed to these helpers.
"""
from __future__ import annotations

import logging
import contextvars
import structlog
from typing import Any

# Set by the caller around a unit of work; stamped on every event.
_request_id_var = contextvars.ContextVar("request_id", default=None)


def _add_request_id(logger, method_name: str, event_dict: dict[str, Any]):  # noqa: D401
    rid = _request_id_var.get()
    if rid:
        event_dict.setdefault("request_id", rid)
    return event_dict


def configure_logging(level: str = "INFO") -> None:
    """Install the package's JSON structlog pipeline at `level`."""
    lvl = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(lvl, int):
        lvl = logging.INFO
    stdlib_logger = logging.getLogger("twilio_sms")
    stdlib_logger.setLevel(lvl)
    if not stdlib_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        stdlib_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _add_request_id,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(lvl),
        cache_logger_on_first_use=False,
    )


def ensure_logging(level: str = "INFO") -> bool:
    """Configure logging unless the host application already did. Returns True if configured here."""
    if structlog.is_configured():
        return False
    configure_logging(level)
    return True


slog = structlog.get_logger("twilio_sms")


def set_log_request(request_id: str | None):
    _request_id_var.set(request_id)


def log_request_sent(method: str, endpoint: str, param_keys: list[str] | None = None, **extra):
    slog.info("sms_request_sent", method=method, endpoint=endpoint, param_keys=param_keys or [], **extra)

def log_message_resolved(operation: str, status_code: int, sid: str | None = None, **extra):
    slog.info("sms_message_resolved", operation=operation, status_code=status_code, sid=sid, **extra)

def log_provider_fault(operation: str, status_code: int, code: int | None, message: str | None, **extra):
    slog.warning("sms_provider_fault", operation=operation, status_code=status_code, code=code, message=message, **extra)

def log_decode_failure(operation: str, status_code: int, detail: str, **extra):
    slog.warning("sms_decode_failure", operation=operation, status_code=status_code, detail=detail, **extra)
