from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar, Any, Callable, Literal

from .models import ApiFault
from .errors import ProviderFaultError, DeserializationError

T = TypeVar('T')
U = TypeVar('U')

ResultKind = Literal['success', 'fault', 'decode_error']

@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one provider call: exactly one of value, fault or decode error."""
    ok: bool
    value: T | None = None
    fault: ApiFault | None = None
    error: str | None = None
    status_code: int | None = None
    raw: Any | None = None

    @property
    def kind(self) -> ResultKind:
        if self.ok:
            return 'success'
        if self.fault is not None:
            return 'fault'
        return 'decode_error'

    @property
    def is_fault(self) -> bool:
        return self.kind == 'fault'

    @property
    def is_decode_error(self) -> bool:
        return self.kind == 'decode_error'

    def map(self, fn: Callable[[T], U]) -> 'Result[U]':
        if not self.ok or self.value is None:
            return self  # type: ignore[return-value]
        return success(fn(self.value), raw=self.raw, status_code=self.status_code)

    def unwrap(self) -> T:
        """Return the value or raise the matching SmsClientError."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        if self.fault is not None:
            raise ProviderFaultError(self.fault)
        raise DeserializationError(self.error or "undecodable response", status_code=self.status_code, raw=self.raw)

def success(val: T, *, raw: Any | None = None, status_code: int | None = 200) -> Result[T]:
    return Result(ok=True, value=val, status_code=status_code, raw=raw)

def fault(api_fault: ApiFault, *, status_code: int | None = None, raw: Any | None = None) -> Result[Any]:
    return Result(ok=False, fault=api_fault, error=str(api_fault), status_code=status_code, raw=raw)

def decode_failure(msg: str, *, status_code: int | None = None, raw: Any | None = None) -> Result[Any]:
    return Result(ok=False, error=msg, status_code=status_code, raw=raw)

__all__ = ['Result', 'ResultKind', 'success', 'fault', 'decode_failure']
