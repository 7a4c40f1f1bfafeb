"""Tagged results for the CMS layer.

Fetch operations never raise past their boundary. They return ``Ok`` with
the data or ``Err`` carrying a ``CMSError``; callers treat any ``Err`` as
"no data" and fall back.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class CMSErrorKind(str, Enum):
    CONFIG_MISSING = "config_missing"
    TRANSPORT_FAILURE = "transport_failure"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"


@dataclass(frozen=True)
class CMSError:
    kind: CMSErrorKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Err:
    error: CMSError
    ok: bool = field(default=False, init=False)

    @classmethod
    def of(cls, kind: CMSErrorKind, message: str, **details: Any) -> "Err":
        return cls(CMSError(kind, message, details))


Result = Union[Ok[T], Err]


class CMSConfigError(RuntimeError):
    """Raised by the client factory when a required credential is absent."""

    kind = CMSErrorKind.CONFIG_MISSING

    def __init__(self, message: str, missing: list[str]):
        super().__init__(message)
        self.missing = missing
