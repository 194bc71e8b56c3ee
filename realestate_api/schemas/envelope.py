# realestate_api/schemas/envelope.py
from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class ErrorKind(str, Enum):
    not_found = "not_found"
    validation = "validation"
    internal = "internal"


class Envelope(BaseModel, Generic[T]):
    """Uniform wrapper returned by every endpoint."""
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[ErrorKind] = None
    meta: Optional[Dict[str, Any]] = None


def ok(data: Any = None, message: Optional[str] = None, **meta: Any) -> Envelope:
    return Envelope(success=True, data=data, message=message, meta=meta or None)


def fail(kind: ErrorKind, message: str, data: Any = None) -> Envelope:
    return Envelope(success=False, data=data, message=message, error=kind)
