# fakeso/core/result.py
"""
Result values returned by the service layer.

Services never raise across their boundary: every operation returns either
``Ok(value)`` or ``Err(error)``. Callers branch with ``isinstance`` or ``match``.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")

@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the produced value."""
    value: T

@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a human-readable error message."""
    error: str

Result = Union[Ok[T], Err]
