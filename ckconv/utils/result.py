"""Explicit success/failure values returned by the public API.

Examples:
    >>> from ckconv import resolve_unit
    >>> result = resolve_unit("ft")
    >>> result.ok, result.value.name
    (True, 'Foot')
    >>> result = resolve_unit("bogus")
    >>> result.ok, result.error.kind
    (False, <ErrorKind.INVALID_UNIT: 'InvalidUnit'>)
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Generic, Optional, TypeVar

from ckconv.utils.errors import CKConvError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a core operation: a value, or the error that prevented it."""

    value: Optional[T] = None
    error: Optional[CKConvError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CKConvError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.ok


def returns_result(func: Callable[..., Any]) -> Callable[..., Result]:
    """Wrap ``func`` so CKConvError becomes a failed Result instead of raising."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> Result:
        try:
            return Result.success(func(*args, **kwargs))
        except CKConvError as e:
            return Result.failure(e)

    return wrapper


__all__ = ["Result", "returns_result"]
