"""Explicit success/failure values returned by access layer operations."""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, ParamSpec, TypeVar, Union

from inkwell.core.errors import AccessError, ErrorKind

T = TypeVar("T")
P = ParamSpec("P")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome.

    ``stale`` is set when the value came from the local cache after the rate
    limiter refused a fresh read.
    """

    value: T
    stale: bool = False

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the error kind and a user-facing message."""

    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_error(cls, error: AccessError) -> Failure:
        return cls(kind=error.kind, message=error.message)


Result = Union[Ok[T], Failure]


def returns_result(func: Callable[P, Result[T]]) -> Callable[P, Result[T]]:
    """Turn ``AccessError`` raised inside ``func`` into a ``Failure`` value."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
        try:
            return func(*args, **kwargs)
        except AccessError as err:
            return Failure.from_error(err)

    return wrapper
