from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success case of Result[T, E].

    Usage::

        match result:
            case Ok(value=v): ...
            case Err(error=e): ...
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure case of Result[T, E]."""

    error: E


Result = Ok[T] | Err[E]
