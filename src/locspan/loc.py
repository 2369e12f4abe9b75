from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .location import Location
from .result import Err, Ok, Result
from .span import Span, SpanLike, to_span


T = TypeVar("T")
U = TypeVar("U")
F = TypeVar("F")
G = TypeVar("G")
E = TypeVar("E")


@dataclass(slots=True, order=True)
class Loc(Generic[T, F]):
    """A value together with the location it was found at.

    The payload is read and replaced through `value` and the `set_*`
    mutators; `map*` methods build a new Loc and leave this one untouched.
    Mapping the payload keeps the location: recompute it explicitly with
    map_with_location() when the new value covers a different range.

    Ordering compares the payload first, then the location.
    """

    value: T
    location: Location[F]

    @property
    def span(self) -> Span:
        return self.location.span

    @property
    def file(self) -> F:
        return self.location.file

    def unpack(self) -> tuple[T, Location[F]]:
        return self.value, self.location

    def set_value(self, value: T) -> T:
        """Replace the payload and return the previous one."""
        old, self.value = self.value, value
        return old

    def set_location(self, location: Location[F]) -> Location[F]:
        old, self.location = self.location, location
        return old

    def set_span(self, span: SpanLike) -> Span:
        old = self.location.span
        self.location = self.location.with_span(to_span(span))
        return old

    def set_file(self, file: F) -> F:
        old = self.location.file
        self.location = self.location.with_file(file)
        return old

    def map(self, f: Callable[[T], U]) -> Loc[U, F]:
        return Loc(f(self.value), self.location)

    def map_with_location(self, f: Callable[[T, Location[F]], tuple[U, Location[G]]]) -> Loc[U, G]:
        value, location = f(self.value, self.location)
        return Loc(value, location)

    def map_location(self, f: Callable[[Location[F]], Location[G]]) -> Loc[T, G]:
        return Loc(self.value, f(self.location))

    def map_file(self, f: Callable[[F], G]) -> Loc[T, G]:
        return Loc(self.value, self.location.map_file(f))

    def try_map(self, f: Callable[[T], Result[U, E]]) -> Result[Loc[U, F], E]:
        """Map the payload with a fallible function.

        An Ok payload keeps this location; an Err is returned as is.
        """
        result = f(self.value)
        if isinstance(result, Ok):
            return Ok(Loc(result.value, self.location))
        if isinstance(result, Err):
            return result
        raise TypeError(f"expected Ok or Err, got {type(result).__name__}")

    def unwrap(self: Loc[U | None, F]) -> Loc[U, F]:
        """Unwrap a located optional, raising ValueError on None."""
        if self.value is None:
            raise ValueError(f"unwrap() on a located None at {self.location}")
        return Loc(self.value, self.location)

    def transpose(self: Loc[U | None, F]) -> Loc[U, F] | None:
        """Turn a located optional into an optional located value."""
        if self.value is None:
            return None
        return Loc(self.value, self.location)

    def __str__(self) -> str:
        return str(self.value)
