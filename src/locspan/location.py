from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Final, Generic, TypeVar

from .errors import FileMismatchError
from .span import Span, SpanLike, to_span


logger: Final = logging.getLogger(__name__)

F = TypeVar("F")
G = TypeVar("G")


@dataclass(frozen=True, slots=True, order=True)
class Location(Generic[F]):
    """A span in a given file.

    The file identifier is opaque: it is only compared for equality, and for
    ordering when locations are sorted (file first, then span).
    """

    file: F
    span: Span

    def __post_init__(self) -> None:
        if not isinstance(self.span, Span):
            object.__setattr__(self, "span", to_span(self.span))

    def parts(self) -> tuple[F, Span]:
        return (self.file, self.span)

    def same_file(self, other: Location[F]) -> bool:
        return self.file == other.file

    def _check_file(self, other: Location[F], operation: str) -> None:
        if self.file != other.file:
            logger.debug("%s across files: %r vs %r", operation, self.file, other.file)
            raise FileMismatchError(left=self.file, right=other.file, operation=operation)

    def union(self, other: Location[F]) -> Location[F]:
        """Smallest location covering both.

        Raises FileMismatchError if the two locations are in different files;
        use same_file() to probe first.
        """
        self._check_file(other, "union")
        return Location(self.file, self.span.union(other.span))

    def contains(self, other: Location[F]) -> bool:
        self._check_file(other, "contains")
        return self.span.contains_range(other.span)

    def overlaps(self, other: Location[F]) -> bool:
        return self.same_file(other) and self.span.overlaps(other.span)

    def intersection(self, other: Location[F]) -> Location[F] | None:
        if not self.same_file(other):
            return None
        inter = self.span.intersection(other.span)
        if inter is None:
            return None
        return Location(self.file, inter)

    def __or__(self, other: object) -> Location[F]:
        if not isinstance(other, Location):
            return NotImplemented
        return self.union(other)

    def with_file(self, file: G) -> Location[G]:
        return Location(file, self.span)

    def with_span(self, span: SpanLike) -> Location[F]:
        return replace(self, span=to_span(span))

    def map_file(self, f: Callable[[F], G]) -> Location[G]:
        return Location(f(self.file), self.span)

    def until(self, end: int) -> Location[F]:
        return replace(self, span=self.span.until(end))

    def extend(self, span: SpanLike) -> Location[F]:
        """Grow the span to also cover `span` (same file)."""
        return replace(self, span=self.span.union(to_span(span)))

    def format(self) -> str:
        return f"{self.file}@{self.span.format()}"

    def __str__(self) -> str:
        return self.format()
