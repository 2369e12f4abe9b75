from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Iterator, Protocol, TypeVar, runtime_checkable


logger: Final = logging.getLogger(__name__)

_Text = TypeVar("_Text", str, bytes)


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Half-open byte range [start, end).

    A span with start >= end is empty. The constructor keeps start > end as
    given, so an inverted span can mark a position without covering anything.
    Ordering is lexicographic on (start, end).
    """

    start: int = 0
    end: int = 0

    @classmethod
    def at(cls, offset: int) -> Span:
        """The empty span anchored at `offset`."""
        return cls(offset, offset)

    @classmethod
    def from_range(cls, r: range) -> Span:
        if r.step != 1:
            raise ValueError(f"cannot convert a range with step {r.step} to a span")
        return cls(r.start, r.stop)

    @property
    def span(self) -> Span:
        return self

    def range(self) -> range:
        return range(self.start, self.end)

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def is_empty(self) -> bool:
        return self.start >= self.end

    def length(self) -> int:
        """Size in bytes, zero for empty and inverted spans.

        Not spelled __len__: len() cannot return offsets past sys.maxsize,
        and a span stays truthy even when empty.
        """
        if self.start > self.end:
            return 0
        return self.end - self.start

    def __iter__(self) -> Iterator[int]:
        return iter(self.range())

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def __contains__(self, offset: object) -> bool:
        return isinstance(offset, int) and self.contains(offset)

    def contains_range(self, other: Span) -> bool:
        """True if `other` lies within this span.

        Only the bounds are compared, so an empty `other` positioned inside
        (or on the edges of) this span is contained.
        """
        return self.start <= other.start and other.end <= self.end

    def union(self, other: Span) -> Span:
        """Smallest span covering both.

        Everything between two disjoint spans is covered as well, and empty
        spans still contribute their position.
        """
        return Span(min(self.start, other.start), max(self.end, other.end))

    def intersection(self, other: Span) -> Span | None:
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start < end:
            return Span(start, end)
        return None

    def overlaps(self, other: Span) -> bool:
        return self.intersection(other) is not None

    def __or__(self, other: object) -> Span:
        if not isinstance(other, Span):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> Span | None:
        if not isinstance(other, Span):
            return NotImplemented
        return self.intersection(other)

    def until(self, end: int) -> Span:
        return Span(self.start, end)

    def extended(self, count: int) -> Span:
        """Move the end position forward by `count` bytes."""
        return Span(self.start, self.end + count)

    def cleared(self) -> Span:
        """Move the start position onto the end position."""
        return Span(self.end, self.end)

    def after(self) -> Span:
        """The empty span right after this one."""
        return Span.at(self.end)

    def extract(self, source: _Text) -> _Text:
        return source[self.start : self.end]

    def format(self) -> str:
        return f"{self.start}..{self.end}"

    def __str__(self) -> str:
        return self.format()


SpanLike = Span | range | tuple[int, int] | int


def _is_offset(value: object) -> bool:
    # bool is an int, but never an offset.
    return isinstance(value, int) and not isinstance(value, bool)


def to_span(value: SpanLike) -> Span:
    """Convert a span, range, (start, end) pair or single offset to a Span."""
    if isinstance(value, Span):
        return value
    if isinstance(value, range):
        return Span.from_range(value)
    if _is_offset(value):
        return Span.at(value)
    if isinstance(value, tuple) and len(value) == 2:
        start, end = value
        if _is_offset(start) and _is_offset(end):
            return Span(start, end)
    logger.debug("rejected span-like value %r", value)
    raise TypeError(f"cannot convert {type(value).__name__} to a span: {value!r}")


@runtime_checkable
class Spanned(Protocol):
    """Anything that knows its span: spans, locations, located values, tokens."""

    @property
    def span(self) -> Span: ...


def join_spans(*items: Spanned | None) -> Span:
    """Join the spans of tokens/nodes/locations into one covering span."""
    real = [it for it in items if it is not None]
    if not real:
        raise ValueError("join_spans() requires at least one value")
    out = real[0].span
    for it in real[1:]:
        out = out.union(it.span)
    return out
