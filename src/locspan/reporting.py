"""Conversion of locations into labels for diagnostic renderers.

Renderers typically want a file id, a start offset, an end offset and a
message per highlighted range. Nothing else in locspan depends on this
module.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from .location import Location
from .span import Span


F = TypeVar("F")


class LabelStyle(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True, slots=True)
class Label(Generic[F]):
    style: LabelStyle
    file: F
    start: int
    end: int
    message: str = ""

    @classmethod
    def from_location(cls, style: LabelStyle, location: Location[F], message: str = "") -> Label[F]:
        return cls(
            style=style,
            file=location.file,
            start=location.span.start,
            end=location.span.end,
            message=message,
        )

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)

    @property
    def location(self) -> Location[F]:
        return Location(self.file, self.span)

    def with_message(self, message: str) -> Label[F]:
        return Label(self.style, self.file, self.start, self.end, message)

    def format(self) -> str:
        base = f"{self.style.value}: {self.location.format()}"
        if self.message:
            return f"{base}: {self.message}"
        return base


def primary_label(location: Location[F], message: str = "") -> Label[F]:
    return Label.from_location(LabelStyle.PRIMARY, location, message)


def secondary_label(location: Location[F], message: str = "") -> Label[F]:
    return Label.from_location(LabelStyle.SECONDARY, location, message)
