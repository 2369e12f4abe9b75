from __future__ import annotations

from dataclasses import dataclass


class LocationError(Exception):
    """Base class for errors raised by locspan."""


@dataclass(slots=True)
class FileMismatchError(LocationError, ValueError):
    """Two locations from different files were combined."""

    left: object
    right: object
    operation: str = "union"

    def __str__(self) -> str:
        return f"cannot {self.operation} locations from different files: {self.left!r} and {self.right!r}"
