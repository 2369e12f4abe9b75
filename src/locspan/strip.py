"""Compare located values while ignoring their locations.

Two ASTs parsed from differently formatted sources carry different locations
but should still compare equal. strip() removes every Loc wrapper from a
value, and Stripped wraps a value so that ==, hash() and < do the same.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .loc import Loc
from .result import Err, Ok


def strip(value: Any) -> Any:
    """Recursively replace every Loc by its (stripped) payload.

    Descends into lists, tuples, dict values and Ok/Err results. Anything
    else is returned unchanged. Loc is not hashable, so sets and dict keys
    never hold one.
    """
    if isinstance(value, Loc):
        return strip(value.value)
    if isinstance(value, list):
        return [strip(v) for v in value]
    if isinstance(value, tuple):
        return tuple(strip(v) for v in value)
    if isinstance(value, dict):
        return {k: strip(v) for k, v in value.items()}
    if isinstance(value, Ok):
        return Ok(strip(value.value))
    if isinstance(value, Err):
        return Err(strip(value.error))
    return value


def stripped_eq(a: Any, b: Any) -> bool:
    return strip(a) == strip(b)


@dataclass(frozen=True, slots=True, eq=False)
class Stripped:
    """Wrapper comparing, hashing and ordering by the stripped value."""

    value: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stripped):
            return NotImplemented
        return strip(self.value) == strip(other.value)

    def __hash__(self) -> int:
        return hash(strip(self.value))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Stripped):
            return NotImplemented
        return strip(self.value) < strip(other.value)
