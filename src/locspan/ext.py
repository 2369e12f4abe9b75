"""Attach and strip locations through optionals and results.

The locate/strip/split helpers only touch the success payload: `None` and
`Err` go through unchanged. err_at() and map_loc_err() work on the error side
and leave `Ok` unchanged instead.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from .loc import Loc
from .location import Location
from .result import Err, Ok, Result


T = TypeVar("T")
E = TypeVar("E")
G = TypeVar("G")
F = TypeVar("F")


def at(value: T, location: Location[F]) -> Loc[T, F]:
    return Loc(value, location)


def locate_optional(value: T | None, location: Location[F]) -> Loc[T, F] | None:
    if value is None:
        return None
    return Loc(value, location)


def strip_optional(loc: Loc[T, F] | None) -> T | None:
    if loc is None:
        return None
    return loc.value


def split_optional(loc: Loc[T, F] | None) -> tuple[T | None, Location[F] | None]:
    if loc is None:
        return None, None
    return loc.unpack()


def meta_transpose(loc: Loc[T, F] | None, none_location: Callable[[], Location[F]]) -> Loc[T | None, F]:
    """Turn an optional located value into a located optional.

    `none_location` is only called when `loc` is None.
    """
    if loc is None:
        return Loc(None, none_location())
    return Loc(loc.value, loc.location)


def _check_result(result: object) -> None:
    if not isinstance(result, (Ok, Err)):
        raise TypeError(f"expected Ok or Err, got {type(result).__name__}")


def locate_result(result: Result[T, E], location: Location[F]) -> Result[Loc[T, F], E]:
    _check_result(result)
    if isinstance(result, Ok):
        return Ok(Loc(result.value, location))
    return result


def strip_result(result: Result[Loc[T, F], E]) -> Result[T, E]:
    _check_result(result)
    if isinstance(result, Ok):
        return Ok(result.value.value)
    return result


def split_result(result: Result[Loc[T, F], E]) -> tuple[Result[T, E], Location[F] | None]:
    """Separate the location from a located result.

    The location is None when the result is an Err.
    """
    _check_result(result)
    if isinstance(result, Ok):
        value, location = result.value.unpack()
        return Ok(value), location
    return result, None


def transpose_result(loc: Loc[Result[T, E], F]) -> Result[Loc[T, F], E]:
    """Move the location inside a located result; an Err loses it."""
    return locate_result(loc.value, loc.location)


def err_at(result: Result[T, E], location: Callable[[], Location[F]]) -> Result[T, Loc[E, F]]:
    """Locate the error of a result.

    `location` is only called for an Err, so callers can compute it lazily.
    """
    _check_result(result)
    if isinstance(result, Err):
        return Err(Loc(result.error, location()))
    return result


def map_loc_err(result: Result[T, Loc[E, F]], f: Callable[[E], G]) -> Result[T, Loc[G, F]]:
    """Map a located error, keeping its location."""
    _check_result(result)
    if isinstance(result, Err):
        return Err(result.error.map(f))
    return result
