from __future__ import annotations

import pytest

from locspan import FileMismatchError, Location, LocationError, Span


def test_union_same_file() -> None:
    a = Location("f", Span(0, 3))
    b = Location("f", Span(2, 6))
    assert a.union(b) == Location("f", Span(0, 6))
    assert a | b == Location("f", Span(0, 6))


def test_union_different_files_is_recoverable_error() -> None:
    a = Location("f", Span(0, 3))
    b = Location("g", Span(2, 6))
    with pytest.raises(FileMismatchError) as e:
        a.union(b)
    assert e.value.left == "f"
    assert e.value.right == "g"
    assert "'f'" in str(e.value) and "'g'" in str(e.value)
    assert isinstance(e.value, LocationError)
    assert isinstance(e.value, ValueError)


def test_same_file_probe_never_raises() -> None:
    a = Location("f", Span(0, 3))
    assert a.same_file(Location("f", Span(10, 12)))
    assert not a.same_file(Location("g", Span(0, 3)))


def test_contains() -> None:
    outer = Location("f", Span(0, 10))
    assert outer.contains(Location("f", Span(2, 5)))
    assert outer.contains(Location("f", Span(0, 10)))
    assert not outer.contains(Location("f", Span(8, 12)))
    with pytest.raises(FileMismatchError) as e:
        outer.contains(Location("g", Span(2, 5)))
    assert e.value.operation == "contains"


def test_different_files_never_overlap() -> None:
    a = Location("f", Span(0, 10))
    b = Location("g", Span(0, 10))
    assert not a.overlaps(b)
    assert a.intersection(b) is None


def test_intersection_same_file() -> None:
    a = Location("f", Span(0, 10))
    assert a.intersection(Location("f", Span(5, 15))) == Location("f", Span(5, 10))
    assert a.intersection(Location("f", Span(10, 15))) is None
    assert a.overlaps(Location("f", Span(9, 15)))


def test_equality_requires_file_and_span() -> None:
    assert Location("f", Span(1, 2)) == Location("f", Span(1, 2))
    assert Location("f", Span(1, 2)) != Location("g", Span(1, 2))
    assert Location("f", Span(1, 2)) != Location("f", Span(1, 3))


def test_ordering_file_first_then_span() -> None:
    locs = [
        Location("b", Span(0, 1)),
        Location("a", Span(5, 6)),
        Location("a", Span(1, 9)),
        Location("a", Span(1, 2)),
    ]
    assert sorted(locs) == [
        Location("a", Span(1, 2)),
        Location("a", Span(1, 9)),
        Location("a", Span(5, 6)),
        Location("b", Span(0, 1)),
    ]


def test_integer_file_ids() -> None:
    a = Location(1, Span(4, 5))
    b = Location(0, Span(9, 10))
    assert sorted([a, b]) == [b, a]
    assert a.union(Location(1, Span(0, 1))) == Location(1, Span(0, 5))


def test_span_like_is_coerced() -> None:
    assert Location("f", (1, 4)).span == Span(1, 4)
    assert Location("f", range(2, 3)).span == Span(2, 3)
    assert Location("f", 7).span == Span(7, 7)
    with pytest.raises(TypeError):
        Location("f", "1..4")


def test_derived_locations() -> None:
    loc = Location("f", Span(2, 4))
    assert loc.parts() == ("f", Span(2, 4))
    assert loc.with_file("g") == Location("g", Span(2, 4))
    assert loc.with_span((0, 1)) == Location("f", Span(0, 1))
    assert loc.map_file(str.upper) == Location("F", Span(2, 4))
    assert loc.until(9) == Location("f", Span(2, 9))
    assert loc.extend(Span(7, 8)) == Location("f", Span(2, 8))
    assert loc == Location("f", Span(2, 4))


def test_locations_are_hashable() -> None:
    assert len({Location("f", Span(1, 2)), Location("f", (1, 2))}) == 1


def test_format() -> None:
    assert str(Location("main.src", Span(3, 8))) == "main.src@3..8"
