from __future__ import annotations

from .errors import FileMismatchError, LocationError
from .ext import (
    at,
    err_at,
    locate_optional,
    locate_result,
    map_loc_err,
    meta_transpose,
    split_optional,
    split_result,
    strip_optional,
    strip_result,
    transpose_result,
)
from .loc import Loc
from .location import Location
from .result import Err, Ok, Result
from .span import Span, SpanLike, Spanned, join_spans, to_span
from .strip import Stripped, strip, stripped_eq

__all__ = [
    "Err",
    "FileMismatchError",
    "Loc",
    "Location",
    "LocationError",
    "Ok",
    "Result",
    "Span",
    "SpanLike",
    "Spanned",
    "Stripped",
    "at",
    "err_at",
    "join_spans",
    "locate_optional",
    "locate_result",
    "map_loc_err",
    "meta_transpose",
    "split_optional",
    "split_result",
    "strip",
    "strip_optional",
    "strip_result",
    "stripped_eq",
    "to_span",
    "transpose_result",
]
