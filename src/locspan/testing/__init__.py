from __future__ import annotations

from .strategies import file_ids, locations, locs, non_empty_spans, offsets, spans

__all__ = [
    "file_ids",
    "locations",
    "locs",
    "non_empty_spans",
    "offsets",
    "spans",
]
