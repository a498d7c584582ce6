"""
Cursor adapters
===============

Each lazy Seq operation is one of these state-holding iterators layered
over the previous cursor. Once an adapter reports exhaustion it never
pulls upstream again.
"""

from .combine import ConcatCursor, ZipCursor
from .generate import CountCursor
from .transform import FilterCursor, MapCursor

__all__ = (
    "ConcatCursor",
    "CountCursor",
    "FilterCursor",
    "MapCursor",
    "ZipCursor",
)
