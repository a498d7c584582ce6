"""
Core type definitions for lazyseq.

Aliases shared by the Seq class and the cursor adapters.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

if typing.TYPE_CHECKING:
    from .seq import Seq

# ============================================================================
# Callback aliases
# ============================================================================

# SeqCallback = (value, index, owning seq) -> result
# Callers may declare fewer leading parameters, see _helpers.bind_callback.
type SeqCallback[T, U] = Callable[..., U]

# Predicate = SeqCallback producing a truth value
type Predicate[T] = SeqCallback[T, bool]

# Reducer = (accumulator, value, index, owning seq) -> accumulator
type Reducer[T, A] = Callable[..., A]

# Comparator = three-way comparison, negative / zero / positive
type Comparator[T] = Callable[[T, T], int]

# Item = concat argument, either a wrapped Seq or a bare value
type Item[T] = Seq[T] | T

__all__ = (
    "SeqCallback",
    "Predicate",
    "Reducer",
    "Comparator",
    "Item",
)
