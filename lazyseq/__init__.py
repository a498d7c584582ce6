"""
Lazy, composable sequences over any iterable.

Chain map/filter/concat/zip over a producer without building intermediate
containers. A Seq is single-pass and is its own iterator.

Architecture:
- Seq: the wrapper, its chainable operations and its static constructors
- cursor: one state-holding iterator adapter per lazy operation
- step: Produced / Exhausted outcome of a single pull
"""

import logging

from ._errors import EmptyReductionError, NotFoundError
from ._helpers import inverse, same_value_zero
from ._types import Comparator, Item, Predicate, Reducer, SeqCallback
from .seq import Seq
from .step import Exhausted, Produced, Step

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Core
    "Seq",
    # Pull outcome
    "Step",
    "Produced",
    "Exhausted",
    # Errors
    "EmptyReductionError",
    "NotFoundError",
    # Helpers
    "inverse",
    "same_value_zero",
    # Types
    "SeqCallback",
    "Predicate",
    "Reducer",
    "Comparator",
    "Item",
)
